from sqlalchemy import Column, Integer, String, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime
from app.core.database import Base


class Food(Base):
    """Entrée du dictionnaire d'aliments d'un utilisateur"""

    __tablename__ = "foods"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    category = Column(String)
    default_unit = Column(String, default="piece")
    image_url = Column(String)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"))

    created_at = Column(DateTime, default=datetime.utcnow)

    inventory_items = relationship("InventoryItem", back_populates="food")

    def __repr__(self):
        return f"<Food(id={self.id}, name={self.name})>"
