from sqlalchemy import Column, Integer, String, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime
from app.core.database import Base


class Fridge(Base):
    __tablename__ = "fridges"

    id = Column(Integer, primary_key=True, index=True)
    group_id = Column(
        Integer, ForeignKey("groups.id", ondelete="CASCADE"), nullable=True, index=True
    )

    name = Column(String, nullable=False, default="Tủ lạnh")
    location = Column(String)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    group = relationship("Group", back_populates="fridges")
    items = relationship(
        "InventoryItem", back_populates="fridge", cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"<Fridge(id={self.id}, name={self.name}, group_id={self.group_id})>"
