from sqlalchemy import Column, Integer, Float, String, ForeignKey, DateTime, Index
from sqlalchemy.orm import relationship
from datetime import datetime
from app.core.database import Base


class InventoryItem(Base):
    __tablename__ = "fridge_food"

    id = Column(Integer, primary_key=True, index=True)
    fridge_id = Column(
        Integer, ForeignKey("fridges.id", ondelete="CASCADE"), nullable=False
    )
    food_id = Column(
        Integer, ForeignKey("foods.id", ondelete="CASCADE"), nullable=False
    )

    quantity = Column(Float, nullable=False, default=1)
    unit = Column(String)

    added_at = Column(DateTime, default=datetime.utcnow)
    # Horodatage UTC sans fuseau, comme stocké par la plateforme
    expiry_date = Column("expirydate", DateTime, index=True)

    fridge = relationship("Fridge", back_populates="items")
    food = relationship("Food", back_populates="inventory_items")

    __table_args__ = (
        Index("ix_fridge_food_fridge_expiry", "fridge_id", "expirydate"),
    )

    def __repr__(self):
        return f"<InventoryItem(id={self.id}, food_id={self.food_id}, expiry={self.expiry_date})>"
