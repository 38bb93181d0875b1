from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, UniqueConstraint
from sqlalchemy.orm import relationship
from datetime import datetime
from app.core.database import Base


class UserDevice(Base):
    """
    Appareil mobile d'un utilisateur enregistré pour les notifications push
    """

    __tablename__ = "user_devices"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    fcm_token = Column(String, nullable=True)
    platform = Column(String)  # 'android', 'ios', 'web'

    created_at = Column(DateTime, default=datetime.utcnow)
    last_active_at = Column(DateTime, default=datetime.utcnow)

    user = relationship("User", back_populates="devices")

    __table_args__ = (UniqueConstraint("user_id", "fcm_token"),)

    def __repr__(self):
        return f"<UserDevice(id={self.id}, user_id={self.user_id}, platform={self.platform})>"
