from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime
from app.core.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    # Lien avec le compte du service d'authentification
    email = Column(String, unique=True, index=True, nullable=False)
    name = Column(String)
    language = Column(String, default="vi")
    timezone = Column(String, default="UTC")

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    memberships = relationship(
        "GroupMember", back_populates="user", cascade="all, delete-orphan"
    )
    devices = relationship(
        "UserDevice", back_populates="user", cascade="all, delete-orphan"
    )
    roles = relationship(
        "UserRole", back_populates="user", cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email}, name={self.name})>"
