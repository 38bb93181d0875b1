from app.core.config import settings
from app.core.database import Base, engine, SessionLocal, get_db
from app.core.security import decode_token

__all__ = [
    "settings",
    "Base",
    "engine",
    "SessionLocal",
    "get_db",
    "decode_token",
]
