from pydantic_settings import BaseSettings
from typing import Optional, List


class Settings(BaseSettings):
    APP_NAME: str = "Household Food API"
    VERSION: str = "1.0.0"
    DEBUG: bool = False

    DATABASE_URL: str

    # Jetons émis par le service d'authentification de la plateforme
    JWT_SECRET: str
    JWT_ALGORITHM: str = "HS256"
    JWT_AUDIENCE: Optional[str] = "authenticated"

    # JSON du compte de service Firebase (contenu inline ou chemin de fichier)
    FIREBASE_CREDENTIALS: Optional[str] = None

    SCHEDULER_ENABLED: bool = True
    EXPIRY_NOTIFICATION_CRON: str = "*/2 * * * *"
    EXPIRY_NOTIFICATION_SINGLE_FLIGHT: bool = False
    EXPIRY_NOTIFICATION_MAX_INSTANCES: int = 3

    PUSH_RETRY_MAX_ATTEMPTS: int = 1
    PUSH_RETRY_BACKOFF_SECONDS: float = 0.0

    LOG_LEVEL: str = "INFO"

    ALLOWED_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
