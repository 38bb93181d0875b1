import logging
from typing import Optional

from jose import JWTError, jwt
from app.core.config import settings
from app.utils.exceptions import InvalidTokenException

logger = logging.getLogger(__name__)


def decode_token(token: str) -> dict:
    """
    Vérifie un jeton d'accès émis par le service d'authentification

    Les jetons sont signés en HS256 avec le secret JWT du projet et
    portent l'audience "authenticated".
    """
    options = {"verify_aud": bool(settings.JWT_AUDIENCE)}
    try:
        return jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
            audience=settings.JWT_AUDIENCE,
            options=options,
        )
    except JWTError as e:
        logger.warning(f"JWT decode error: {e}")
        raise InvalidTokenException("Token invalid or expired")


def get_token_email(payload: dict) -> Optional[str]:
    email = payload.get("email")
    if email:
        return email.strip().lower()
    return None
