from dataclasses import dataclass
from typing import Optional
import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.security import decode_token, get_token_email
from app.models.user import User
from app.services.group_service import GroupService
from app.services.permission_service import PermissionService
from app.utils.exceptions import (
    InvalidTokenException,
    NoRolesAssignedException,
    InsufficientPermissionException,
)

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


@dataclass
class CurrentUser:
    """Utilisateur authentifié avec son groupe (None s'il n'en a pas)"""

    id: int
    email: str
    group_id: Optional[int]


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db),
) -> CurrentUser:
    if not credentials:
        raise InvalidTokenException("Authentication required")

    payload = decode_token(credentials.credentials)
    email = get_token_email(payload)
    if not email:
        raise InvalidTokenException("Invalid token payload")

    user = db.query(User).filter(func.lower(User.email) == email).first()
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )

    return CurrentUser(
        id=user.id,
        email=user.email,
        group_id=GroupService(db).get_user_group_id(user.id),
    )


def require_permission(permission_name: str):
    """
    Dépendance FastAPI : l'utilisateur doit avoir la permission via un rôle

    403 "No roles assigned" si aucun rôle, 403 "Forbidden: insufficient
    permissions" si la permission manque.
    """

    async def checker(
        current_user: CurrentUser = Depends(get_current_user),
        db: Session = Depends(get_db),
    ) -> CurrentUser:
        permission_service = PermissionService(db)

        role_ids = permission_service.get_user_role_ids(current_user.id)
        if not role_ids:
            raise NoRolesAssignedException()

        if permission_name not in permission_service.get_role_permissions(role_ids):
            logger.info(
                f"User {current_user.id} denied: missing permission {permission_name}"
            )
            raise InsufficientPermissionException()

        return current_user

    return checker
