from typing import List, Set
from sqlalchemy.orm import Session

from app.models.role import Permission, RolePermission, UserRole


class PermissionService:
    """
    Résolution des permissions : utilisateur -> rôles -> permissions
    """

    def __init__(self, db: Session):
        self.db = db

    def get_user_role_ids(self, user_id: int) -> List[int]:
        rows = (
            self.db.query(UserRole.role_id)
            .filter(UserRole.user_id == user_id)
            .all()
        )
        return [role_id for (role_id,) in rows]

    def get_role_permissions(self, role_ids: List[int]) -> Set[str]:
        if not role_ids:
            return set()

        rows = (
            self.db.query(Permission.name)
            .join(RolePermission, RolePermission.permission_id == Permission.id)
            .filter(RolePermission.role_id.in_(role_ids))
            .all()
        )
        return {name for (name,) in rows}

    def get_user_permissions(self, user_id: int) -> Set[str]:
        return self.get_role_permissions(self.get_user_role_ids(user_id))

    def has_permission(self, user_id: int, permission_name: str) -> bool:
        return permission_name in self.get_user_permissions(user_id)
