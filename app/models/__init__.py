from app.models.user import User
from app.models.group import Group, GroupMember
from app.models.fridge import Fridge
from app.models.food import Food
from app.models.inventory import InventoryItem
from app.models.device import UserDevice
from app.models.role import Role, Permission, UserRole, RolePermission

__all__ = [
    "User",
    "Group",
    "GroupMember",
    "Fridge",
    "Food",
    "InventoryItem",
    "UserDevice",
    "Role",
    "Permission",
    "UserRole",
    "RolePermission",
]
