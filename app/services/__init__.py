"""
Business logic services
"""

from app.services.inventory_service import InventoryService
from app.services.group_service import GroupService
from app.services.push_service import FirebasePushSender
from app.services.device_service import DeviceService
from app.services.permission_service import PermissionService
from app.services.notification_service import ExpiryNotificationService

__all__ = [
    "InventoryService",
    "GroupService",
    "FirebasePushSender",
    "DeviceService",
    "PermissionService",
    "ExpiryNotificationService",
]
