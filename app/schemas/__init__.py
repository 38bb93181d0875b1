from app.schemas.notification import (
    ExpiringItem,
    GroupMemberTokens,
    PushMessage,
    SendResponse,
    MulticastResult,
    PassReport,
)
from app.schemas.device import DeviceTokenCreate, DeviceResponse
from app.schemas.scheduler import ScheduledJob, SchedulerStatus, JobTriggerResponse

__all__ = [
    "ExpiringItem",
    "GroupMemberTokens",
    "PushMessage",
    "SendResponse",
    "MulticastResult",
    "PassReport",
    "DeviceTokenCreate",
    "DeviceResponse",
    "ScheduledJob",
    "SchedulerStatus",
    "JobTriggerResponse",
]
