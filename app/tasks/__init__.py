from app.tasks.scheduler import (
    start_scheduler,
    stop_scheduler,
    get_scheduler_status,
    trigger_job_manually,
    EXPIRY_NOTIFICATION_JOB_ID,
)
from app.tasks.expiry_notifier import run_expiry_notification_pass

__all__ = [
    "start_scheduler",
    "stop_scheduler",
    "get_scheduler_status",
    "trigger_job_manually",
    "EXPIRY_NOTIFICATION_JOB_ID",
    "run_expiry_notification_pass",
]
