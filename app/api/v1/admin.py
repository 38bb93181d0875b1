from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from app.core.dependencies import CurrentUser, require_permission
from app.schemas.notification import PassReport
from app.schemas.scheduler import SchedulerStatus, JobTriggerResponse
from app.tasks.expiry_notifier import run_expiry_notification_pass
from app.tasks.scheduler import get_scheduler_status, trigger_job_manually
from app.utils.exceptions import JobNotFoundException

MANAGE_NOTIFICATIONS = "manage_notifications"

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.get("/scheduler", response_model=SchedulerStatus)
def scheduler_status(
    current_user: CurrentUser = Depends(require_permission(MANAGE_NOTIFICATIONS)),
):
    return get_scheduler_status()


@router.post("/scheduler/{job_id}/run", response_model=JobTriggerResponse)
def trigger_job(
    job_id: str,
    current_user: CurrentUser = Depends(require_permission(MANAGE_NOTIFICATIONS)),
):
    """Avance la prochaine exécution de la tâche à maintenant"""
    if not trigger_job_manually(job_id):
        raise JobNotFoundException(job_id)

    return {"job_id": job_id, "triggered": True}


@router.post("/notifications/expiry/run", response_model=PassReport)
def run_expiry_notifications(
    current_user: CurrentUser = Depends(require_permission(MANAGE_NOTIFICATIONS)),
):
    """
    Exécute immédiatement une passe de notification et renvoie son bilan

    Passe synchrone, sans passer par le scheduler.
    """
    report = run_expiry_notification_pass()
    if report is None:
        return PassReport(started_at=datetime.now(timezone.utc), skipped=True)
    return report
