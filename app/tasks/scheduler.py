"""
Configuration du scheduler pour les tâches périodiques
"""

from datetime import datetime

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.cron import CronTrigger
from app.tasks.expiry_notifier import run_expiry_notification_pass
from app.core.config import settings
import logging

logger = logging.getLogger(__name__)
scheduler = BackgroundScheduler(timezone="UTC")

EXPIRY_NOTIFICATION_JOB_ID = "expiry_notification"


def register_jobs(target: BackgroundScheduler = scheduler):
    """
    Enregistre les tâches planifiées

    1. Notification des aliments proches de la péremption
       (EXPIRY_NOTIFICATION_CRON, toutes les 2 minutes par défaut)
    """
    single_flight = settings.EXPIRY_NOTIFICATION_SINGLE_FLIGHT

    target.add_job(
        run_expiry_notification_pass,
        trigger=CronTrigger.from_crontab(settings.EXPIRY_NOTIFICATION_CRON, timezone="UTC"),
        id=EXPIRY_NOTIFICATION_JOB_ID,
        name="Push notifications for food expiring soon",
        replace_existing=True,
        coalesce=False,
        max_instances=1 if single_flight else settings.EXPIRY_NOTIFICATION_MAX_INSTANCES,
        misfire_grace_time=60,
    )
    logger.info(
        f"✓ Scheduled: Expiry notification ({settings.EXPIRY_NOTIFICATION_CRON}, "
        f"single_flight={single_flight})"
    )


def start_scheduler():
    if not settings.SCHEDULER_ENABLED:
        logger.warning("Scheduler is disabled in settings")
        return

    if scheduler.running:
        return

    logger.info("Starting scheduler...")
    register_jobs(scheduler)
    scheduler.start()
    logger.info("Scheduler started successfully")

    for job in scheduler.get_jobs():
        logger.info(f"  - {job.name} (ID: {job.id}, Next run: {job.next_run_time})")


def stop_scheduler():
    if not scheduler.running:
        return

    logger.info("Stopping scheduler...")
    scheduler.shutdown(wait=True)
    logger.info("Scheduler stopped")


def get_scheduler_status(target: BackgroundScheduler = scheduler):
    if not target.running:
        return {"running": False, "jobs": []}

    jobs = []
    for job in target.get_jobs():
        jobs.append(
            {
                "id": job.id,
                "name": job.name,
                "next_run": (
                    job.next_run_time.isoformat() if job.next_run_time else None
                ),
                "trigger": str(job.trigger),
            }
        )

    return {"running": True, "jobs": jobs}


def trigger_job_manually(job_id: str, target: BackgroundScheduler = scheduler) -> bool:
    """
    Avance la prochaine exécution d'une tâche à maintenant

    Retourne False si la tâche n'existe pas.
    """
    job = target.get_job(job_id)
    if not job:
        logger.warning(f"Job {job_id} not found")
        return False

    logger.info(f"🔧 Manually triggering job: {job_id}")
    job.modify(next_run_time=datetime.now(target.timezone))
    return True
