import threading
import logging
from datetime import datetime, timezone
from typing import Optional

from app.core.config import settings
from app.core.database import SessionLocal
from app.schemas.notification import PassReport
from app.services.contracts import PushSender
from app.services.group_service import GroupService
from app.services.inventory_service import InventoryService
from app.services.notification_service import ExpiryNotificationService
from app.services.push_service import FirebasePushSender
from app.utils.retry import RetryPolicy

logger = logging.getLogger(__name__)

_pass_lock = threading.Lock()


def build_retry_policy() -> RetryPolicy:
    return RetryPolicy(
        max_attempts=settings.PUSH_RETRY_MAX_ATTEMPTS,
        backoff_seconds=settings.PUSH_RETRY_BACKOFF_SECONDS,
    )


def run_expiry_notification_pass(
    push_sender: Optional[PushSender] = None,
    single_flight: Optional[bool] = None,
) -> Optional[PassReport]:
    """
    Point d'entrée du scheduler pour la passe de notification

    Ne lève jamais : une erreur est journalisée et la prochaine passe
    planifiée s'exécute normalement. Avec single_flight, une passe
    déclenchée pendant qu'une autre tourne est ignorée (retourne None).
    """
    if single_flight is None:
        single_flight = settings.EXPIRY_NOTIFICATION_SINGLE_FLIGHT

    if single_flight and not _pass_lock.acquire(blocking=False):
        logger.warning("Expiry notification pass already running, skipping this firing")
        return None

    try:
        return _run_pass(push_sender)
    finally:
        if single_flight:
            _pass_lock.release()


def _run_pass(push_sender: Optional[PushSender]) -> PassReport:
    db = None
    try:
        db = SessionLocal()
        service = ExpiryNotificationService(
            inventory=InventoryService(db),
            memberships=GroupService(db),
            push=push_sender or FirebasePushSender(),
            retry_policy=build_retry_policy(),
        )
        return service.run()
    except Exception as e:
        logger.error(f"Error during expiry notification task: {e}", exc_info=True)
        return PassReport(
            started_at=datetime.now(timezone.utc), aborted=True, error=str(e)
        )
    finally:
        if db is not None:
            db.close()
