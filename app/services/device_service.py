from datetime import datetime
from typing import List, Optional
import logging

from sqlalchemy.orm import Session

from app.middleware.transaction_handler import transactional
from app.models.device import UserDevice
from app.utils.exceptions import InvalidPushTokenException
from app.utils.validators import is_valid_push_token

logger = logging.getLogger(__name__)


class DeviceService:
    def __init__(self, db: Session):
        self.db = db

    @transactional
    def register_token(
        self, user_id: int, fcm_token: str, platform: Optional[str] = None
    ) -> UserDevice:
        """
        Enregistre le jeton FCM d'un appareil pour l'utilisateur

        Un jeton déjà connu pour cet utilisateur est simplement rafraîchi.
        Les valeurs vides, "null" et "undefined" sont refusées.
        """
        if not is_valid_push_token(fcm_token):
            raise InvalidPushTokenException()

        fcm_token = fcm_token.strip()
        device = self._find(user_id, fcm_token)

        if device:
            device.last_active_at = datetime.utcnow()
            if platform:
                device.platform = platform
        else:
            device = UserDevice(user_id=user_id, fcm_token=fcm_token, platform=platform)
            self.db.add(device)
            logger.info(f"Registered push token for user {user_id} ({platform or 'unknown'})")

        self.db.flush()
        return device

    def list_tokens(self, user_id: int) -> List[UserDevice]:
        return (
            self.db.query(UserDevice)
            .filter(UserDevice.user_id == user_id)
            .order_by(UserDevice.id)
            .all()
        )

    @transactional
    def remove_token(self, user_id: int, fcm_token: str) -> bool:
        device = self._find(user_id, fcm_token)

        if not device:
            return False

        self.db.delete(device)
        return True

    def _find(self, user_id: int, fcm_token: str) -> Optional[UserDevice]:
        return (
            self.db.query(UserDevice)
            .filter(UserDevice.user_id == user_id, UserDevice.fcm_token == fcm_token)
            .first()
        )
