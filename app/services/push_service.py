import json
import logging
import threading
from typing import Any, Dict, List, Optional

import firebase_admin
from firebase_admin import credentials, messaging
from firebase_admin.exceptions import FirebaseError

from app.core.config import settings
from app.schemas.notification import MulticastResult, SendResponse
from app.utils.exceptions import PushDeliveryError, PushNotConfiguredError

logger = logging.getLogger(__name__)

_init_lock = threading.Lock()


def sanitize_fcm_data(data: Optional[Dict[str, Any]]) -> Dict[str, str]:
    """FCM n'accepte que des valeurs de type chaîne dans `data`"""
    if not data:
        return {}

    safe_data = {}
    for key, value in data.items():
        if value is None:
            safe_data[key] = ""
        elif isinstance(value, bool):
            safe_data[key] = "true" if value else "false"
        else:
            safe_data[key] = str(value)

    return safe_data


def _load_certificate(raw: str) -> credentials.Certificate:
    raw = raw.strip()
    if raw.startswith("{"):
        return credentials.Certificate(json.loads(raw))
    return credentials.Certificate(raw)


def get_firebase_app(raw_credentials: Optional[str] = None) -> firebase_admin.App:
    """Initialise l'application Firebase par défaut une seule fois"""
    with _init_lock:
        if firebase_admin._apps:
            return firebase_admin.get_app()

        raw_credentials = raw_credentials or settings.FIREBASE_CREDENTIALS
        if not raw_credentials:
            raise PushNotConfiguredError("FIREBASE_CREDENTIALS is not set")

        app = firebase_admin.initialize_app(_load_certificate(raw_credentials))
        logger.info("Firebase Admin SDK initialized")
        return app


class FirebasePushSender:
    def __init__(self, app: Optional[firebase_admin.App] = None):
        self._app = app

    @property
    def app(self) -> firebase_admin.App:
        if self._app is None:
            self._app = get_firebase_app()
        return self._app

    def send_multicast(
        self,
        tokens: List[str],
        title: str,
        body: str,
        data: Optional[Dict[str, Any]] = None,
    ) -> MulticastResult:
        message = messaging.MulticastMessage(
            tokens=list(tokens),
            notification=messaging.Notification(title=title, body=body),
            data=sanitize_fcm_data(data),
        )

        try:
            batch = messaging.send_each_for_multicast(message, app=self.app)
        except (FirebaseError, ValueError) as e:
            raise PushDeliveryError(f"Multicast send failed: {e}") from e

        return MulticastResult(
            responses=[
                SendResponse(
                    success=r.success,
                    message_id=r.message_id,
                    error=str(r.exception) if r.exception else None,
                )
                for r in batch.responses
            ]
        )

    def send(
        self,
        token: str,
        title: str,
        body: str,
        data: Optional[Dict[str, Any]] = None,
    ) -> str:
        message = messaging.Message(
            token=token,
            notification=messaging.Notification(title=title, body=body),
            data=sanitize_fcm_data(data),
        )

        try:
            return messaging.send(message, app=self.app)
        except (FirebaseError, ValueError) as e:
            raise PushDeliveryError(f"Push send failed: {e}") from e
