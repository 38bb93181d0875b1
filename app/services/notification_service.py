from datetime import datetime, timezone
from typing import Callable, Dict
import logging

from app.schemas.notification import (
    ExpiringItem,
    GroupMemberTokens,
    PassReport,
    PushMessage,
)
from app.services.contracts import (
    FoodInventoryReader,
    GroupMembershipReader,
    PushSender,
)
from app.utils.date_helpers import expiry_window, format_window_bound
from app.utils.retry import RetryPolicy, NO_RETRY
from app.utils.validators import clean_tokens

logger = logging.getLogger(__name__)

EXPIRY_NOTIFICATION_TITLE = "⏰ Thực phẩm sắp hết hạn"
EXPIRY_NOTIFICATION_BODY = "{food_name} sẽ hết hạn trong 24h"
EXPIRY_NOTIFICATION_TYPE = "FOOD_EXPIRED"


def build_expiry_message(item: ExpiringItem) -> PushMessage:
    data: Dict[str, str] = {
        "fridgeId": str(item.fridge_id),
        "foodName": item.food_name,
        "groupId": str(item.group_id),
        "expirydate": item.expiry_date.isoformat(),
        "type": EXPIRY_NOTIFICATION_TYPE,
    }
    return PushMessage(
        title=EXPIRY_NOTIFICATION_TITLE,
        body=EXPIRY_NOTIFICATION_BODY.format(food_name=item.food_name),
        data=data,
    )


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ExpiryNotificationService:
    """
    Passe de notification des aliments proches de la péremption

    1. Calcule la fenêtre [aujourd'hui 00:00:00, demain 23:59:59]
    2. Récupère les aliments qui expirent dans la fenêtre
    3. Pour chaque aliment, résout les membres du groupe du frigo
    4. Envoie un push multicast par membre (tous ses appareils)

    Tout est séquentiel et rien n'est conservé entre deux passes :
    deux passes consécutives sur les mêmes données envoient les mêmes
    notifications.
    """

    def __init__(
        self,
        inventory: FoodInventoryReader,
        memberships: GroupMembershipReader,
        push: PushSender,
        retry_policy: RetryPolicy = NO_RETRY,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.inventory = inventory
        self.memberships = memberships
        self.push = push
        self.retry_policy = retry_policy
        self.clock = clock

    def run(self) -> PassReport:
        """Exécute une passe complète ; ne lève jamais d'exception"""
        now = self.clock()
        report = PassReport(started_at=now)
        logger.info("⏰ Running expiry notification pass...")

        try:
            start, end = expiry_window(now)
            report.window_start, report.window_end = start, end
            logger.info(
                f"Checking items expiring between "
                f"{format_window_bound(start)} and {format_window_bound(end)}"
            )

            try:
                items = self.retry_policy.call(self.inventory.fetch_expiring, start, end)
            except Exception as e:
                logger.error(f"Expiry query failed, aborting pass: {e}", exc_info=True)
                report.aborted = True
                report.error = str(e)
                return report

            report.items_found = len(items)
            logger.info(f"Found {len(items)} items expiring soon")

            for item in items:
                self._notify_item(item, report)

        except Exception as e:
            logger.error(f"Expiry notification pass failed: {e}", exc_info=True)
            report.aborted = True
            report.error = str(e)

        logger.info(
            f"Expiry notification pass done. Items={report.items_found}, "
            f"skipped={report.items_skipped}, members={report.members_notified}, "
            f"pushed={report.tokens_succeeded}/{report.tokens_attempted}"
        )
        return report

    def _notify_item(self, item: ExpiringItem, report: PassReport) -> None:
        if item.group_id is None:
            logger.warning(f"Item {item.id} (fridge {item.fridge_id}) has no group, skipping")
            report.items_skipped += 1
            return

        try:
            members = self.retry_policy.call(self.memberships.fetch_members, item.group_id)
        except Exception as e:
            logger.error(f"Member query error for group {item.group_id}: {e}")
            report.items_skipped += 1
            return

        if not members:
            logger.warning(f"No members in group {item.group_id}")
            return

        message = build_expiry_message(item)
        for member in members:
            self._notify_member(member, message, report)

    def _notify_member(
        self, member: GroupMemberTokens, message: PushMessage, report: PassReport
    ) -> None:
        tokens = clean_tokens(member.tokens)
        if not tokens:
            logger.info(f"No valid device tokens for user {member.user_id}, skipping")
            return

        try:
            result = self.retry_policy.call(
                self.push.send_multicast, tokens, message.title, message.body, message.data
            )
        except Exception as e:
            logger.error(f"Push to user {member.user_id} failed: {e}")
            report.tokens_attempted += len(tokens)
            return

        for token, response in zip(tokens, result.responses):
            if not response.success:
                logger.error(f"❌ Invalid token: {token} {response.error or ''}".rstrip())

        report.members_notified += 1
        report.tokens_attempted += len(tokens)
        report.tokens_succeeded += result.success_count
        logger.info(
            f"🔔 Pushed {result.success_count}/{len(tokens)} → user {member.user_id}"
        )
