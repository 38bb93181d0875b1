"""
Interfaces des collaborateurs de la passe de notification

Chaque interface couvre une seule capacité pour pouvoir être remplacée
par un faux en test. Les implémentations de production sont
InventoryService, GroupService et FirebasePushSender.
"""

from datetime import datetime
from typing import Dict, List, Optional, Protocol

from app.schemas.notification import ExpiringItem, GroupMemberTokens, MulticastResult


class FoodInventoryReader(Protocol):
    def fetch_expiring(self, start: datetime, end: datetime) -> List[ExpiringItem]:
        """Aliments dont la péremption est dans [start, end], bornes incluses"""
        ...


class GroupMembershipReader(Protocol):
    def fetch_members(self, group_id: int) -> List[GroupMemberTokens]:
        """Membres du groupe avec leurs jetons bruts (non filtrés)"""
        ...


class PushSender(Protocol):
    def send_multicast(
        self,
        tokens: List[str],
        title: str,
        body: str,
        data: Optional[Dict[str, str]] = None,
    ) -> MulticastResult:
        ...

    def send(
        self,
        token: str,
        title: str,
        body: str,
        data: Optional[Dict[str, str]] = None,
    ) -> str:
        ...
