from pydantic import BaseModel, Field
from typing import Optional, List, Dict
from datetime import datetime


class ExpiringItem(BaseModel):
    """Ligne fridge_food dénormalisée (nom de l'aliment, frigo, groupe)"""

    id: int
    expiry_date: datetime
    food_name: str
    fridge_id: int
    group_id: Optional[int] = None


class GroupMemberTokens(BaseModel):
    user_id: int
    tokens: List[Optional[str]] = Field(default_factory=list)


class PushMessage(BaseModel):
    title: str
    body: str
    data: Dict[str, str] = Field(default_factory=dict)


class SendResponse(BaseModel):
    success: bool
    message_id: Optional[str] = None
    error: Optional[str] = None


class MulticastResult(BaseModel):
    responses: List[SendResponse] = Field(default_factory=list)

    @property
    def success_count(self) -> int:
        return sum(1 for r in self.responses if r.success)

    @property
    def failure_count(self) -> int:
        return len(self.responses) - self.success_count


class PassReport(BaseModel):
    """Bilan d'une passe de notification"""

    started_at: datetime
    window_start: Optional[datetime] = None
    window_end: Optional[datetime] = None
    items_found: int = 0
    items_skipped: int = 0
    members_notified: int = 0
    tokens_attempted: int = 0
    tokens_succeeded: int = 0
    aborted: bool = False
    skipped: bool = False
    error: Optional[str] = None
