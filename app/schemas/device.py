from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class DeviceTokenCreate(BaseModel):
    fcm_token: str
    platform: Optional[str] = None  # 'android', 'ios', 'web'


class DeviceResponse(BaseModel):
    id: int
    user_id: int
    fcm_token: Optional[str]
    platform: Optional[str]
    created_at: datetime
    last_active_at: Optional[datetime]

    class Config:
        from_attributes = True
