"""
API v1 routes
"""

from fastapi import APIRouter
from app.api.v1 import devices, admin

api_router = APIRouter()

api_router.include_router(devices.router)
api_router.include_router(admin.router)

__all__ = ["api_router"]
