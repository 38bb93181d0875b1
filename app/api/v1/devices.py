from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List

from app.core.database import get_db
from app.core.dependencies import CurrentUser, get_current_user
from app.services.device_service import DeviceService
from app.schemas.device import DeviceTokenCreate, DeviceResponse

router = APIRouter(prefix="/users/me/devices", tags=["Devices"])


@router.post("", response_model=DeviceResponse, status_code=201)
def register_device(
    payload: DeviceTokenCreate,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Enregistre le jeton FCM de l'appareil courant

    Appelé par l'application mobile après chaque connexion et à chaque
    rafraîchissement du jeton par Firebase.
    """
    return DeviceService(db).register_token(
        user_id=current_user.id,
        fcm_token=payload.fcm_token,
        platform=payload.platform,
    )


@router.get("", response_model=List[DeviceResponse])
def list_devices(
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return DeviceService(db).list_tokens(current_user.id)


@router.delete("/{fcm_token}", status_code=204)
def unregister_device(
    fcm_token: str,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Supprime un jeton (déconnexion de l'appareil)"""
    if not DeviceService(db).remove_token(current_user.id, fcm_token):
        raise HTTPException(status_code=404, detail="Device token not found")

    return None
