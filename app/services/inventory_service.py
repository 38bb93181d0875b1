from datetime import datetime
from typing import List
import logging

from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.models.inventory import InventoryItem
from app.models.food import Food
from app.models.fridge import Fridge
from app.schemas.notification import ExpiringItem
from app.utils.exceptions import ExpiryQueryError

logger = logging.getLogger(__name__)


class InventoryService:
    def __init__(self, db: Session):
        self.db = db

    def fetch_expiring(self, start: datetime, end: datetime) -> List[ExpiringItem]:
        """
        Aliments des frigos dont la date de péremption tombe dans [start, end]

        Retourne les lignes dénormalisées avec le nom de l'aliment et
        les identifiants du frigo et de son groupe.
        """
        try:
            rows = (
                self.db.query(
                    InventoryItem.id,
                    InventoryItem.expiry_date,
                    Food.name,
                    Fridge.id,
                    Fridge.group_id,
                )
                .join(Food, InventoryItem.food_id == Food.id)
                .join(Fridge, InventoryItem.fridge_id == Fridge.id)
                .filter(
                    InventoryItem.expiry_date >= start,
                    InventoryItem.expiry_date <= end,
                )
                .order_by(InventoryItem.expiry_date, InventoryItem.id)
                .all()
            )
        except SQLAlchemyError as e:
            raise ExpiryQueryError(f"Expiry query failed: {e}") from e

        return [
            ExpiringItem(
                id=item_id,
                expiry_date=expiry_date,
                food_name=food_name,
                fridge_id=fridge_id,
                group_id=group_id,
            )
            for item_id, expiry_date, food_name, fridge_id, group_id in rows
        ]
