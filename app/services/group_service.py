from typing import List, Optional, Dict
import logging

from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.models.group import GroupMember
from app.models.device import UserDevice
from app.schemas.notification import GroupMemberTokens
from app.utils.exceptions import MembershipLookupError

logger = logging.getLogger(__name__)


class GroupService:
    def __init__(self, db: Session):
        self.db = db

    def fetch_members(self, group_id: int) -> List[GroupMemberTokens]:
        """
        Membres d'un groupe avec les jetons FCM de leurs appareils

        Les jetons sont renvoyés tels que stockés ; le filtrage des
        valeurs invalides est fait par l'appelant.
        """
        try:
            rows = (
                self.db.query(GroupMember.user_id, UserDevice.fcm_token)
                .outerjoin(UserDevice, UserDevice.user_id == GroupMember.user_id)
                .filter(GroupMember.group_id == group_id)
                .order_by(GroupMember.id, UserDevice.id)
                .all()
            )
        except SQLAlchemyError as e:
            raise MembershipLookupError(group_id, str(e)) from e

        members: Dict[int, GroupMemberTokens] = {}
        for user_id, fcm_token in rows:
            member = members.setdefault(user_id, GroupMemberTokens(user_id=user_id))
            if fcm_token is not None:
                member.tokens.append(fcm_token)

        return list(members.values())

    def get_user_group_id(self, user_id: int) -> Optional[int]:
        membership = (
            self.db.query(GroupMember)
            .filter(GroupMember.user_id == user_id)
            .order_by(GroupMember.id)
            .first()
        )
        return membership.group_id if membership else None
