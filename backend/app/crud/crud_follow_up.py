"""CRUD operations for follow-ups."""

import logging
from datetime import datetime
from typing import Iterable, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from backend.app.core.time import to_naive_utc
from backend.app.crud.entities import resolve_entity
from backend.app.models.follow_up import FollowUp
from backend.app.models.user import User
from backend.app.schemas.follow_up import FollowUpCreate

logger = logging.getLogger(__name__)


class CRUDFollowUp:
    def create(self, db: Session, *, obj_in: FollowUpCreate, actor: User, commit: bool = True) -> FollowUp:
        """Schedule a follow-up for the caller on a record they can see."""
        resolve_entity(db, obj_in.entity_type, obj_in.entity_id, user_id=actor.id, user_role=actor.role)
        follow_up = FollowUp(
            entity_type=obj_in.entity_type,
            entity_id=obj_in.entity_id,
            user_id=actor.id,
            comments=obj_in.comments,
            follow_up_on=to_naive_utc(obj_in.follow_up_on),
        )
        db.add(follow_up)
        if commit:
            db.commit()
            db.refresh(follow_up)
            logger.info("Follow-up %s scheduled by user %s", follow_up.id, actor.id)
        return follow_up

    def get_multi_for_user(
        self,
        db: Session,
        *,
        user_id: int,
        start: datetime,
        end: datetime,
        entity_types: Optional[Iterable[str]] = None,
    ) -> List[FollowUp]:
        """The user's follow-ups due within [start, end], soonest first."""
        query = db.query(FollowUp).filter(
            FollowUp.user_id == user_id,
            FollowUp.follow_up_on >= to_naive_utc(start),
            FollowUp.follow_up_on <= to_naive_utc(end),
        )
        types = [value.lower() for value in entity_types or ()]
        if types:
            query = query.filter(func.lower(FollowUp.entity_type).in_(types))
        return query.order_by(FollowUp.follow_up_on.asc(), FollowUp.id.asc()).all()


follow_up_crud = CRUDFollowUp()
