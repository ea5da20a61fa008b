"""Follow-up calendar schemas."""

from datetime import datetime
from typing import List, Optional

from pydantic import computed_field

from backend.app.core.time import to_naive_utc, utc_now
from backend.app.schemas.common import CamelModel, ORMModel


class FollowUpCreate(CamelModel):
    entity_type: str
    entity_id: int
    comments: Optional[str] = None
    follow_up_on: datetime


class FollowUpRead(ORMModel):
    id: int
    entity_type: str
    entity_id: int
    user_id: int
    comments: Optional[str] = None
    follow_up_on: datetime
    created_at: datetime
    updated_at: datetime

    @computed_field
    @property
    def status(self) -> str:
        """'overdue' once the scheduled time has passed, otherwise 'upcoming'."""
        return "overdue" if to_naive_utc(self.follow_up_on) < to_naive_utc(utc_now()) else "upcoming"


class FollowUpListMeta(CamelModel):
    start: datetime
    end: datetime
    total: int


class FollowUpList(CamelModel):
    data: List[FollowUpRead]
    meta: FollowUpListMeta
