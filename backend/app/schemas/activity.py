"""Activity trail schemas."""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from backend.app.schemas.common import CamelModel, ORMModel

FOLLOW_UP_ACTIVITY = "follow_up"


class ActivityCreate(CamelModel):
    """Manual activity (comment, call note, follow-up) added from a record's timeline."""

    entity_type: str
    entity_id: int
    activity_type: str = "comment"
    title: str = Field(min_length=1)
    description: Optional[str] = None
    follow_up_at: Optional[datetime] = None

    @model_validator(mode="after")
    def require_follow_up_time(self):
        if self.activity_type == FOLLOW_UP_ACTIVITY and self.follow_up_at is None:
            raise ValueError("followUpAt is required for follow-up activities")
        return self


class ActivityRead(ORMModel):
    id: int
    entity_type: str
    entity_id: int
    activity_type: str
    title: str
    description: Optional[str] = None
    field_name: Optional[str] = None
    old_value: Optional[str] = None
    new_value: Optional[str] = None
    user_id: Optional[int] = None
    user_name: Optional[str] = None
    created_at: datetime
