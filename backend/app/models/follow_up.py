"""Scheduled follow-ups shown on a staff member's calendar."""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, Text

from backend.app.db.base_class import Base
from backend.app.core.time import utc_now


class FollowUp(Base):
    __tablename__ = "follow_ups"
    __table_args__ = (Index("ix_follow_ups_user_due", "user_id", "follow_up_on"),)

    id = Column(Integer, primary_key=True, index=True)
    entity_type = Column(String(50), nullable=False)
    entity_id = Column(Integer, nullable=False)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    comments = Column(Text, nullable=True)
    follow_up_on = Column(DateTime, nullable=False)
    created_at = Column(DateTime, nullable=False, default=utc_now)
    updated_at = Column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)
