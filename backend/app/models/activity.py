"""Append-only activity trail attached to any CRM record."""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, Text

from backend.app.db.base_class import Base
from backend.app.core.time import utc_now


class Activity(Base):
    __tablename__ = "activities"
    __table_args__ = (Index("ix_activities_entity", "entity_type", "entity_id"),)

    id = Column(Integer, primary_key=True, index=True)
    entity_type = Column(String(50), nullable=False)
    entity_id = Column(Integer, nullable=False)
    activity_type = Column(String(50), nullable=False)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    field_name = Column(String(100), nullable=True)
    old_value = Column(Text, nullable=True)
    new_value = Column(Text, nullable=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    user_name = Column(String, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utc_now)
