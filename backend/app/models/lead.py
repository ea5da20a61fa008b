"""Lead model for Pathway CRM."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from backend.app.db.base_class import Base
from backend.app.core.time import utc_now


class Lead(Base):
    __tablename__ = "leads"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    phone = Column(String, nullable=True)
    city = Column(String, nullable=True)
    country = Column(String, nullable=True)
    program = Column(String, nullable=True)
    source = Column(String, nullable=True)
    type = Column(String, nullable=True)
    status = Column(String, nullable=False, default="new")
    expectation = Column(String, nullable=True)
    study_level = Column(String, nullable=True)
    study_plan = Column(String, nullable=True)
    elt = Column(String, nullable=True)
    is_lost = Column(Boolean, nullable=False, default=False)
    lost_reason = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
    counselor_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    branch = Column(String, nullable=True)
    region = Column(String, nullable=True)
    created_by = Column(Integer, ForeignKey("users.id"), nullable=True)
    updated_by = Column(Integer, ForeignKey("users.id"), nullable=True)
    created_at = Column(DateTime, nullable=False, default=utc_now)
    updated_at = Column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)

    counselor = relationship("User", foreign_keys=[counselor_id])
    student = relationship("Student", back_populates="lead", uselist=False)
