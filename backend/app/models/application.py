"""University application model."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from backend.app.db.base_class import Base
from backend.app.core.time import utc_now


class Application(Base):
    __tablename__ = "applications"

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("students.id"), nullable=False, index=True)
    university = Column(String, nullable=False)
    program = Column(String, nullable=False)
    course_type = Column(String, nullable=True)
    country = Column(String, nullable=True)
    intake = Column(String, nullable=True)
    app_status = Column(String, nullable=False, default="Open")
    case_status = Column(String, nullable=False, default="Raw")
    channel_partner = Column(String, nullable=True)
    google_drive_link = Column(String, nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utc_now)
    updated_at = Column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)

    student = relationship("Student", back_populates="applications")
    admissions = relationship("Admission", back_populates="application", cascade="all, delete-orphan")
