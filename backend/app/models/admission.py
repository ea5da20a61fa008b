"""Admission outcome model."""

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from backend.app.db.base_class import Base
from backend.app.core.time import utc_now


class Admission(Base):
    __tablename__ = "admissions"

    id = Column(Integer, primary_key=True, index=True)
    application_id = Column(Integer, ForeignKey("applications.id"), nullable=False, index=True)
    student_id = Column(Integer, ForeignKey("students.id"), nullable=False, index=True)
    university = Column(String, nullable=False)
    program = Column(String, nullable=False)
    decision = Column(String, nullable=False)
    decision_date = Column(Date, nullable=True)
    full_tuition_fee = Column(Numeric(12, 2), nullable=True)
    net_tuition_fee = Column(Numeric(12, 2), nullable=True)
    initial_deposit = Column(Numeric(12, 2), nullable=True)
    deposit_date = Column(Date, nullable=True)
    scholarship_amount = Column(Numeric(12, 2), nullable=True)
    visa_status = Column(String, nullable=False, default="pending")
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utc_now)
    updated_at = Column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)

    application = relationship("Application", back_populates="admissions")
    student = relationship("Student", back_populates="admissions")
