"""Student model for Pathway CRM."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from backend.app.db.base_class import Base
from backend.app.core.time import utc_now


class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, index=True)
    lead_id = Column(Integer, ForeignKey("leads.id"), nullable=True, unique=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    phone = Column(String, nullable=True)
    date_of_birth = Column(String, nullable=True)
    nationality = Column(String, nullable=True)
    passport_number = Column(String, nullable=True)
    academic_background = Column(Text, nullable=True)
    english_proficiency = Column(String, nullable=True)
    target_country = Column(String, nullable=True)
    target_program = Column(String, nullable=True)
    budget = Column(String, nullable=True)
    expectation = Column(String, nullable=True)
    consultancy_fee = Column(Boolean, nullable=False, default=False)
    scholarship = Column(Boolean, nullable=False, default=False)
    status = Column(String, nullable=False, default="active")
    notes = Column(Text, nullable=True)
    counselor_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    admission_officer_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    branch = Column(String, nullable=True)
    region = Column(String, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utc_now)
    updated_at = Column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)

    lead = relationship("Lead", back_populates="student", uselist=False)
    applications = relationship("Application", back_populates="student", cascade="all, delete-orphan")
    admissions = relationship("Admission", back_populates="student", cascade="all, delete-orphan")
