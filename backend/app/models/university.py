"""University reference data: institutions, their courses, intakes and accepted English tests."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from backend.app.db.base_class import Base
from backend.app.core.time import utc_now


class University(Base):
    __tablename__ = "universities"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    country = Column(String, nullable=True)
    website = Column(String, nullable=True)
    campus_city = Column(String, nullable=True)
    about = Column(Text, nullable=True)
    cover_image_url = Column(String, nullable=True)
    logo_image_url = Column(String, nullable=True)
    total_fees = Column(Numeric(12, 2), nullable=True)
    initial_deposit_amount = Column(Numeric(12, 2), nullable=True)
    scholarship_fee = Column(Numeric(12, 2), nullable=True)
    merit_scholarships = Column(Text, nullable=True)
    ug_entry_criteria = Column(Text, nullable=True)
    pg_entry_criteria = Column(Text, nullable=True)
    elt_requirements = Column(Text, nullable=True)
    moi_policy = Column(Text, nullable=True)
    study_gap = Column(String, nullable=True)
    priority = Column(String, nullable=True)
    drive_url = Column(String, nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utc_now)

    courses = relationship("UniversityCourse", back_populates="university", cascade="all, delete-orphan")
    intakes = relationship("UniversityIntake", back_populates="university", cascade="all, delete-orphan")
    accepted_elts = relationship("UniversityAcceptedElt", back_populates="university", cascade="all, delete-orphan")


class UniversityCourse(Base):
    __tablename__ = "university_courses"

    id = Column(Integer, primary_key=True, index=True)
    university_id = Column(Integer, ForeignKey("universities.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    category = Column(String, nullable=True)
    fees = Column(Numeric(12, 2), nullable=True)
    is_top_course = Column(Boolean, nullable=False, default=False)

    university = relationship("University", back_populates="courses")


class UniversityIntake(Base):
    __tablename__ = "university_intakes"

    id = Column(Integer, primary_key=True, index=True)
    university_id = Column(Integer, ForeignKey("universities.id"), nullable=False, index=True)
    intake_label = Column(String, nullable=False)

    university = relationship("University", back_populates="intakes")


class UniversityAcceptedElt(Base):
    __tablename__ = "university_accepted_elts"

    id = Column(Integer, primary_key=True, index=True)
    university_id = Column(Integer, ForeignKey("universities.id"), nullable=False, index=True)
    elt_name = Column(String, nullable=False)

    university = relationship("University", back_populates="accepted_elts")
