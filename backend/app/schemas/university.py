"""University browsing schemas."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from backend.app.schemas.common import ORMModel


class UniversityCourseRead(ORMModel):
    id: int
    name: str
    category: Optional[str] = None
    fees: Optional[Decimal] = None
    is_top_course: bool


class UniversityIntakeRead(ORMModel):
    id: int
    intake_label: str


class UniversityAcceptedEltRead(ORMModel):
    id: int
    elt_name: str


class UniversitySummary(ORMModel):
    id: int
    name: str
    country: Optional[str] = None
    website: Optional[str] = None
    campus_city: Optional[str] = None
    logo_image_url: Optional[str] = None
    total_fees: Optional[Decimal] = None
    priority: Optional[str] = None


class UniversityDetail(UniversitySummary):
    about: Optional[str] = None
    cover_image_url: Optional[str] = None
    initial_deposit_amount: Optional[Decimal] = None
    scholarship_fee: Optional[Decimal] = None
    merit_scholarships: Optional[str] = None
    ug_entry_criteria: Optional[str] = None
    pg_entry_criteria: Optional[str] = None
    elt_requirements: Optional[str] = None
    moi_policy: Optional[str] = None
    study_gap: Optional[str] = None
    drive_url: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime
    courses: List[UniversityCourseRead] = []
    intakes: List[UniversityIntakeRead] = []
    accepted_elts: List[UniversityAcceptedEltRead] = []
