"""Student schemas for Pathway CRM."""

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, computed_field

from backend.app.schemas.common import CamelModel, ORMModel
from backend.app.services.status_flow import student_status_label


class StudentBase(CamelModel):
    name: str
    email: EmailStr
    phone: Optional[str] = None
    date_of_birth: Optional[str] = None
    nationality: Optional[str] = None
    passport_number: Optional[str] = None
    academic_background: Optional[str] = None
    english_proficiency: Optional[str] = None
    target_country: Optional[str] = None
    target_program: Optional[str] = None
    budget: Optional[str] = None
    expectation: Optional[str] = None
    consultancy_fee: bool = False
    scholarship: bool = False
    status: str = "active"
    notes: Optional[str] = None
    counselor_id: Optional[int] = None
    admission_officer_id: Optional[int] = None
    branch: Optional[str] = None
    region: Optional[str] = None


class StudentCreate(StudentBase):
    lead_id: Optional[int] = None


class StudentConvertFromLead(CamelModel):
    """Payload for turning a lead into a student; omitted fields are copied from the lead."""

    lead_id: int
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    date_of_birth: Optional[str] = None
    nationality: Optional[str] = None
    passport_number: Optional[str] = None
    academic_background: Optional[str] = None
    english_proficiency: Optional[str] = None
    target_country: Optional[str] = None
    target_program: Optional[str] = None
    budget: Optional[str] = None
    expectation: Optional[str] = None
    consultancy_fee: Optional[bool] = None
    scholarship: Optional[bool] = None
    status: Optional[str] = None
    notes: Optional[str] = None
    counselor_id: Optional[int] = None
    admission_officer_id: Optional[int] = None
    branch: Optional[str] = None
    region: Optional[str] = None


class StudentUpdate(CamelModel):
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    date_of_birth: Optional[str] = None
    nationality: Optional[str] = None
    passport_number: Optional[str] = None
    academic_background: Optional[str] = None
    english_proficiency: Optional[str] = None
    target_country: Optional[str] = None
    target_program: Optional[str] = None
    budget: Optional[str] = None
    expectation: Optional[str] = None
    consultancy_fee: Optional[bool] = None
    scholarship: Optional[bool] = None
    status: Optional[str] = None
    notes: Optional[str] = None
    counselor_id: Optional[int] = None
    admission_officer_id: Optional[int] = None
    branch: Optional[str] = None
    region: Optional[str] = None


class StudentRead(ORMModel):
    id: int
    lead_id: Optional[int] = None
    name: str
    email: str
    phone: Optional[str] = None
    date_of_birth: Optional[str] = None
    nationality: Optional[str] = None
    passport_number: Optional[str] = None
    academic_background: Optional[str] = None
    english_proficiency: Optional[str] = None
    target_country: Optional[str] = None
    target_program: Optional[str] = None
    budget: Optional[str] = None
    expectation: Optional[str] = None
    consultancy_fee: bool
    scholarship: bool
    status: str
    notes: Optional[str] = None
    counselor_id: Optional[int] = None
    admission_officer_id: Optional[int] = None
    branch: Optional[str] = None
    region: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @computed_field(alias="statusLabel")
    @property
    def status_label(self) -> str:
        return student_status_label(self.status)
