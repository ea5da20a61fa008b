"""Admission schemas. Money fields are decimals and serialize as strings."""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import field_validator

from backend.app.schemas.common import CamelModel, ORMModel
from backend.app.services.status_flow import ensure_known_state


class AdmissionCreate(CamelModel):
    application_id: int
    student_id: int
    university: str
    program: str
    decision: str
    decision_date: Optional[date] = None
    full_tuition_fee: Optional[Decimal] = None
    net_tuition_fee: Optional[Decimal] = None
    initial_deposit: Optional[Decimal] = None
    deposit_date: Optional[date] = None
    scholarship_amount: Optional[Decimal] = None
    visa_status: str = "pending"
    notes: Optional[str] = None

    @field_validator("visa_status")
    @classmethod
    def validate_visa_status(cls, value: str) -> str:
        return ensure_known_state("admissions", "visa_status", value)


class AdmissionUpdate(CamelModel):
    university: Optional[str] = None
    program: Optional[str] = None
    decision: Optional[str] = None
    decision_date: Optional[date] = None
    full_tuition_fee: Optional[Decimal] = None
    net_tuition_fee: Optional[Decimal] = None
    initial_deposit: Optional[Decimal] = None
    deposit_date: Optional[date] = None
    scholarship_amount: Optional[Decimal] = None
    visa_status: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("visa_status")
    @classmethod
    def validate_visa_status(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return ensure_known_state("admissions", "visa_status", value)


class AdmissionRead(ORMModel):
    id: int
    application_id: int
    student_id: int
    university: str
    program: str
    decision: str
    decision_date: Optional[date] = None
    full_tuition_fee: Optional[Decimal] = None
    net_tuition_fee: Optional[Decimal] = None
    initial_deposit: Optional[Decimal] = None
    deposit_date: Optional[date] = None
    scholarship_amount: Optional[Decimal] = None
    visa_status: str
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime
