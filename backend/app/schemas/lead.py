"""Lead schemas for create, update and read operations."""

from datetime import datetime
from typing import Annotated, List, Optional, Union

from pydantic import AfterValidator, EmailStr, field_validator

from backend.app.schemas.common import CamelModel, ORMModel
from backend.app.services.status_flow import ensure_known_state


def _join_choices(value):
    # The lead form allows several countries/programs to be picked at once.
    if isinstance(value, list):
        cleaned = [str(item).strip() for item in value if str(item).strip()]
        return ", ".join(cleaned) or None
    return value


ChoiceList = Annotated[Optional[Union[str, List[str]]], AfterValidator(_join_choices)]


class LeadBase(CamelModel):
    name: str
    email: EmailStr
    phone: Optional[str] = None
    city: Optional[str] = None
    country: ChoiceList = None
    program: ChoiceList = None
    source: Optional[str] = None
    type: Optional[str] = None
    status: str = "new"
    expectation: Optional[str] = None
    study_level: Optional[str] = None
    study_plan: Optional[str] = None
    elt: Optional[str] = None
    lost_reason: Optional[str] = None
    notes: Optional[str] = None
    counselor_id: Optional[int] = None
    branch: Optional[str] = None
    region: Optional[str] = None

    @field_validator("status")
    @classmethod
    def validate_status(cls, value: str) -> str:
        return ensure_known_state("leads", "status", value)


class LeadCreate(LeadBase):
    """Schema for lead creation requests."""


class LeadUpdate(CamelModel):
    """Schema for lead updates with partial fields."""

    name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    city: Optional[str] = None
    country: ChoiceList = None
    program: ChoiceList = None
    source: Optional[str] = None
    type: Optional[str] = None
    status: Optional[str] = None
    expectation: Optional[str] = None
    study_level: Optional[str] = None
    study_plan: Optional[str] = None
    elt: Optional[str] = None
    lost_reason: Optional[str] = None
    notes: Optional[str] = None
    counselor_id: Optional[int] = None
    branch: Optional[str] = None
    region: Optional[str] = None

    @field_validator("status")
    @classmethod
    def validate_status(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return ensure_known_state("leads", "status", value)


class LeadRead(ORMModel):
    """Schema for lead responses."""

    id: int
    name: str
    email: str
    phone: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    program: Optional[str] = None
    source: Optional[str] = None
    type: Optional[str] = None
    status: str
    expectation: Optional[str] = None
    study_level: Optional[str] = None
    study_plan: Optional[str] = None
    elt: Optional[str] = None
    is_lost: bool
    lost_reason: Optional[str] = None
    notes: Optional[str] = None
    counselor_id: Optional[int] = None
    branch: Optional[str] = None
    region: Optional[str] = None
    created_by: Optional[int] = None
    updated_by: Optional[int] = None
    created_at: datetime
    updated_at: datetime
