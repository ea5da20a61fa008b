"""Application schemas."""

from datetime import datetime
from typing import Optional

from pydantic import field_validator

from backend.app.schemas.common import CamelModel, ORMModel
from backend.app.services.status_flow import ensure_known_state


class ApplicationCreate(CamelModel):
    student_id: int
    university: str
    program: str
    course_type: Optional[str] = None
    country: Optional[str] = None
    intake: Optional[str] = None
    app_status: str = "Open"
    case_status: str = "Raw"
    channel_partner: Optional[str] = None
    google_drive_link: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("app_status")
    @classmethod
    def validate_app_status(cls, value: str) -> str:
        return ensure_known_state("applications", "app_status", value)


class ApplicationUpdate(CamelModel):
    university: Optional[str] = None
    program: Optional[str] = None
    course_type: Optional[str] = None
    country: Optional[str] = None
    intake: Optional[str] = None
    app_status: Optional[str] = None
    case_status: Optional[str] = None
    channel_partner: Optional[str] = None
    google_drive_link: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("app_status")
    @classmethod
    def validate_app_status(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return ensure_known_state("applications", "app_status", value)


class ApplicationRead(ORMModel):
    id: int
    student_id: int
    university: str
    program: str
    course_type: Optional[str] = None
    country: Optional[str] = None
    intake: Optional[str] = None
    app_status: str
    case_status: str
    channel_partner: Optional[str] = None
    google_drive_link: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime
