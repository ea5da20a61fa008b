"""User schemas used for registration and responses."""

from datetime import date, datetime
from typing import Optional

from pydantic import EmailStr, Field, field_validator

from backend.app.models.user import COUNSELOR, USER_ROLES
from backend.app.schemas.common import CamelModel, ORMModel


class UserCreate(CamelModel):
    email: EmailStr
    password: str = Field(min_length=6)
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: str = COUNSELOR
    branch_id: Optional[str] = None
    department: Optional[str] = None
    phone_number: Optional[str] = None
    date_of_birth: Optional[date] = None
    profile_image_url: Optional[str] = None

    @field_validator("role")
    @classmethod
    def validate_role(cls, value: str) -> str:
        if value not in USER_ROLES:
            raise ValueError(f"role must be one of: {', '.join(USER_ROLES)}")
        return value


class UserRead(ORMModel):
    """User as returned by the API; the password hash is never included."""

    id: int
    email: EmailStr
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    role: str
    branch_id: Optional[str] = None
    department: Optional[str] = None
    phone_number: Optional[str] = None
    date_of_birth: Optional[date] = None
    is_active: bool
    created_at: Optional[datetime] = None
