"""Login request and response schemas for user authentication."""

from pydantic import EmailStr, Field

from backend.app.schemas.common import CamelModel
from backend.app.schemas.user import UserRead


class LoginRequest(CamelModel):
    """Payload for login attempts."""

    email: EmailStr
    password: str = Field(min_length=6)


class LoginResponse(CamelModel):
    user: UserRead
    access_token: str
    token_type: str = "bearer"
