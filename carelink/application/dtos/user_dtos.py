"""User account Data Transfer Objects."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class RegisterUserCommand(BaseModel):
    """DTO for creating an account."""

    email: str | None = None
    password: str | None = Field(None, description="Plain password, 8 to 100 characters")
    real_name: str | None = None
    phone_number: str | None = Field(None, description="010-XXXX-XXXX")
    role: str = "GUARDIAN"


class ChangePasswordCommand(BaseModel):
    """DTO for changing the password of an account."""

    user_id: UUID
    current_password: str
    new_password: str


class AuthenticateUserCommand(BaseModel):
    """DTO for a login attempt."""

    email: str
    password: str


class UserResponse(BaseModel):
    """DTO for user responses. The password never leaves the domain."""

    id: UUID
    email: str
    real_name: str
    phone_number: str
    role: str
    role_display_name: str
    is_email_verified: bool
    is_active: bool
    last_login_at: datetime | None = None
    created_at: datetime
    updated_at: datetime
