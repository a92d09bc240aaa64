"""Authentication request/response schemas."""

from __future__ import annotations

import re
from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, field_validator

from insureclaim.api.schemas.common import UserRoleField
from insureclaim.core.constants import UserRole
from insureclaim.db.models.user import User

PASSWORD_SPECIALS = "@$!%*?&"
PASSWORD_RE = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]{6,}$")


class RegisterRequest(BaseModel):
    """Request payload for self-registration."""

    full_name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=100)
    phone_number: str = Field(..., min_length=7, max_length=20, pattern=r"^\+?[0-9 ()\-]+$")
    role: UserRoleField = UserRole.CUSTOMER

    @field_validator("password")
    @classmethod
    def check_password_strength(cls, value: str) -> str:
        if not PASSWORD_RE.match(value):
            raise ValueError(
                "Password must contain at least one uppercase, one lowercase, one number, "
                f"and one special character ({PASSWORD_SPECIALS})"
            )
        return value


class LoginRequest(BaseModel):
    """Request payload for login endpoint."""

    email: EmailStr
    password: str = Field(..., min_length=1, max_length=256)


class AuthResponse(BaseModel):
    """Token plus the signed-in user's identity, returned by register and login."""

    user_id: int
    full_name: str
    email: str
    role: UserRole
    access_token: str
    token_type: str = "bearer"
    expires_at: datetime


class CurrentUserResponse(BaseModel):
    """Authenticated user profile returned by /auth/me."""

    id: int
    email: str
    full_name: str
    phone_number: str
    role: UserRole
    is_active: bool
    created_at: datetime
    updated_at: datetime | None
    last_login_at: datetime | None

    @classmethod
    def from_model(cls, user: User) -> CurrentUserResponse:
        return cls(
            id=user.id,
            email=user.email,
            full_name=user.full_name,
            phone_number=user.phone_number,
            role=user.role,
            is_active=user.is_active,
            created_at=user.created_at,
            updated_at=user.updated_at,
            last_login_at=user.last_login_at,
        )
