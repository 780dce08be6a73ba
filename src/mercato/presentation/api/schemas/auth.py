"""Authentication schemas for request/response models."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from mercato.domain.user import User, UserRole
from mercato_auth import PasswordHashingService


class RegisterRequest(BaseModel):
    """Request schema for user registration.

    ``admin`` is a valid role value but is rejected on this path with 403.
    """

    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(
        ...,
        min_length=6,
        max_length=50,
        description="Password (6-50 characters)",
    )
    name: Optional[str] = Field(default=None, min_length=2, max_length=100)
    role: UserRole = Field(default=UserRole.CLIENT)

    @field_validator("password")
    @classmethod
    def _password_fits_bcrypt(cls, v: str) -> str:
        if len(v.encode("utf-8")) > PasswordHashingService.MAX_BYTES:
            msg = (
                f"Password cannot exceed {PasswordHashingService.MAX_BYTES} "
                "bytes when UTF-8 encoded"
            )
            raise ValueError(msg)
        return v

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "seller@example.com",
                "password": "secret123",
                "name": "Ana Seller",
                "role": "seller",
            },
        },
    )


class LoginRequest(BaseModel):
    """Request schema for user login."""

    email: EmailStr
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "seller@example.com",
                "password": "secret123",
            },
        },
    )


class UserResponse(BaseModel):
    """Public user fields; the password hash is never included."""

    id: UUID
    email: str
    name: Optional[str]
    role: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            role=user.role.value,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class AuthResponse(BaseModel):
    """Response schema for authentication (login/register)."""

    user: UserResponse
    access_token: str
    token_type: str = Field(default="bearer")
    expires_in: int

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "user": {
                    "id": "550e8400-e29b-41d4-a716-446655440000",
                    "email": "seller@example.com",
                    "name": "Ana Seller",
                    "role": "seller",
                    "created_at": "2024-12-05T10:30:00Z",
                    "updated_at": "2024-12-05T10:30:00Z",
                },
                "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "token_type": "bearer",
                "expires_in": 604800,
            },
        },
    )
