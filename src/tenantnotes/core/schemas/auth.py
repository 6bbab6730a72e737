"""
Authentication and authorization schemas.

These schemas define the API contracts for login, tenant signup,
adding users to a tenant, and the bearer token response.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models.user import UserRole
from .tenants import TenantSummary

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
SLUG_PATTERN = r"^[a-z0-9-]+$"


def _normalize_email(value: str) -> str:
    return value.strip().lower()


class LoginRequest(BaseModel):
    """User login request schema."""

    email: str = Field(max_length=320, pattern=EMAIL_PATTERN, description="User email")
    password: str = Field(min_length=1, max_length=128, description="User password")

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return _normalize_email(v)

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {"email": "admin@acme.test", "password": "password"}
        },
    )


class SignupRequest(BaseModel):
    """Tenant signup: creates a free tenant and its first admin."""

    tenant_name: str = Field(min_length=1, max_length=255, description="Organization name")
    tenant_slug: str = Field(
        min_length=1, max_length=100, pattern=SLUG_PATTERN, description="Unique tenant slug"
    )
    email: str = Field(max_length=320, pattern=EMAIL_PATTERN, description="Admin email")
    password: str = Field(min_length=8, max_length=128, description="Admin password")

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return _normalize_email(v)

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "tenant_name": "Initech",
                "tenant_slug": "initech",
                "email": "admin@initech.test",
                "password": "securepassword123",
            }
        },
    )


class UserCreateRequest(BaseModel):
    """Admin request to add a user to their own tenant."""

    email: str = Field(max_length=320, pattern=EMAIL_PATTERN, description="User email")
    password: str = Field(min_length=8, max_length=128, description="User password")
    role: UserRole = Field(default=UserRole.MEMBER, description="Role inside the tenant")

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return _normalize_email(v)

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "email": "new.member@acme.test",
                "password": "securepassword123",
                "role": "member",
            }
        },
    )


class UserResponse(BaseModel):
    """User information response schema."""

    id: uuid.UUID = Field(description="User unique identifier")
    email: str = Field(description="User email")
    role: str = Field(description="Role inside the tenant")
    tenant: TenantSummary = Field(description="Tenant the user belongs to")
    created_at: datetime = Field(description="Account creation timestamp")
    updated_at: Optional[datetime] = Field(default=None, description="Last update timestamp")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "email": "admin@acme.test",
                "role": "admin",
                "tenant": {
                    "id": "789e0123-e89b-12d3-a456-426614174000",
                    "name": "Acme",
                    "slug": "acme",
                    "subscription": "free",
                    "note_limit": 3,
                },
                "created_at": "2025-09-13T10:30:00Z",
                "updated_at": "2025-09-13T11:00:00Z",
            }
        },
    )


class TokenResponse(BaseModel):
    """JWT token response schema."""

    access_token: str = Field(description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(description="Token expiration time in seconds")
    user: UserResponse = Field(description="User information")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "token_type": "bearer",
                "expires_in": 604800,
                "user": {
                    "id": "123e4567-e89b-12d3-a456-426614174000",
                    "email": "admin@acme.test",
                    "role": "admin",
                    "tenant": {
                        "id": "789e0123-e89b-12d3-a456-426614174000",
                        "name": "Acme",
                        "slug": "acme",
                        "subscription": "free",
                        "note_limit": 3,
                    },
                    "created_at": "2025-09-13T10:30:00Z",
                },
            }
        }
    )
