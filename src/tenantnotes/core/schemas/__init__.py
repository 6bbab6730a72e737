"""
Pydantic schemas for validating and documenting API requests and responses.

This package exposes the Pydantic models used across the application to
define input/output contracts for authentication, notes, tenants, and
common responses (error, success and health formats).
"""

from .auth import LoginRequest, SignupRequest, TokenResponse, UserCreateRequest, UserResponse
from .common import ErrorResponse, HealthCheckResponse, SuccessResponse
from .notes import NoteCreate, NoteResponse, NoteUpdate
from .tenants import TenantEnvelope, TenantSummary, UpgradeResponse

__all__ = [
    # Auth schemas
    "LoginRequest",
    "SignupRequest",
    "UserCreateRequest",
    "TokenResponse",
    "UserResponse",
    # Note schemas
    "NoteCreate",
    "NoteUpdate",
    "NoteResponse",
    # Tenant schemas
    "TenantSummary",
    "TenantEnvelope",
    "UpgradeResponse",
    # Common schemas
    "ErrorResponse",
    "SuccessResponse",
    "HealthCheckResponse",
]
