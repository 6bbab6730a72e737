"""
Service layer interfaces and implementations.

Services own the business rules (tenant scoping, note quota, roles) and are
built per request around the request's ``AsyncSession``.
"""

from .interfaces import (
    IAuthService,
    IHealthService,
    INoteService,
    ITenantService,
)

from .auth_service import AuthService
from .health_service import HealthService
from .note_service import NoteService
from .tenant_service import TenantService

__all__ = [
    # Interfaces
    "IAuthService",
    "INoteService",
    "ITenantService",
    "IHealthService",

    # Implementations
    "AuthService",
    "NoteService",
    "TenantService",
    "HealthService",
]
