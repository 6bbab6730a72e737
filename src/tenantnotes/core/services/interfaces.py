"""
Service interfaces for TenantNotes application.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List
from uuid import UUID

from ..principal import Principal
from ..schemas.auth import (
    LoginRequest,
    SignupRequest,
    TokenResponse,
    UserCreateRequest,
    UserResponse,
)
from ..schemas.common import HealthCheckResponse
from ..schemas.notes import NoteCreate, NoteResponse, NoteUpdate
from ..schemas.tenants import TenantEnvelope, UpgradeResponse


class IAuthService(ABC):
    """Auth service for login, signup and the current user."""

    @abstractmethod
    async def authenticate_user(self, request: LoginRequest) -> TokenResponse:
        """Login user and return a JWT access token."""
        pass

    @abstractmethod
    async def signup(self, request: SignupRequest) -> TokenResponse:
        """Create a free tenant with its first admin."""
        pass

    @abstractmethod
    async def get_current_user(self, user_id: UUID) -> UserResponse:
        """Get user by ID."""
        pass

    @abstractmethod
    async def get_principal(self, user_id: UUID) -> Principal:
        """Resolve the caller's identity and tenant."""
        pass

    @abstractmethod
    async def logout_user(self, access_token: str) -> bool:
        """Revoke the presented access token."""
        pass


class INoteService(ABC):
    """Tenant-scoped note CRUD."""

    @abstractmethod
    async def create_note(self, principal: Principal, request: NoteCreate) -> NoteResponse:
        """Create new note, subject to the tenant's quota."""
        pass

    @abstractmethod
    async def get_note(self, principal: Principal, note_id: UUID) -> NoteResponse:
        """Get note by ID."""
        pass

    @abstractmethod
    async def list_notes(self, principal: Principal) -> List[NoteResponse]:
        """List the tenant's notes, newest first."""
        pass

    @abstractmethod
    async def update_note(
        self, principal: Principal, note_id: UUID, request: NoteUpdate
    ) -> NoteResponse:
        """Update existing note."""
        pass

    @abstractmethod
    async def delete_note(self, principal: Principal, note_id: UUID) -> bool:
        """Delete note."""
        pass


class ITenantService(ABC):
    """Tenant info, upgrade and membership."""

    @abstractmethod
    async def get_tenant_info(self, principal: Principal, slug: str) -> TenantEnvelope:
        """Get the caller's own tenant."""
        pass

    @abstractmethod
    async def upgrade_tenant(self, principal: Principal, slug: str) -> UpgradeResponse:
        """Move the caller's tenant to the Pro tier."""
        pass

    @abstractmethod
    async def add_user(
        self, principal: Principal, slug: str, request: UserCreateRequest
    ) -> UserResponse:
        """Add a user to the caller's tenant."""
        pass


class IHealthService(ABC):
    """Health check service."""

    @abstractmethod
    async def get_health_status(self) -> HealthCheckResponse:
        """Get overall app health."""
        pass

    @abstractmethod
    async def check_database_health(self) -> Dict[str, Any]:
        """Check DB connection."""
        pass

    @abstractmethod
    async def check_redis_health(self) -> Dict[str, Any]:
        """Check Redis connection."""
        pass
