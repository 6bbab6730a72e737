"""Authentication service implementation."""

import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ...config import get_settings
from ...security import (
    blacklist_token,
    create_access_token,
    hash_password,
    needs_update,
    verify_password,
)
from ..exceptions import AuthenticationError, ConflictError
from ..models.tenant import SubscriptionTier
from ..models.user import User, UserRole
from ..principal import Principal
from ..repositories.tenant_repository import TenantRepository
from ..repositories.user_repository import UserRepository
from ..schemas.auth import LoginRequest, SignupRequest, TokenResponse, UserResponse
from .interfaces import IAuthService

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """Authentication service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_repo = UserRepository(session)
        self.tenant_repo = TenantRepository(session)
        self.settings = get_settings()

    async def authenticate_user(self, request: LoginRequest) -> TokenResponse:
        """Login user and return a JWT access token."""
        user = await self.user_repo.get_by_email(request.email)
        if not user or not verify_password(request.password, user.password_hash):
            raise AuthenticationError("Invalid credentials")

        # Transparently move outdated hashes to the current scheme
        if needs_update(user.password_hash):
            await self.user_repo.update_password_hash(user, hash_password(request.password))
            logger.info("Re-hashed password for user %s", user.id)

        return self._token_response(user)

    async def signup(self, request: SignupRequest) -> TokenResponse:
        """Create a free tenant together with its first admin."""
        if await self.tenant_repo.is_slug_taken(request.tenant_slug):
            raise ConflictError("Tenant slug already taken")
        if await self.user_repo.is_email_taken(request.email):
            raise ConflictError("Email already registered")

        try:
            tenant = await self.tenant_repo.create_tenant(
                {
                    "name": request.tenant_name,
                    "slug": request.tenant_slug,
                    "subscription": SubscriptionTier.FREE.value,
                },
                commit=False,
            )
            user = await self.user_repo.create_user(
                {
                    "email": request.email,
                    "password_hash": hash_password(request.password),
                    "role": UserRole.ADMIN.value,
                    "tenant_id": tenant.id,
                },
                commit=False,
            )
            await self.session.commit()
        except IntegrityError:
            # lost a race against a concurrent signup with the same slug or email
            await self.session.rollback()
            raise ConflictError("Tenant slug or email already taken")

        logger.info("Tenant %s created with admin %s", tenant.slug, user.email)
        return self._token_response(user)

    async def get_current_user(self, user_id: UUID) -> UserResponse:
        """Get user by ID."""
        user = await self.user_repo.get_by_id(user_id)
        if not user:
            raise AuthenticationError()
        return UserResponse.model_validate(user)

    async def get_principal(self, user_id: UUID) -> Principal:
        """Resolve the caller from the database; unknown users are unauthenticated."""
        user = await self.user_repo.get_by_id(user_id)
        if not user or user.tenant is None:
            raise AuthenticationError()
        return Principal.from_user(user)

    async def logout_user(self, access_token: str) -> bool:
        """Logout with Redis token blacklisting; the token just expires if Redis is down."""
        return await blacklist_token(access_token)

    def _token_response(self, user: User) -> TokenResponse:
        access_token = create_access_token(data={"sub": str(user.id)})
        return TokenResponse(
            access_token=access_token,
            token_type="bearer",
            expires_in=self.settings.access_token_expire_minutes * 60,
            user=UserResponse.model_validate(user),
        )
