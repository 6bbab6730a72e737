"""Tenant service implementation."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ...security.password import hash_password
from ..exceptions import AccessDeniedError, ConflictError, NotFoundError
from ..models.tenant import Tenant
from ..principal import Principal
from ..quota import upgrade
from ..repositories.tenant_repository import TenantRepository
from ..repositories.user_repository import UserRepository
from ..schemas.auth import UserCreateRequest, UserResponse
from ..schemas.tenants import TenantEnvelope, TenantSummary, UpgradeResponse
from .interfaces import ITenantService

logger = logging.getLogger(__name__)

UPGRADE_MESSAGE = "Successfully upgraded to Pro plan"


class TenantService(ITenantService):
    """Tenant service implementation.

    Callers only ever see their own tenant: a slug naming any other tenant is
    refused with 403, admins included. Role checks come before the slug check.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.tenant_repo = TenantRepository(session)
        self.user_repo = UserRepository(session)

    async def get_tenant_info(self, principal: Principal, slug: str) -> TenantEnvelope:
        """Get the caller's own tenant."""
        tenant = await self._own_tenant(principal, slug)
        return TenantEnvelope(tenant=TenantSummary.model_validate(tenant))

    async def upgrade_tenant(self, principal: Principal, slug: str) -> UpgradeResponse:
        """Move the caller's tenant to Pro. Upgrading a Pro tenant is a no-op."""
        self._require_admin(principal)
        tenant = await self._own_tenant(principal, slug)

        was_unlimited = tenant.is_unlimited
        tenant = await self.tenant_repo.save(upgrade(tenant))
        if not was_unlimited:
            logger.info("Tenant %s upgraded to pro by %s", tenant.slug, principal.email)

        return UpgradeResponse(message=UPGRADE_MESSAGE, tenant=TenantSummary.model_validate(tenant))

    async def add_user(
        self, principal: Principal, slug: str, request: UserCreateRequest
    ) -> UserResponse:
        """Add a user to the caller's tenant."""
        self._require_admin(principal)
        tenant = await self._own_tenant(principal, slug)

        if await self.user_repo.is_email_taken(request.email):
            raise ConflictError("Email already registered")

        try:
            user = await self.user_repo.create_user(
                {
                    "email": request.email,
                    "password_hash": hash_password(request.password),
                    "role": request.role.value,
                    "tenant_id": tenant.id,
                }
            )
        except IntegrityError:
            # same email added concurrently
            await self.session.rollback()
            raise ConflictError("Email already registered")
        logger.info("User %s added to tenant %s as %s", user.email, tenant.slug, user.role)
        return UserResponse.model_validate(user)

    def _require_admin(self, principal: Principal) -> None:
        if not principal.is_admin:
            raise AccessDeniedError()

    async def _own_tenant(self, principal: Principal, slug: str) -> Tenant:
        if not principal.owns_tenant_slug(slug):
            raise AccessDeniedError()

        tenant = await self.tenant_repo.get_by_id(principal.tenant_id)
        if not tenant:
            raise NotFoundError("Tenant")
        return tenant
