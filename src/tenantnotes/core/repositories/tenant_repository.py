"""Tenant repository for database operations."""

from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.tenant import Tenant


class TenantRepository:
    """Repository for tenant database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_tenant(self, tenant_data: dict, commit: bool = True) -> Tenant:
        """Create new tenant. With ``commit=False`` the row is only flushed."""
        tenant = Tenant(**tenant_data)
        self.session.add(tenant)
        if commit:
            await self.session.commit()
            await self.session.refresh(tenant)
        else:
            await self.session.flush()
        return tenant

    async def get_by_id(self, tenant_id: UUID) -> Optional[Tenant]:
        """Get tenant by ID."""
        stmt = select(Tenant).where(Tenant.id == tenant_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_slug(self, slug: str) -> Optional[Tenant]:
        """Get tenant by its (lowercase) slug."""
        stmt = select(Tenant).where(Tenant.slug == slug.strip().lower())
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def is_slug_taken(self, slug: str) -> bool:
        return await self.get_by_slug(slug) is not None

    async def save(self, tenant: Tenant) -> Tenant:
        """Persist pending changes on a tenant."""
        self.session.add(tenant)
        await self.session.commit()
        await self.session.refresh(tenant)
        return tenant
