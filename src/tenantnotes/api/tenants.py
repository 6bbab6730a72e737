"""Tenant API endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.principal import Principal
from ..core.schemas.auth import UserCreateRequest, UserResponse
from ..core.schemas.tenants import TenantEnvelope, UpgradeResponse
from ..core.services import TenantService
from ..database import get_db_session
from ..middleware.auth import get_current_principal

router = APIRouter(prefix="/tenants", tags=["tenants"])


@router.get("/{slug}", response_model=TenantEnvelope)
async def get_tenant(
    slug: str,
    principal: Principal = Depends(get_current_principal),
    session: AsyncSession = Depends(get_db_session),
):
    """Get the caller's own tenant."""
    tenant_service = TenantService(session)
    return await tenant_service.get_tenant_info(principal, slug)


@router.post("/{slug}/upgrade", response_model=UpgradeResponse)
async def upgrade_tenant(
    slug: str,
    principal: Principal = Depends(get_current_principal),
    session: AsyncSession = Depends(get_db_session),
):
    """Upgrade the caller's tenant to the Pro plan (admins only)."""
    tenant_service = TenantService(session)
    return await tenant_service.upgrade_tenant(principal, slug)


@router.post("/{slug}/users", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def add_user(
    slug: str,
    request: UserCreateRequest,
    principal: Principal = Depends(get_current_principal),
    session: AsyncSession = Depends(get_db_session),
):
    """Add a user to the caller's tenant (admins only)."""
    tenant_service = TenantService(session)
    return await tenant_service.add_user(principal, slug, request)
