"""
Tenant schemas.

The tenant summary always reports ``note_limit`` as derived from the
subscription tier: 3 for free tenants, -1 (unlimited) for pro tenants.
"""

import uuid

from pydantic import BaseModel, ConfigDict, Field


class TenantSummary(BaseModel):
    """Public view of a tenant."""

    id: uuid.UUID = Field(description="Tenant unique identifier")
    name: str = Field(description="Organization name")
    slug: str = Field(description="URL slug of the tenant")
    subscription: str = Field(description="Subscription tier (free or pro)")
    note_limit: int = Field(description="Maximum number of notes, -1 when unlimited")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "789e0123-e89b-12d3-a456-426614174000",
                "name": "Acme",
                "slug": "acme",
                "subscription": "free",
                "note_limit": 3,
            }
        },
    )


class TenantEnvelope(BaseModel):
    """Tenant info response."""

    tenant: TenantSummary


class UpgradeResponse(BaseModel):
    """Tenant upgrade response."""

    message: str = Field(description="Outcome of the upgrade")
    tenant: TenantSummary

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "message": "Successfully upgraded to Pro plan",
                "tenant": {
                    "id": "789e0123-e89b-12d3-a456-426614174000",
                    "name": "Acme",
                    "slug": "acme",
                    "subscription": "pro",
                    "note_limit": -1,
                },
            }
        }
    )
