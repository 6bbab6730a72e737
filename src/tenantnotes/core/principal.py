"""Authenticated caller identity carried through a request."""

from dataclasses import dataclass
from uuid import UUID

from .models.user import User, UserRole


@dataclass(frozen=True)
class Principal:
    """Who is calling, and inside which tenant.

    Built from the database on every request, so role and tenant changes take
    effect without reissuing tokens.
    """

    user_id: UUID
    email: str
    role: str
    tenant_id: UUID
    tenant_slug: str

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value

    def owns_tenant_slug(self, slug: str) -> bool:
        return self.tenant_slug == slug

    @classmethod
    def from_user(cls, user: User) -> "Principal":
        """Build from a user whose ``tenant`` relationship is loaded."""
        return cls(
            user_id=user.id,
            email=user.email,
            role=user.role,
            tenant_id=user.tenant_id,
            tenant_slug=user.tenant.slug,
        )
