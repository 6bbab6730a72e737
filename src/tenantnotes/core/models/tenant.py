# Tenant (organization) model
from enum import Enum
from typing import TYPE_CHECKING, List

from sqlalchemy import CheckConstraint, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from .base import BaseModel

if TYPE_CHECKING:
    from .note import Note
    from .user import User


class SubscriptionTier(str, Enum):
    """Subscription plans a tenant can be on."""

    FREE = "free"
    PRO = "pro"


FREE_NOTE_LIMIT = 3
UNLIMITED_NOTES = -1  # sentinel: no cap

NOTE_LIMITS = {
    SubscriptionTier.FREE: FREE_NOTE_LIMIT,
    SubscriptionTier.PRO: UNLIMITED_NOTES,
}


def note_limit_for(subscription: "SubscriptionTier | str") -> int:
    """Note cap for a subscription tier; ``UNLIMITED_NOTES`` means no cap."""
    return NOTE_LIMITS[SubscriptionTier(subscription)]


class Tenant(BaseModel):
    """Organization owning users and notes, addressed externally by slug."""

    __tablename__ = "tenants"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    subscription: Mapped[str] = mapped_column(
        String(20), default=SubscriptionTier.FREE.value, nullable=False
    )

    users: Mapped[List["User"]] = relationship(
        "User",
        back_populates="tenant",
        cascade="all, delete-orphan",
        lazy="raise",
    )
    notes: Mapped[List["Note"]] = relationship(
        "Note",
        back_populates="tenant",
        cascade="all, delete-orphan",
        lazy="raise",
    )

    __table_args__ = (
        CheckConstraint("slug = lower(slug)", name="ck_tenants_slug_lowercase"),
        CheckConstraint("subscription IN ('free', 'pro')", name="ck_tenants_subscription"),
        Index("idx_tenants_slug", "slug"),
    )

    def __repr__(self) -> str:
        return f"<Tenant(slug='{self.slug}', subscription={self.subscription})>"

    @validates("slug")
    def _normalize_slug(self, key, value: str) -> str:
        return value.strip().lower()

    @validates("name")
    def _normalize_name(self, key, value: str) -> str:
        return value.strip()

    @validates("subscription")
    def _validate_subscription(self, key, value) -> str:
        # rejects unknown tiers; stores the plain string value
        return SubscriptionTier(value).value

    @property
    def tier(self) -> SubscriptionTier:
        return SubscriptionTier(self.subscription or SubscriptionTier.FREE.value)

    @property
    def note_limit(self) -> int:
        """Derived from the tier on every read; there is no setter."""
        return note_limit_for(self.tier)

    @property
    def is_unlimited(self) -> bool:
        return self.note_limit == UNLIMITED_NOTES
