"""
Tenant note quota policy.

Pure decisions over a tenant's subscription tier and its current note count.
The caller counts the tenant's notes right before asking, and creates the note
right after an ``allowed`` answer. The two steps are not one atomic operation:
two concurrent creates for a free tenant sitting at ``limit - 1`` notes can
both be admitted, leaving the tenant one note over the cap. That relaxed
consistency is accepted for this domain.
"""

from dataclasses import dataclass
from typing import Optional

from .models.tenant import FREE_NOTE_LIMIT, SubscriptionTier, Tenant

NOTE_LIMIT_REACHED = "note_limit_reached"
NOTE_LIMIT_MESSAGE = "Note limit reached. Upgrade to Pro for unlimited notes."


@dataclass(frozen=True)
class QuotaDecision:
    """Outcome of a quota check."""

    allowed: bool
    note_limit: int
    current_count: int
    reason: Optional[str] = None

    @property
    def limit_reached(self) -> bool:
        return self.reason == NOTE_LIMIT_REACHED


def can_create_note(tenant: Tenant, current_note_count: int) -> QuotaDecision:
    """Decide whether ``tenant`` may create one more note.

    Pro tenants are always allowed. Free tenants are allowed while they hold
    fewer notes than the free cap.
    """
    limit = tenant.note_limit
    if tenant.is_unlimited:
        return QuotaDecision(allowed=True, note_limit=limit, current_count=current_note_count)

    if current_note_count < limit:
        return QuotaDecision(allowed=True, note_limit=limit, current_count=current_note_count)

    return QuotaDecision(
        allowed=False,
        note_limit=limit,
        current_count=current_note_count,
        reason=NOTE_LIMIT_REACHED,
    )


def upgrade(tenant: Tenant) -> Tenant:
    """Move ``tenant`` to the Pro tier.

    The note limit follows from the tier, so this single assignment is the
    whole transition. Upgrading a Pro tenant leaves it unchanged.
    """
    if tenant.tier is not SubscriptionTier.PRO:
        tenant.subscription = SubscriptionTier.PRO.value
    return tenant


__all__ = [
    "FREE_NOTE_LIMIT",
    "NOTE_LIMIT_MESSAGE",
    "NOTE_LIMIT_REACHED",
    "QuotaDecision",
    "can_create_note",
    "upgrade",
]
