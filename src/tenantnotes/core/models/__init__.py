"""
Database models for TenantNotes.

SQLAlchemy ORM models defining the schema of the multi-tenant note service.

Models included:
    - Tenant: Organization with a subscription tier (free/pro)
    - User: Account belonging to one tenant with an admin/member role
    - Note: Note content scoped to a tenant and authored by a user
"""

from .base import BaseModel
from .note import Note
from .tenant import (
    FREE_NOTE_LIMIT,
    UNLIMITED_NOTES,
    SubscriptionTier,
    Tenant,
    note_limit_for,
)
from .user import User, UserRole

__all__ = [
    "BaseModel",
    "Tenant",
    "SubscriptionTier",
    "FREE_NOTE_LIMIT",
    "UNLIMITED_NOTES",
    "note_limit_for",
    "User",
    "UserRole",
    "Note",
]
