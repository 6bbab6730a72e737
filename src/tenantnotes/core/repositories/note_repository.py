"""Note repository for database operations.

Every query here is scoped by ``tenant_id``, which is a required argument of
each method. There is intentionally no way to fetch a note by id alone.
"""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..models.note import Note

# Columns an update may touch; ownership columns are never among them.
UPDATABLE_FIELDS = frozenset({"title", "content"})


class NoteRepository:
    """Repository for tenant-scoped note operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    def _scoped(self, tenant_id: UUID):
        return select(Note).options(selectinload(Note.author)).where(Note.tenant_id == tenant_id)

    async def create_note(self, tenant_id: UUID, note_data: dict) -> Note:
        """Create a note inside ``tenant_id``."""
        note = Note(tenant_id=tenant_id, **note_data)
        self.session.add(note)
        await self.session.commit()
        await self.session.refresh(note, ["author"])
        return note

    async def get_by_id(self, tenant_id: UUID, note_id: UUID) -> Optional[Note]:
        """Get a note by id, only if it belongs to ``tenant_id``."""
        stmt = self._scoped(tenant_id).where(Note.id == note_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_notes(self, tenant_id: UUID) -> List[Note]:
        """All notes of a tenant, newest first."""
        stmt = self._scoped(tenant_id).order_by(desc(Note.created_at), desc(Note.id))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_notes(self, tenant_id: UUID) -> int:
        """Number of notes the tenant currently holds."""
        stmt = select(func.count(Note.id)).where(Note.tenant_id == tenant_id)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def update_note(
        self, tenant_id: UUID, note_id: UUID, update_data: dict
    ) -> Optional[Note]:
        """Update title/content of a note of ``tenant_id``."""
        note = await self.get_by_id(tenant_id, note_id)
        if not note:
            return None

        for key, value in update_data.items():
            if key in UPDATABLE_FIELDS:
                setattr(note, key, value)

        await self.session.commit()
        await self.session.refresh(note, ["title", "content", "updated_at", "author"])
        return note

    async def delete_note(self, tenant_id: UUID, note_id: UUID) -> bool:
        """Delete a note of ``tenant_id``; False when there is none."""
        note = await self.get_by_id(tenant_id, note_id)
        if not note:
            return False

        await self.session.delete(note)
        await self.session.commit()
        return True

