"""Note service implementation."""

import logging
from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import NotFoundError, QuotaExceededError
from ..models.note import Note
from ..principal import Principal
from ..quota import can_create_note
from ..repositories.note_repository import NoteRepository
from ..repositories.tenant_repository import TenantRepository
from ..schemas.notes import NoteCreate, NoteResponse, NoteUpdate
from .interfaces import INoteService

logger = logging.getLogger(__name__)


class NoteService(INoteService):
    """Note service implementation.

    Every call is confined to ``principal.tenant_id``; a note id from another
    tenant behaves exactly like an id that does not exist.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.note_repo = NoteRepository(session)
        self.tenant_repo = TenantRepository(session)

    async def create_note(self, principal: Principal, request: NoteCreate) -> NoteResponse:
        """Create new note, refusing it once a free tenant is at its cap."""
        tenant = await self.tenant_repo.get_by_id(principal.tenant_id)
        if not tenant:
            raise NotFoundError("Tenant")

        # Pro tenants skip the count entirely
        current_count = 0
        if not tenant.is_unlimited:
            current_count = await self.note_repo.count_notes(tenant.id)

        decision = can_create_note(tenant, current_count)
        if not decision.allowed:
            logger.info(
                "Note quota reached for tenant %s (%d/%d)",
                tenant.slug,
                decision.current_count,
                decision.note_limit,
            )
            raise QuotaExceededError(decision)

        note = await self.note_repo.create_note(
            tenant.id,
            {
                "title": request.title,
                "content": request.content,
                "author_id": principal.user_id,
            },
        )
        return self._note_to_response(note)

    async def get_note(self, principal: Principal, note_id: UUID) -> NoteResponse:
        """Get note by ID."""
        note = await self.note_repo.get_by_id(principal.tenant_id, note_id)
        if not note:
            self._log_not_found(principal, note_id)
            raise NotFoundError("Note")
        return self._note_to_response(note)

    async def list_notes(self, principal: Principal) -> List[NoteResponse]:
        """List the tenant's notes, newest first."""
        notes = await self.note_repo.list_notes(principal.tenant_id)
        return [self._note_to_response(note) for note in notes]

    async def update_note(
        self, principal: Principal, note_id: UUID, request: NoteUpdate
    ) -> NoteResponse:
        """Update existing note."""
        update_data = request.model_dump(exclude_none=True)
        note = await self.note_repo.update_note(principal.tenant_id, note_id, update_data)
        if not note:
            self._log_not_found(principal, note_id)
            raise NotFoundError("Note")
        return self._note_to_response(note)

    async def delete_note(self, principal: Principal, note_id: UUID) -> bool:
        """Delete note."""
        deleted = await self.note_repo.delete_note(principal.tenant_id, note_id)
        if not deleted:
            self._log_not_found(principal, note_id)
            raise NotFoundError("Note")
        return True

    def _log_not_found(self, principal: Principal, note_id: UUID) -> None:
        logger.info("Note %s not found in tenant %s", note_id, principal.tenant_slug)

    def _note_to_response(self, note: Note) -> NoteResponse:
        return NoteResponse(
            id=note.id,
            title=note.title,
            content=note.content,
            author_id=note.author_id,
            author_email=note.author_email,
            tenant_id=note.tenant_id,
            created_at=note.created_at,
            updated_at=note.updated_at,
        )
