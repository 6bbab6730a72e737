"""Notes API endpoints."""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.principal import Principal
from ..core.schemas.common import SuccessResponse
from ..core.schemas.notes import NoteCreate, NoteResponse, NoteUpdate
from ..core.services import NoteService
from ..database import get_db_session
from ..middleware.auth import get_current_principal

router = APIRouter(prefix="/notes", tags=["notes"])


@router.post("/", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
async def create_note(
    request: NoteCreate,
    principal: Principal = Depends(get_current_principal),
    session: AsyncSession = Depends(get_db_session),
):
    """Create a new note in the caller's tenant."""
    note_service = NoteService(session)
    return await note_service.create_note(principal, request)


@router.get("/", response_model=List[NoteResponse])
async def list_notes(
    principal: Principal = Depends(get_current_principal),
    session: AsyncSession = Depends(get_db_session),
):
    """List the tenant's notes, newest first."""
    note_service = NoteService(session)
    return await note_service.list_notes(principal)


@router.get("/{note_id}", response_model=NoteResponse)
async def get_note(
    note_id: UUID,
    principal: Principal = Depends(get_current_principal),
    session: AsyncSession = Depends(get_db_session),
):
    """Get a specific note."""
    note_service = NoteService(session)
    return await note_service.get_note(principal, note_id)


@router.put("/{note_id}", response_model=NoteResponse)
async def update_note(
    note_id: UUID,
    request: NoteUpdate,
    principal: Principal = Depends(get_current_principal),
    session: AsyncSession = Depends(get_db_session),
):
    """Update a note."""
    note_service = NoteService(session)
    return await note_service.update_note(principal, note_id, request)


@router.delete("/{note_id}", response_model=SuccessResponse)
async def delete_note(
    note_id: UUID,
    principal: Principal = Depends(get_current_principal),
    session: AsyncSession = Depends(get_db_session),
):
    """Delete a note."""
    note_service = NoteService(session)
    await note_service.delete_note(principal, note_id)
    return SuccessResponse(message="Note deleted successfully")
