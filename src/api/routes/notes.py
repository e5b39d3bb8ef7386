from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.notes import (
    CreateNoteCommand,
    CreateNoteUseCase,
    DeleteNoteResponse,
    DeleteNoteUseCase,
    ListNotesUseCase,
    NoteInfo,
    UpdateNoteCommand,
    UpdateNoteUseCase,
)
from src.depends import AuthenticatedIdentity, get_current_identity, get_unit_of_work
from src.libs.result import Error

router = APIRouter(prefix="/notes", tags=["Notes"])

NOTE_NOT_FOUND = Error("NOTE_NOT_FOUND", "Note not found")


class NoteRequest(BaseModel):
    """Create/update note HTTP request payload"""

    title: str = Field(..., min_length=1, description="Note title")
    content: str = Field(..., min_length=1, description="Note body")


def _parse_note_id(raw: str) -> Optional[UUID]:
    try:
        return UUID(raw)
    except ValueError:
        return None


def _raise_for_note_error(error: Error):
    if error.code == "NOTE_NOT_FOUND":
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    elif error.code == "VALIDATION_ERROR":
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    raise ServerError(error)


@router.get("", status_code=status.HTTP_200_OK, response_model=List[NoteInfo])
async def list_notes(
    identity: AuthenticatedIdentity = Depends(get_current_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Notes

    Returns the caller's notes, newest first.

    Raises:
        - 401 Unauthorized: Missing, invalid or expired token
    """
    use_case = ListNotesUseCase(uow)
    result = await use_case.execute(identity.identity_id)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=NoteInfo)
async def create_note(
    request: NoteRequest,
    identity: AuthenticatedIdentity = Depends(get_current_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Note

    The note is owned by the authenticated user; the body cannot name an owner.

    Raises:
        - 400 Bad Request: Missing title or content
        - 401 Unauthorized: Missing, invalid or expired token
    """
    command = CreateNoteCommand(title=request.title, content=request.content)

    use_case = CreateNoteUseCase(uow)
    result = await use_case.execute(identity.identity_id, command)

    if result.is_err():
        _raise_for_note_error(result.error)

    return result.value


@router.put("/{note_id}", status_code=status.HTTP_200_OK, response_model=NoteInfo)
async def update_note(
    note_id: str,
    request: NoteRequest,
    identity: AuthenticatedIdentity = Depends(get_current_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Note

    Raises:
        - 400 Bad Request: Missing title or content
        - 401 Unauthorized: Missing, invalid or expired token
        - 404 Not Found: Note absent or owned by someone else
    """
    parsed_id = _parse_note_id(note_id)
    if parsed_id is None:
        raise ClientError(NOTE_NOT_FOUND, status_code=status.HTTP_404_NOT_FOUND)

    command = UpdateNoteCommand(title=request.title, content=request.content)

    use_case = UpdateNoteUseCase(uow)
    result = await use_case.execute(identity.identity_id, parsed_id, command)

    if result.is_err():
        _raise_for_note_error(result.error)

    return result.value


@router.delete(
    "/{note_id}", status_code=status.HTTP_200_OK, response_model=DeleteNoteResponse
)
async def delete_note(
    note_id: str,
    identity: AuthenticatedIdentity = Depends(get_current_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Note

    Raises:
        - 401 Unauthorized: Missing, invalid or expired token
        - 404 Not Found: Note absent or owned by someone else
    """
    parsed_id = _parse_note_id(note_id)
    if parsed_id is None:
        raise ClientError(NOTE_NOT_FOUND, status_code=status.HTTP_404_NOT_FOUND)

    use_case = DeleteNoteUseCase(uow)
    result = await use_case.execute(identity.identity_id, parsed_id)

    if result.is_err():
        _raise_for_note_error(result.error)

    return result.value
