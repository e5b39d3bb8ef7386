from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, Result, Return
from .dtos import NoteInfo, UpdateNoteCommand


class UpdateNoteUseCase:
    """
    Use case for updating a note.

    Business Rules:
    - Lookup and update filter on note ID and owner ID together
    - A note owned by someone else is reported exactly like a missing note
    - Title and content are both required (non-empty)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, owner_id: UUID, note_id: UUID, command: UpdateNoteCommand
    ) -> Result[NoteInfo]:
        if not command.title or not command.content:
            return Return.err(
                Error("VALIDATION_ERROR", "Title and content required")
            )

        async with self.uow:
            note = await self.uow.notes.update_owned(
                note_id, owner_id, command.title, command.content
            )
            if note is None:
                return Return.err(Error("NOTE_NOT_FOUND", "Note not found"))

            await self.uow.commit()
            return Return.ok(NoteInfo.from_entity(note))
