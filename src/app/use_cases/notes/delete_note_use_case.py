from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, Result, Return
from .dtos import DeleteNoteResponse


class DeleteNoteUseCase:
    """
    Use case for deleting a note.

    Business Rules:
    - Delete filters on note ID and owner ID in one statement
    - A note owned by someone else is reported exactly like a missing note
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, owner_id: UUID, note_id: UUID) -> Result[DeleteNoteResponse]:
        async with self.uow:
            deleted = await self.uow.notes.delete_owned(note_id, owner_id)
            if not deleted:
                return Return.err(Error("NOTE_NOT_FOUND", "Note not found"))

            await self.uow.commit()

        return Return.ok(DeleteNoteResponse(message="Note deleted successfully"))
