import logging
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Note
from src.libs.result import Error, Result, Return
from .dtos import CreateNoteCommand, NoteInfo

logger = logging.getLogger(__name__)


class CreateNoteUseCase:
    """
    Use case for creating a note.

    Business Rules:
    - Title and content are both required (non-empty)
    - owner_id is the authenticated identity and is fixed for the note's lifetime
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, owner_id: UUID, command: CreateNoteCommand
    ) -> Result[NoteInfo]:
        if not command.title or not command.content:
            return Return.err(
                Error("VALIDATION_ERROR", "Title and content required")
            )

        async with self.uow:
            note = await self.uow.notes.create(
                Note(title=command.title, content=command.content, owner_id=owner_id)
            )
            await self.uow.commit()
            note_info = NoteInfo.from_entity(note)

        logger.debug(f"Created note {note_info.id} for user {owner_id}")
        return Return.ok(note_info)
