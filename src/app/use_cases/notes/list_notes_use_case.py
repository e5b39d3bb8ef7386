from typing import List
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Result, Return
from .dtos import NoteInfo


class ListNotesUseCase:
    """List the caller's notes, newest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, owner_id: UUID) -> Result[List[NoteInfo]]:
        async with self.uow:
            notes = await self.uow.notes.list_by_owner(owner_id)
            return Return.ok([NoteInfo.from_entity(note) for note in notes])
