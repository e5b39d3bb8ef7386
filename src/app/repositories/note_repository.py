from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Note


class INoteRepository(ABC):
    """
    Note repository interface - application layer

    Every lookup takes the owner ID alongside the note ID. There is
    deliberately no unscoped get-by-id.
    """

    @abstractmethod
    async def list_by_owner(self, owner_id: UUID) -> List[Note]:
        """Get all notes of an owner, newest first"""
        pass

    @abstractmethod
    async def create(self, note: Note) -> Note:
        """Create a new note"""
        pass

    @abstractmethod
    async def get_owned(self, note_id: UUID, owner_id: UUID) -> Optional[Note]:
        """Get a note matching both ID and owner"""
        pass

    @abstractmethod
    async def update_owned(
        self, note_id: UUID, owner_id: UUID, title: str, content: str
    ) -> Optional[Note]:
        """Update title/content of a note matching both ID and owner, None if no match"""
        pass

    @abstractmethod
    async def delete_owned(self, note_id: UUID, owner_id: UUID) -> bool:
        """Delete a note matching both ID and owner, False if no match"""
        pass
