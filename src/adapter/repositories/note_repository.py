from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.note_repository import INoteRepository
from src.domain.entities import Note


class NoteRepository(INoteRepository):
    """Note repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_by_owner(self, owner_id: UUID) -> List[Note]:
        """Get all notes of an owner, newest first"""
        stmt = (
            select(Note)
            .where(Note.owner_id == owner_id)
            .order_by(Note.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, note: Note) -> Note:
        """Create a new note"""
        self.session.add(note)
        await self.session.flush()
        await self.session.refresh(note)
        return note

    async def get_owned(self, note_id: UUID, owner_id: UUID) -> Optional[Note]:
        """Get a note matching both ID and owner"""
        stmt = (
            select(Note)
            .where(Note.id == note_id, Note.owner_id == owner_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def update_owned(
        self, note_id: UUID, owner_id: UUID, title: str, content: str
    ) -> Optional[Note]:
        """Update a note in one conditional statement filtered by ID and owner"""
        stmt = (
            update(Note)
            .where(Note.id == note_id, Note.owner_id == owner_id)
            .values(title=title, content=content)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        if result.rowcount == 0:
            return None
        return await self.get_owned(note_id, owner_id)

    async def delete_owned(self, note_id: UUID, owner_id: UUID) -> bool:
        """Delete a note in one conditional statement filtered by ID and owner"""
        stmt = delete(Note).where(Note.id == note_id, Note.owner_id == owner_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
