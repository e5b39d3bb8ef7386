"""
Note Use Case DTOs (Data Transfer Objects)

Commands carry client-editable fields only; the owner always comes from the
authenticated identity.
"""

from datetime import datetime

from pydantic import BaseModel

from src.domain.entities import Note


class CreateNoteCommand(BaseModel):
    """Create note command"""

    title: str
    content: str


class UpdateNoteCommand(BaseModel):
    """Update note command (full replacement of title and content)"""

    title: str
    content: str


class NoteInfo(BaseModel):
    """Note as returned to its owner"""

    id: str
    title: str
    content: str
    owner_id: str
    created_at: datetime

    @classmethod
    def from_entity(cls, note: Note) -> "NoteInfo":
        return cls(
            id=str(note.id),
            title=note.title,
            content=note.content,
            owner_id=str(note.owner_id),
            created_at=note.created_at,
        )


class DeleteNoteResponse(BaseModel):
    """Response for delete note use case"""

    message: str
