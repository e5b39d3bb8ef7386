"""
Note Entity

A titled text note owned by exactly one user.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow


class Note(SQLModel, table=True):
    """
    Note entity - owned by the user who created it.

    Business Rules:
    - owner_id is set at creation and never changes
    - Every read/update/delete is filtered by owner_id
    - Listed newest first by created_at
    """

    __tablename__ = "notes"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    owner_id: UUID = Field(foreign_key="users.id", index=True)

    title: str
    content: str

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_note_owner_created_at", "owner_id", "created_at"),)
