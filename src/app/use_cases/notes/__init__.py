"""
Note Use Cases

Ownership-scoped note CRUD.
"""

from .list_notes_use_case import ListNotesUseCase
from .create_note_use_case import CreateNoteUseCase
from .update_note_use_case import UpdateNoteUseCase
from .delete_note_use_case import DeleteNoteUseCase
from .dtos import (
    CreateNoteCommand,
    UpdateNoteCommand,
    NoteInfo,
    DeleteNoteResponse,
)

__all__ = [
    # Use Cases
    "ListNotesUseCase",
    "CreateNoteUseCase",
    "UpdateNoteUseCase",
    "DeleteNoteUseCase",
    # DTOs
    "CreateNoteCommand",
    "UpdateNoteCommand",
    "NoteInfo",
    "DeleteNoteResponse",
]
