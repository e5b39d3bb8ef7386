"""
NotesFlow Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

from .enums import TokenKind

from .user import User
from .note import Note
from .password_reset_token import PasswordResetToken

__all__ = [
    # Enums
    "TokenKind",
    # Entities
    "User",
    "Note",
    "PasswordResetToken",
]
