"""
NotesFlow Domain Enums

Enumeration types shared by entities and services.
"""

from enum import Enum


class TokenKind(str, Enum):
    """Purpose of a signed token, carried in its `kind` claim"""

    session = "session"
    reset = "reset"
