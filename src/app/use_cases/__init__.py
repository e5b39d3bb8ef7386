"""
Use Cases

Organized into domain folders:
- auth/: Registration, login and password reset
- users/: Current user lookup
- notes/: Ownership-scoped note CRUD
"""

from .auth import (
    RegisterUseCase,
    RegisterCommand,
    AuthResponse,
    LoginUseCase,
    RequestPasswordResetUseCase,
    ConfirmPasswordResetUseCase,
)
from .users import (
    LoadIdentityUseCase,
)
from .notes import (
    ListNotesUseCase,
    CreateNoteUseCase,
    UpdateNoteUseCase,
    DeleteNoteUseCase,
)

__all__ = [
    # Auth
    "RegisterUseCase",
    "RegisterCommand",
    "AuthResponse",
    "LoginUseCase",
    "RequestPasswordResetUseCase",
    "ConfirmPasswordResetUseCase",
    # Users
    "LoadIdentityUseCase",
    # Notes
    "ListNotesUseCase",
    "CreateNoteUseCase",
    "UpdateNoteUseCase",
    "DeleteNoteUseCase",
]
