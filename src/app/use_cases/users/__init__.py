"""
User Use Cases
"""

from .load_identity_use_case import LoadIdentityUseCase

__all__ = [
    "LoadIdentityUseCase",
]
