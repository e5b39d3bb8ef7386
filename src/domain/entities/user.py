"""
User Entity

Represents a registered account (identity).
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from ..base import utcnow


class User(SQLModel, table=True):
    """
    User entity - a registered account keyed by email.

    Business Rules:
    - Email must be unique across all users (stored case-sensitively)
    - Password stored as bcrypt hash, never returned by the API
    - password_hash is replaced only by a confirmed password reset
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
