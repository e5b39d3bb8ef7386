"""
Register/Login Use Case DTOs (Data Transfer Objects)

Command/Response pattern for clean architecture separation:
- RegisterCommand: Input to use case (validated business intent)
- AuthResponse: Output from register and login (token plus public user data)
"""

from pydantic import BaseModel


class RegisterCommand(BaseModel):
    """
    Register command - represents validated registration intent

    Created by API layer after request validation passes.
    Contains only business-relevant data (no HTTP concerns).
    """

    email: str
    password: str


class UserInfo(BaseModel):
    """Public user information (never includes the password hash)"""

    id: str
    email: str


class AuthResponse(BaseModel):
    """
    Authentication response - structured output from register and login

    Contains the session token the client sends as a Bearer credential.
    """

    token: str
    user: UserInfo
