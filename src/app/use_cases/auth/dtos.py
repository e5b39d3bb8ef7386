"""
Authentication Use Case DTOs (Data Transfer Objects)

Response classes for the password reset and identity flows.
"""

from pydantic import BaseModel

from .register_dto import UserInfo


class MeResponse(BaseModel):
    """Response for load identity use case"""

    user: UserInfo


class RequestPasswordResetResponse(BaseModel):
    """Response for request password reset use case"""

    message: str


class ConfirmPasswordResetResponse(BaseModel):
    """Response for confirm password reset use case"""

    message: str
