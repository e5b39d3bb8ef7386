from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import PasswordResetToken


class IPasswordResetTokenRepository(ABC):
    """PasswordResetToken repository interface - application layer"""

    @abstractmethod
    async def create(self, token: PasswordResetToken) -> PasswordResetToken:
        """Create a new password reset token record"""
        pass

    @abstractmethod
    async def get_by_id(self, token_id: UUID) -> Optional[PasswordResetToken]:
        """Get password reset token record by ID (the reset token's jti)"""
        pass

    @abstractmethod
    async def consume(self, token_id: UUID) -> bool:
        """Mark an unused record as used; False if it was already used"""
        pass
