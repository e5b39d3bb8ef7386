"""
Confirm Password Reset Use Case

Replaces a user's password once, authorized by a reset token.
"""

import logging

from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_codec import TokenCodec
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.libs.result import Error, Result, Return
from .dtos import ConfirmPasswordResetResponse

logger = logging.getLogger(__name__)


class ConfirmPasswordResetUseCase:
    """
    Use case for confirming password reset.

    Business Rules:
    - Token must be a valid, unexpired reset token (session tokens are rejected)
    - The backing record must exist, belong to the token's user and be unused
    - The record is consumed in the same transaction as the password change
    - A consumed token can never authorize a second change
    - No session token is issued; the user logs in with the new password
    """

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher, tokens: TokenCodec):
        self.uow = uow
        self.hasher = hasher
        self.tokens = tokens

    def _validate_password(self, password: str) -> Result[None]:
        if not password:
            return Return.err(Error("INVALID_PASSWORD", "Password required"))
        return Return.ok(None)

    async def execute(
        self, token: str, new_password: str
    ) -> Result[ConfirmPasswordResetResponse]:
        """
        Execute confirm password reset use case.

        Args:
            token: Reset token as delivered to the user
            new_password: New password to set

        Returns:
            Result with confirmation message, or Error

        Errors:
            - INVALID_PASSWORD: Empty password
            - INVALID_TOKEN: Token invalid, expired, unknown or already used
            - USER_NOT_FOUND: User removed since the token was issued
        """
        invalid = Error("INVALID_TOKEN", "Invalid or expired token")

        password_validation = self._validate_password(new_password)
        if password_validation.is_err():
            return Return.err(password_validation.error)

        claims_result = self.tokens.validate_reset(token)
        if claims_result.is_err():
            return Return.err(invalid)
        claims = claims_result.value

        # Hash before any write so no lock is held for the bcrypt cost
        new_hash = await self.hasher.hash(new_password)

        async with self.uow:
            record = await self.uow.password_reset_tokens.get_by_id(claims.token_id)
            if (
                record is None
                or record.user_id != claims.identity_id
                or record.used
                or record.expires_at < utcnow()
            ):
                return Return.err(invalid)

            user = await self.uow.users.get_by_id(claims.identity_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            # Conditional update: a concurrent confirm with the same token loses here
            if not await self.uow.password_reset_tokens.consume(record.id):
                return Return.err(invalid)

            user.password_hash = new_hash
            await self.uow.users.update(user)

            await self.uow.commit()

        logger.info(f"Password reset completed for user {claims.identity_id}")

        return Return.ok(
            ConfirmPasswordResetResponse(message="Password updated successfully")
        )
