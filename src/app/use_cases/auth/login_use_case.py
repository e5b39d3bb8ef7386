"""
Login Use Case

Handles user authentication and returns a session token.
"""

import logging

from src.app.services.password_hasher import CorruptCredentialError, PasswordHasher
from src.app.services.token_codec import TokenCodec
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, Result, Return
from .register_dto import AuthResponse, UserInfo

logger = logging.getLogger(__name__)


class LoginUseCase:
    """
    Use case for user login and session token issuance.

    Business Rules:
    - Unknown email and wrong password return the same INVALID_CREDENTIALS
    - A hash check is performed even when the user is not found
    - A corrupt stored hash is an internal failure, not a wrong password
    """

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher, tokens: TokenCodec):
        self.uow = uow
        self.hasher = hasher
        self.tokens = tokens

    async def execute(self, email: str, password: str) -> Result[AuthResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with AuthResponse containing token and user info, or Error
        """
        invalid = Error("INVALID_CREDENTIALS", "Invalid credentials")

        # The row is only usable while the unit of work is open; exit rolls back
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                await self.hasher.verify_decoy(password)
                return Return.err(invalid)

            try:
                password_valid = await self.hasher.verify(password, user.password_hash)
            except CorruptCredentialError:
                logger.error(f"Stored password hash for user {user.id} is corrupt")
                return Return.err(
                    Error("CORRUPT_CREDENTIAL", "Stored credential could not be verified")
                )

            if not password_valid:
                return Return.err(invalid)

            token = self.tokens.issue(user.id, user.email)
            return Return.ok(
                AuthResponse(token=token, user=UserInfo(id=str(user.id), email=user.email))
            )
