"""
Request Password Reset Use Case

Issues a single-use reset token and hands it to the delivery channel.
"""

import logging

from src.app.services.reset_token_sender import ResetTokenSender
from src.app.services.token_codec import TokenCodec
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import PasswordResetToken
from src.libs.result import Result, Return
from .dtos import RequestPasswordResetResponse

logger = logging.getLogger(__name__)

GENERIC_ACK = "If the email exists, instructions will be sent"


class RequestPasswordResetUseCase:
    """
    Use case for requesting password reset.

    Business Rules:
    - Reset token is a signed token of kind "reset" whose jti is a stored record
    - Token expires after the codec's reset TTL (1 hour by default)
    - No email enumeration (same response for known/unknown emails)
    - Delivery failures are logged, never reported to the requester
    """

    def __init__(
        self, uow: UnitOfWork, tokens: TokenCodec, sender: ResetTokenSender
    ):
        self.uow = uow
        self.tokens = tokens
        self.sender = sender

    async def execute(self, email: str) -> Result[RequestPasswordResetResponse]:
        """
        Execute request password reset use case.

        Args:
            email: Email address the requester claims to own

        Returns:
            Result with the generic acknowledgement
        """
        ack = RequestPasswordResetResponse(message=GENERIC_ACK)

        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                return Return.ok(ack)

            record = await self.uow.password_reset_tokens.create(
                PasswordResetToken(
                    user_id=user.id,
                    used=False,
                    expires_at=utcnow() + self.tokens.reset_ttl,
                )
            )
            await self.uow.commit()
            user_id, user_email, token_id = user.id, user.email, record.id

        reset_token = self.tokens.issue_reset(user_id, token_id)
        logger.info(f"Password reset requested for user {user_id} (token {token_id})")

        try:
            await self.sender.send(user_email, reset_token)
        except Exception:
            logger.exception(f"Could not deliver reset token {token_id}")

        return Return.ok(ack)
