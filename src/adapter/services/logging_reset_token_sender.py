import logging

from src.app.services.reset_token_sender import ResetTokenSender

logger = logging.getLogger(__name__)


class LoggingResetTokenSender(ResetTokenSender):
    """
    Development delivery channel: writes the reset token to the log.

    Swap for a mail-backed sender in deployments that deliver email.
    """

    async def send(self, email: str, reset_token: str) -> None:
        logger.info(f"Reset token for {email}: {reset_token}")
