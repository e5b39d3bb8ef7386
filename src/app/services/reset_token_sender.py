from abc import ABC, abstractmethod


class ResetTokenSender(ABC):
    """Delivers a password reset token to the account owner out-of-band"""

    @abstractmethod
    async def send(self, email: str, reset_token: str) -> None:
        pass
