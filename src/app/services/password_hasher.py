from abc import ABC, abstractmethod


class CorruptCredentialError(Exception):
    """A stored password hash could not be parsed"""


class PasswordHasher(ABC):
    """
    Credential hasher port.

    hash() embeds a fresh random salt and the cost factor in its output.
    verify() returns False for a wrong password and raises
    CorruptCredentialError when the stored secret is malformed.
    """

    @abstractmethod
    async def hash(self, plaintext: str) -> str:
        pass

    @abstractmethod
    async def verify(self, plaintext: str, stored_secret: str) -> bool:
        pass

    @abstractmethod
    async def verify_decoy(self, plaintext: str) -> None:
        """Spend one verify() worth of work without a real stored secret"""
        pass
