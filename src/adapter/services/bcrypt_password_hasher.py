import bcrypt
from fastapi.concurrency import run_in_threadpool

from src.app.services.password_hasher import CorruptCredentialError, PasswordHasher

# bcrypt only consumes the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72


def _encode(plaintext: str) -> bytes:
    return plaintext.encode("utf-8")[:BCRYPT_MAX_BYTES]


class BcryptPasswordHasher(PasswordHasher):
    """
    bcrypt implementation of the credential hasher.

    The work runs in a worker thread so a slow hash never stalls the event
    loop for unrelated requests. The cost factor is fixed per instance.
    """

    def __init__(self, rounds: int = 12):
        self.rounds = rounds
        self._decoy_hash = bcrypt.hashpw(b"decoy-password", bcrypt.gensalt(rounds))

    def _hash(self, plaintext: str) -> str:
        return bcrypt.hashpw(_encode(plaintext), bcrypt.gensalt(self.rounds)).decode()

    @staticmethod
    def _verify(plaintext: str, stored_secret: str) -> bool:
        try:
            return bcrypt.checkpw(_encode(plaintext), stored_secret.encode())
        except ValueError as exc:
            raise CorruptCredentialError("Stored password hash is malformed") from exc

    async def hash(self, plaintext: str) -> str:
        return await run_in_threadpool(self._hash, plaintext)

    async def verify(self, plaintext: str, stored_secret: str) -> bool:
        return await run_in_threadpool(self._verify, plaintext, stored_secret)

    async def verify_decoy(self, plaintext: str) -> None:
        await run_in_threadpool(bcrypt.checkpw, _encode(plaintext), self._decoy_hash)
