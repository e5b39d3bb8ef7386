import pytest
from unittest.mock import AsyncMock, MagicMock

from src.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from src.adapter.services.jwt_token_codec import JwtTokenCodec


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock()
    uow.users.get_by_id = AsyncMock()
    uow.users.create = AsyncMock()
    uow.users.update = AsyncMock()

    uow.notes = MagicMock()
    uow.notes.list_by_owner = AsyncMock()
    uow.notes.create = AsyncMock()
    uow.notes.get_owned = AsyncMock()
    uow.notes.update_owned = AsyncMock()
    uow.notes.delete_owned = AsyncMock()

    uow.password_reset_tokens = MagicMock()
    uow.password_reset_tokens.create = AsyncMock()
    uow.password_reset_tokens.get_by_id = AsyncMock()
    uow.password_reset_tokens.consume = AsyncMock()
    return uow


@pytest.fixture
def hasher():
    # Minimum bcrypt cost keeps the suite fast
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def token_codec():
    return JwtTokenCodec(secret="unit-test-secret")
