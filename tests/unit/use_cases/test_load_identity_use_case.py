from uuid import uuid4

import pytest

from src.app.use_cases.users import LoadIdentityUseCase
from src.domain.entities import User


@pytest.mark.asyncio
async def test_load_identity(mock_uow):
    user = User(email="user@acme.com", password_hash="x" * 60)
    mock_uow.users.get_by_id.return_value = user

    result = await LoadIdentityUseCase(mock_uow).execute(user.id)

    assert result.is_ok()
    assert result.value.user.id == str(user.id)
    assert result.value.user.email == "user@acme.com"
    assert "password_hash" not in result.value.model_dump()["user"]


@pytest.mark.asyncio
async def test_load_identity_user_gone(mock_uow):
    mock_uow.users.get_by_id.return_value = None

    result = await LoadIdentityUseCase(mock_uow).execute(uuid4())

    assert result.is_err()
    assert result.error.code == "USER_NOT_FOUND"
