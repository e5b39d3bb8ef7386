"""
Unit tests for RequestPasswordResetUseCase

Tests token issuance and the no-enumeration guarantee with mocked dependencies.
"""
from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.app.services.reset_token_sender import ResetTokenSender
from src.app.use_cases.auth.request_password_reset_use_case import (
    RequestPasswordResetUseCase,
)
from src.domain.base import utcnow
from src.domain.entities import User


@pytest.fixture
def sender():
    sender = MagicMock(spec=ResetTokenSender)
    sender.send = AsyncMock()
    return sender


@pytest.fixture
def known_user():
    return User(email="user@example.com", password_hash="x" * 60)


@pytest.mark.asyncio
async def test_known_email_issues_and_sends_reset_token(
    mock_uow, token_codec, sender, known_user
):
    # Arrange
    mock_uow.users.get_by_email.return_value = known_user
    created_record = None

    async def capture_create(record):
        nonlocal created_record
        created_record = record
        return record

    mock_uow.password_reset_tokens.create.side_effect = capture_create

    use_case = RequestPasswordResetUseCase(mock_uow, token_codec, sender)

    # Act
    result = await use_case.execute("user@example.com")

    # Assert
    assert result.is_ok()
    assert created_record.user_id == known_user.id
    assert created_record.used is False
    assert created_record.expires_at > utcnow() + timedelta(minutes=59)
    mock_uow.commit.assert_called_once()

    sender.send.assert_awaited_once()
    email, reset_token = sender.send.call_args.args
    assert email == "user@example.com"

    claims = token_codec.validate_reset(reset_token)
    assert claims.is_ok()
    assert claims.value.identity_id == known_user.id
    assert claims.value.token_id == created_record.id


@pytest.mark.asyncio
async def test_unknown_email_gets_identical_ack(mock_uow, token_codec, sender, known_user):
    use_case = RequestPasswordResetUseCase(mock_uow, token_codec, sender)

    mock_uow.users.get_by_email.return_value = None
    unknown = await use_case.execute("nobody@example.com")

    mock_uow.users.get_by_email.return_value = known_user
    mock_uow.password_reset_tokens.create.side_effect = _echo
    known = await use_case.execute("user@example.com")

    assert unknown.is_ok() and known.is_ok()
    assert unknown.value == known.value
    assert sender.send.await_count == 1


@pytest.mark.asyncio
async def test_unknown_email_creates_nothing(mock_uow, token_codec, sender):
    mock_uow.users.get_by_email.return_value = None

    use_case = RequestPasswordResetUseCase(mock_uow, token_codec, sender)
    result = await use_case.execute("nobody@example.com")

    assert result.is_ok()
    mock_uow.password_reset_tokens.create.assert_not_called()
    mock_uow.commit.assert_not_called()
    sender.send.assert_not_called()


@pytest.mark.asyncio
async def test_delivery_failure_does_not_change_response(
    mock_uow, token_codec, sender, known_user
):
    mock_uow.users.get_by_email.return_value = known_user
    mock_uow.password_reset_tokens.create.side_effect = _echo
    sender.send.side_effect = ConnectionError("smtp down")

    use_case = RequestPasswordResetUseCase(mock_uow, token_codec, sender)
    result = await use_case.execute("user@example.com")

    assert result.is_ok()
    assert result.value.message == "If the email exists, instructions will be sent"


async def _echo(value):
    return value
