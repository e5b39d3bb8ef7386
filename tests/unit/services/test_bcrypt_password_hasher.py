import pytest

from src.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from src.app.services.password_hasher import CorruptCredentialError


@pytest.mark.asyncio
async def test_hash_embeds_salt_and_cost(hasher: BcryptPasswordHasher):
    first = await hasher.hash("SecurePass123!")
    second = await hasher.hash("SecurePass123!")

    assert first != second  # fresh salt per call
    assert first.startswith("$2b$04$")
    assert "SecurePass123!" not in first


@pytest.mark.asyncio
async def test_verify_accepts_matching_password(hasher: BcryptPasswordHasher):
    stored = await hasher.hash("SecurePass123!")

    assert await hasher.verify("SecurePass123!", stored) is True


@pytest.mark.asyncio
async def test_verify_rejects_wrong_password(hasher: BcryptPasswordHasher):
    stored = await hasher.hash("SecurePass123!")

    assert await hasher.verify("securepass123!", stored) is False
    assert await hasher.verify("", stored) is False


@pytest.mark.asyncio
async def test_verify_malformed_hash_raises(hasher: BcryptPasswordHasher):
    with pytest.raises(CorruptCredentialError):
        await hasher.verify("SecurePass123!", "not-a-bcrypt-hash")


@pytest.mark.asyncio
async def test_cost_factor_is_configurable():
    hasher = BcryptPasswordHasher(rounds=5)

    stored = await hasher.hash("pw")

    assert stored.startswith("$2b$05$")


@pytest.mark.asyncio
async def test_long_passwords_are_truncated_to_bcrypt_limit(hasher: BcryptPasswordHasher):
    base = "x" * 72
    stored = await hasher.hash(base + "first-suffix")

    assert await hasher.verify(base + "second-suffix", stored) is True


@pytest.mark.asyncio
async def test_verify_decoy_does_not_raise(hasher: BcryptPasswordHasher):
    assert await hasher.verify_decoy("anything") is None
