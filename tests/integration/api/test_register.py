import pytest
from httpx import AsyncClient

from tests.utils.api_helpers import register


@pytest.mark.asyncio
async def test_successful_register(client: AsyncClient, test_data):
    """Registering a new email returns a session token and the public user"""
    alice = test_data.get_user("alice")

    response = await client.post("/api/auth/register", json=alice)

    assert response.status_code == 201
    data = response.json()
    assert isinstance(data["token"], str) and len(data["token"]) > 0
    assert data["user"]["email"] == alice["email"]
    assert "id" in data["user"]
    assert set(data["user"].keys()) == {"id", "email"}
    assert "password" not in response.text
    assert "password_hash" not in response.text


@pytest.mark.asyncio
async def test_register_token_authenticates(client: AsyncClient, test_data):
    alice = test_data.get_user("alice")
    data = await register(client, alice["email"], alice["password"])

    response = await client.get(
        "/api/auth/me", headers={"Authorization": f"Bearer {data['token']}"}
    )

    assert response.status_code == 200
    assert response.json()["user"] == data["user"]


@pytest.mark.asyncio
async def test_register_duplicate_email(client: AsyncClient, test_data):
    """A second registration with the same email is rejected"""
    alice = test_data.get_user("alice")
    await register(client, alice["email"], alice["password"])

    response = await client.post(
        "/api/auth/register",
        json={"email": alice["email"], "password": "AnotherPass456!"},
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "EMAIL_ALREADY_EXISTS"

    # Original password still works
    login = await client.post("/api/auth/login", json=alice)
    assert login.status_code == 200


@pytest.mark.asyncio
async def test_register_email_is_case_sensitive(client: AsyncClient):
    await register(client, "Carol@Example.com", "CarolPass1!")

    response = await client.post(
        "/api/auth/register",
        json={"email": "carol@example.com", "password": "CarolPass1!"},
    )

    assert response.status_code == 201
    assert response.json()["user"]["email"] == "carol@example.com"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"email": "user@example.com"},
        {"password": "SecurePass123!"},
        {"email": "", "password": "SecurePass123!"},
        {"email": "user@example.com", "password": ""},
    ],
)
async def test_register_missing_fields(client: AsyncClient, payload):
    response = await client.post("/api/auth/register", json=payload)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"
