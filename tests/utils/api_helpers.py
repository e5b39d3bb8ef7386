from httpx import AsyncClient


async def register(client: AsyncClient, email: str, password: str) -> dict:
    response = await client.post(
        "/api/auth/register", json={"email": email, "password": password}
    )
    assert response.status_code == 201, response.text
    return response.json()


async def create_note(client: AsyncClient, token: str, title: str, content: str) -> dict:
    response = await client.post(
        "/api/notes", json={"title": title, "content": content}, headers=bearer(token)
    )
    assert response.status_code == 201, response.text
    return response.json()


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}
