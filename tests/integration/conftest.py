from typing import List, Tuple

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.reset_token_sender import ResetTokenSender
from src.depends import get_password_hasher, get_reset_token_sender, get_unit_of_work
from tests.fixtures.json_loader import TestDataLoader


class RecordingResetTokenSender(ResetTokenSender):
    """Keeps delivered reset tokens in memory instead of sending them"""

    def __init__(self):
        self.sent: List[Tuple[str, str]] = []

    async def send(self, email: str, reset_token: str) -> None:
        self.sent.append((email, reset_token))

    def last_token_for(self, email: str) -> str:
        return [token for recipient, token in self.sent if recipient == email][-1]


@pytest.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path}/test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest.fixture
def reset_outbox():
    return RecordingResetTokenSender()


@pytest_asyncio.fixture
async def client(engine, reset_outbox):
    from src.api.app import create_app

    app = create_app(ApplicationConfig)
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    # One session per request, as in production
    async def override_get_unit_of_work():
        async with Session() as session:
            yield SqlAlchemyUnitOfWork(session)

    fast_hasher = BcryptPasswordHasher(rounds=4)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_password_hasher] = lambda: fast_hasher
    app.dependency_overrides[get_reset_token_sender] = lambda: reset_outbox

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
