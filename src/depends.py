from dataclasses import dataclass
from datetime import timedelta
from typing import Optional
from uuid import UUID

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from src.adapter.services.jwt_token_codec import JwtTokenCodec
from src.adapter.services.logging_reset_token_sender import LoggingResetTokenSender
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import UNAUTHORIZED, ClientError
from src.app.services.password_hasher import PasswordHasher
from src.app.services.reset_token_sender import ResetTokenSender
from src.app.services.token_codec import TokenCodec

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

# Built once from configuration; read-only for the life of the process
token_codec = JwtTokenCodec(
    secret=ApplicationConfig.JWT_SECRET,
    algorithm=ApplicationConfig.JWT_ALGORITHM,
    session_ttl=timedelta(days=ApplicationConfig.SESSION_TOKEN_TTL_DAYS),
    reset_ttl=timedelta(minutes=ApplicationConfig.RESET_TOKEN_TTL_MINUTES),
)
password_hasher = BcryptPasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS)
reset_token_sender = LoggingResetTokenSender()

security = HTTPBearer(auto_error=False)


async def init_db():
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def dispose_db():
    await engine.dispose()


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_token_codec() -> TokenCodec:
    return token_codec


def get_password_hasher() -> PasswordHasher:
    return password_hasher


def get_reset_token_sender() -> ResetTokenSender:
    return reset_token_sender


@dataclass(frozen=True)
class AuthenticatedIdentity:
    """Identity bound to the current request by get_current_identity"""

    identity_id: UUID
    email: str


async def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    tokens: TokenCodec = Depends(get_token_codec),
) -> AuthenticatedIdentity:
    """
    Dependency to extract and verify the session token from the Authorization header.

    Args:
        credentials: Bearer token from Authorization header (None if absent)
        tokens: Token codec holding the signing secret

    Returns:
        AuthenticatedIdentity with identity_id and email

    Raises:
        ClientError: 401 UNAUTHORIZED if the header is missing or malformed,
            or the token is invalid, expired or not a session token
    """
    if credentials is None or not credentials.credentials:
        raise ClientError(UNAUTHORIZED, status_code=status.HTTP_401_UNAUTHORIZED)

    result = tokens.validate(credentials.credentials)
    if result.is_err():
        raise ClientError(UNAUTHORIZED, status_code=status.HTTP_401_UNAUTHORIZED)

    claims = result.value
    return AuthenticatedIdentity(identity_id=claims.identity_id, email=claims.email)
