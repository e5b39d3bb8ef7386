import logging

from src.app.repositories.user_repository import DuplicateEmailError
from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_codec import TokenCodec
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User
from src.libs.result import Error, Result, Return
from .register_dto import AuthResponse, RegisterCommand, UserInfo

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """
    Register Use Case

    Command/Response Pattern:
    - Input: RegisterCommand (validated business intent)
    - Output: Result[AuthResponse] (session token + public user data)

    Business Logic:
    1. Check if email already exists
    2. Hash password with the configured credential hasher
    3. Create User
    4. Commit transaction
    5. Issue a session token for the new identity
    """

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher, tokens: TokenCodec):
        self.uow = uow
        self.hasher = hasher
        self.tokens = tokens

    async def execute(self, command: RegisterCommand) -> Result[AuthResponse]:
        """
        Execute register use case

        Args:
            command: RegisterCommand with email and password

        Returns:
            Result[AuthResponse] with session token and user data
            or Error(EMAIL_ALREADY_EXISTS) if email exists
        """
        duplicate = Error("EMAIL_ALREADY_EXISTS", "User already exists")

        async with self.uow:
            existing_user = await self.uow.users.get_by_email(command.email)
            if existing_user:
                return Return.err(duplicate)

            password_hash = await self.hasher.hash(command.password)

            try:
                user = await self.uow.users.create(
                    User(email=command.email, password_hash=password_hash)
                )
            except DuplicateEmailError:
                return Return.err(duplicate)

            await self.uow.commit()
            user_id = user.id
            user_info = UserInfo(id=str(user_id), email=user.email)

        logger.info(f"Registered user {user_info.id}")

        token = self.tokens.issue(user_id, user_info.email)
        return Return.ok(AuthResponse(token=token, user=user_info))
