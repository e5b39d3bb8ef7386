"""
Load Identity Use Case

Loads the current user from the identity resolved by the authentication gate.
"""

from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import MeResponse
from src.app.use_cases.auth.register_dto import UserInfo
from src.libs.result import Error, Result, Return


class LoadIdentityUseCase:
    """
    Use case for loading the current user ("who am I").

    Business Rules:
    - identity_id comes from a validated session token, never the client body
    - User must still exist
    - Returns public user details only
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity_id: UUID) -> Result[MeResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(identity_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            return Return.ok(
                MeResponse(user=UserInfo(id=str(user.id), email=user.email))
            )
