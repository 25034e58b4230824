"""
Load Context Use Case

Loads the current user with their resolved context.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import UserPayload
from src.app.use_cases.auth.user_payload import build_user_payload


class LoadContextUseCase:
    """
    Use case for loading the current user's context.

    Business Rules:
    - User must exist
    - Context state is reported as stored; no refresh happens here
    - Returns current context, role, permissions and current artist
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[UserPayload]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            return Return.ok(await build_user_payload(self.uow, user))
