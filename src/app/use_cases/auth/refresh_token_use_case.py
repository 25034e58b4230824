"""
Refresh Token Use Case

Rotates the bearer token: the current session is revoked and a new one issued.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import AuthResponse
from .sessions import issue_token, open_session
from .user_payload import build_user_payload


class RefreshTokenUseCase:
    """
    Use case for rotating a bearer token.

    Business Rules:
    - Old session is revoked before the new one is opened
    - Context state is returned as stored; it is not recomputed
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, session_id: UUID) -> Result[AuthResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            revoked = await self.uow.sessions.revoke_by_id(session_id)
            if not revoked:
                return Return.err(Error("SESSION_REVOKED", "Session has been revoked"))

            session = await open_session(self.uow, user.id)
            await self.uow.commit()

            return Return.ok(
                AuthResponse(
                    token=issue_token(session),
                    user=await build_user_payload(self.uow, user),
                )
            )
