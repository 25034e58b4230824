from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import AuthenticatedUser


class AuthenticateUseCase:
    """
    Resolve the identity behind a verified token.

    Business Rules:
    - Session must exist, belong to the user, and be neither revoked nor expired
    - User must still exist
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, session_id: UUID) -> Result[AuthenticatedUser]:
        async with self.uow:
            session = await self.uow.sessions.get_by_id(session_id)
            if session is None or session.user_id != user_id or not session.is_usable():
                return Return.err(Error("INVALID_TOKEN", "Invalid or expired token"))

            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("INVALID_TOKEN", "Invalid or expired token"))

            return Return.ok(
                AuthenticatedUser(user_id=str(user.id), session_id=str(session.id))
            )
