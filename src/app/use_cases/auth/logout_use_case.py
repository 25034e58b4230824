from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import LogoutResponse


class LogoutUseCase:
    """Revoke the session behind the current token"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, session_id: UUID) -> Result[LogoutResponse]:
        async with self.uow:
            await self.uow.sessions.revoke_by_id(session_id)
            await self.uow.commit()
            return Return.ok(LogoutResponse(message="Logged out successfully"))
