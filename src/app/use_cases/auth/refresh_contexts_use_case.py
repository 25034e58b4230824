from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.context_resolver import ContextResolver
from src.app.services.unit_of_work import UnitOfWork

from .dtos import ContextsResponse


class RefreshContextsUseCase:
    """
    Recompute and persist the user's available contexts.

    This is the only way a context gained or lost since login becomes visible
    to context switching.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[ContextsResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            user = await ContextResolver(self.uow).refresh_contexts(user)
            await self.uow.commit()

            return Return.ok(
                ContextsResponse(
                    available_contexts=list(user.available_contexts),
                    current_context=user.current_context.value
                    if user.current_context
                    else None,
                    is_multi_role=user.is_multi_role,
                )
            )
