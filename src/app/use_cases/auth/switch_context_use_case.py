"""
Switch Context Use Case

Handles switching the user's active context.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.context_resolver import ContextResolver
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent

from .dtos import SwitchContextResponse
from .user_payload import build_user_payload


class SwitchContextUseCase:
    """
    Use case for switching the active context.

    Business Rules:
    - Target must be in the user's stored available_contexts
      (contexts are not recomputed here; see RefreshContextsUseCase)
    - A failed switch leaves current_context unchanged
    - Creates audit event with previous and new context
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, context: str) -> Result[SwitchContextResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            previous_context = user.current_context.value if user.current_context else None

            resolver = ContextResolver(self.uow)
            if not await resolver.switch_context(user, context):
                return Return.err(
                    Error(
                        "INVALID_CONTEXT",
                        "Invalid context for this user",
                        details={"available_contexts": list(user.available_contexts or [])},
                    )
                )

            artist = await resolver.get_current_artist(user)

            audit = AuditEvent(
                artist_id=artist.id if artist else None,
                user_id=user.id,
                action="context_switch",
                event_metadata={
                    "previous_context": previous_context,
                    "new_context": context,
                },
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            return Return.ok(
                SwitchContextResponse(
                    message="Context switched successfully",
                    user=await build_user_payload(self.uow, user),
                )
            )
