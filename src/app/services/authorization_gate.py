"""
Authorization Gate

Request-time decision point in front of protected operations. Failures are
business decisions, never transient, and are not retried.
"""

import logging
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from libs.result import Error, Result, Return
from src.app.services.context_resolver import ContextResolver
from src.app.services.unit_of_work import UnitOfWork
from src.domain.permissions import Permissions

logger = logging.getLogger(__name__)


class AccessContext(BaseModel):
    """Snapshot of the caller's resolved context, safe to use after the UoW closes"""

    user_id: UUID
    current_context: Optional[str]
    available_contexts: List[str]
    permissions: Permissions
    artist_id: Optional[UUID] = None


class AuthorizationGate:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def authorize(
        self, user_id: Optional[UUID], capability: Optional[str] = None
    ) -> Result[AccessContext]:
        """
        Allow the call only if the user's current context grants `capability`.

        Without a capability, an active context is still required.
        """
        if user_id is None:
            return Return.err(Error("UNAUTHENTICATED", "Unauthenticated"))

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("UNAUTHENTICATED", "Unauthenticated"))

            resolver = ContextResolver(self.uow)
            permissions = await resolver.get_permissions(user)
            current_context = user.current_context.value if user.current_context else None

            if capability is not None:
                if not permissions.allows(capability):
                    logger.warning(
                        "User %s denied %s in context %s",
                        user.id,
                        capability,
                        current_context,
                    )
                    return Return.err(
                        Error(
                            "INSUFFICIENT_PERMISSIONS",
                            "Insufficient permissions for this action",
                            details={
                                "required_permission": capability,
                                "current_context": current_context,
                                "current_permissions": permissions.model_dump(),
                            },
                        )
                    )
            elif current_context is None:
                return Return.err(
                    Error(
                        "NO_ACTIVE_CONTEXT",
                        "No active context. Please select a role.",
                        details={"available_contexts": list(user.available_contexts or [])},
                    )
                )

            artist = await resolver.get_current_artist(user)

            return Return.ok(
                AccessContext(
                    user_id=user.id,
                    current_context=current_context,
                    available_contexts=list(user.available_contexts or []),
                    permissions=permissions,
                    artist_id=artist.id if artist else None,
                )
            )
