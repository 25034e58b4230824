"""
Login Use Case

Authenticates a user, refreshes their contexts and issues a bearer token.
"""

import logging
from typing import Optional

import bcrypt
from libs.result import Error, Result, Return

from src.app.services.context_resolver import ContextResolver
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import AuditEvent

from .dtos import AuthResponse
from .sessions import issue_token, open_session
from .user_payload import build_user_payload

logger = logging.getLogger(__name__)


class LoginUseCase:
    """
    Use case for user login and token issuance.

    Business Rules:
    - Constant-time password comparison to prevent timing attacks
    - Available contexts are recomputed on every login
    - An explicitly requested context must be in the refreshed set,
      otherwise login fails with the available contexts and no token
    - Creates a new session and updates user.last_login_at
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, email: str, password: str, context: Optional[str] = None
    ) -> Result[AuthResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password
            context: Optional context to start in

        Returns:
            Result with AuthResponse, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            # Always perform a hash check even if user not found
            if user is None:
                bcrypt.checkpw(b"dummy_password", bcrypt.hashpw(b"dummy", bcrypt.gensalt(4)))
                return Return.err(
                    Error("INVALID_CREDENTIALS", "The provided credentials are incorrect")
                )

            if not bcrypt.checkpw(password.encode(), user.password_hash.encode()):
                return Return.err(
                    Error("INVALID_CREDENTIALS", "The provided credentials are incorrect")
                )

            resolver = ContextResolver(self.uow)
            user = await resolver.refresh_contexts(user)

            if context is not None:
                switched = await resolver.switch_context(user, context)
                if not switched:
                    # Keep the refreshed contexts; no session is opened
                    await self.uow.commit()
                    return Return.err(
                        Error(
                            "INVALID_CONTEXT",
                            "Invalid context for this user",
                            details={"available_contexts": list(user.available_contexts)},
                        )
                    )

            session = await open_session(self.uow, user.id)

            user.last_login_at = utc_now()
            user = await self.uow.users.update(user)

            audit = AuditEvent(
                user_id=user.id,
                action="login",
                event_metadata={
                    "email": email,
                    "current_context": user.current_context.value
                    if user.current_context
                    else None,
                },
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            return Return.ok(
                AuthResponse(
                    token=issue_token(session),
                    user=await build_user_payload(self.uow, user),
                )
            )
