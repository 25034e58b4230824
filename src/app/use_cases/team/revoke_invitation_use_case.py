"""
Revoke Invitation Use Case

Handles withdrawing a pending invitation.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent, InvitationStatus

from .dtos import MessageResponse

logger = logging.getLogger(__name__)


class RevokeInvitationUseCase:
    """
    Use case for revoking a team invitation.

    Business Rules:
    - Invitation must belong to the caller's current artist
    - Only pending invitations can be revoked (pending -> expired)
    - Creates audit event
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, requester_user_id: UUID, artist_id: UUID, invitation_id: UUID
    ) -> Result[MessageResponse]:
        async with self.uow:
            invitation = await self.uow.invitations.get_by_id(invitation_id)
            if invitation is None or invitation.artist_id != artist_id:
                return Return.err(
                    Error("INVITATION_NOT_FOUND", "Invitation not found")
                )

            revoked = await self.uow.invitations.transition_from_pending(
                invitation.id, InvitationStatus.expired
            )
            if not revoked:
                return Return.err(
                    Error("INVITATION_NOT_PENDING", "Invitation is no longer pending")
                )

            audit = AuditEvent(
                artist_id=artist_id,
                user_id=requester_user_id,
                action="invitation_revoked",
                event_metadata={
                    "invitation_id": str(invitation.id),
                    "invited_email": invitation.email,
                },
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()
            logger.info("Invitation %s revoked", invitation.id)

            return Return.ok(MessageResponse(message="Invitation revoked"))
