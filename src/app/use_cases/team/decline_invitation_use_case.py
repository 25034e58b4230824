import logging
from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent, InvitationStatus

from .accept_invitation_use_case import INVITATION_NOT_FOUND, find_acceptable_invitation
from .dtos import MessageResponse

logger = logging.getLogger(__name__)


class DeclineInvitationUseCase:
    """
    Use case for declining a team invitation.

    Same token rules as acceptance; pending -> declined is terminal.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: str, user_id: UUID) -> Result[MessageResponse]:
        async with self.uow:
            invitation = await find_acceptable_invitation(self.uow, token)
            if invitation is None:
                return Return.err(INVITATION_NOT_FOUND)

            declined = await self.uow.invitations.transition_from_pending(
                invitation.id, InvitationStatus.declined
            )
            if not declined:
                return Return.err(INVITATION_NOT_FOUND)

            audit = AuditEvent(
                artist_id=invitation.artist_id,
                user_id=user_id,
                action="invitation_declined",
                event_metadata={"invitation_id": str(invitation.id)},
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()
            logger.info("Invitation %s declined", invitation.id)

            return Return.ok(MessageResponse(message="Invitation declined"))
