"""
Accept Invitation Use Case

Turns a pending invitation into a team membership for the caller.
"""

import logging
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.team_ledger import TeamLedger
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import AuditEvent, InvitationStatus, TeamInvitation

from .dtos import AcceptedMembership, AcceptInvitationResponse

logger = logging.getLogger(__name__)

# Unknown, expired and already-used tokens are reported identically
INVITATION_NOT_FOUND = Error("INVITATION_NOT_FOUND", "Invalid or expired invitation")


async def find_acceptable_invitation(
    uow: UnitOfWork, token: str
) -> Optional[TeamInvitation]:
    """Pending invitation for a token, or None if it is unknown, used or expired"""
    invitation = await uow.invitations.get_by_token(token)
    if invitation is None or not invitation.is_pending():
        return None
    return invitation


class AcceptInvitationUseCase:
    """
    Use case for accepting a team invitation.

    Business Rules:
    - Token must match a pending invitation whose expiry has not passed
      (expiry is evaluated live, regardless of stored status)
    - The pending -> accepted transition is a single conditional update;
      a token is consumed at most once
    - Creates the membership with the invitation's role and joined_at=now
    - Caller must not already be an active member of the artist's team
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: str, user_id: UUID) -> Result[AcceptInvitationResponse]:
        async with self.uow:
            invitation = await find_acceptable_invitation(self.uow, token)
            if invitation is None:
                return Return.err(INVITATION_NOT_FOUND)

            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            consumed = await self.uow.invitations.transition_from_pending(
                invitation.id, InvitationStatus.accepted
            )
            if not consumed:
                return Return.err(INVITATION_NOT_FOUND)

            result = await TeamLedger(self.uow).add_membership(
                artist_id=invitation.artist_id,
                user_id=user.id,
                name=user.name,
                email=user.email,
                role=invitation.role,
                custom_role=invitation.custom_role,
                joined_at=utc_now(),
            )
            if result.is_err():
                # Rolled back on exit; the invitation stays pending
                return result
            member = result.value

            artist = await self.uow.artists.get_by_id(invitation.artist_id)

            audit = AuditEvent(
                artist_id=invitation.artist_id,
                user_id=user.id,
                action="invitation_accepted",
                event_metadata={
                    "invitation_id": str(invitation.id),
                    "team_member_id": str(member.id),
                    "role": invitation.role.value,
                },
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()
            logger.info("Invitation %s accepted by user %s", invitation.id, user.id)

            return Return.ok(
                AcceptInvitationResponse(
                    message="Invitation accepted successfully",
                    team_member=AcceptedMembership(
                        id=str(member.id),
                        name=member.name,
                        role=member.role_display,
                        artist=artist.name if artist else "",
                    ),
                )
            )
