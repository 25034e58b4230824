"""
Invite Team Member Use Case

Handles inviting people to join an artist's team.
"""

import logging
import secrets
from datetime import timedelta
from uuid import UUID

from libs.result import Error, Result, Return
from config import ApplicationConfig
from src.app.repositories.exceptions import DuplicateRecordError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import AuditEvent, InvitationStatus, TeamInvitation, TeamRole

from .dtos import InvitationSummary, InviteMemberCommand, InviteMemberResponse

logger = logging.getLogger(__name__)


class InviteMemberUseCase:
    """
    Use case for inviting someone to an artist's team.

    Business Rules:
    - Caller must hold invite_members (checked by the authorization gate)
    - Role must be a valid TeamRole
    - Emails are compared and stored lowercased
    - Email must not belong to an active member of this artist's team
    - Only one pending, unexpired invitation per (artist, email); stale
      pending invitations are marked expired before a new one is created,
      and a unique index rejects a concurrent duplicate
    - Token is cryptographically random and never returned to the inviter;
      delivering it to the invitee (e.g. by email) happens outside this service
    - Invitation expires after INVITATION_EXPIRE_DAYS (7 days)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, inviter_user_id: UUID, artist_id: UUID, command: InviteMemberCommand
    ) -> Result[InviteMemberResponse]:
        async with self.uow:
            try:
                role = TeamRole(command.role)
            except ValueError:
                return Return.err(
                    Error("INVALID_ROLE", f"Invalid role: {command.role}")
                )

            artist = await self.uow.artists.get_by_id(artist_id)
            if artist is None:
                return Return.err(Error("ARTIST_NOT_FOUND", "Artist profile not found"))

            email = command.email.lower()

            existing_member = await self.uow.team_members.get_active_by_artist_and_email(
                artist_id, email
            )
            if existing_member:
                return Return.err(
                    Error("ALREADY_MEMBER", "This person is already a team member")
                )

            now = utc_now()
            pending = await self.uow.invitations.get_pending_by_artist_and_email(
                artist_id, email
            )
            for invitation in pending:
                if not invitation.is_expired(now):
                    return Return.err(
                        Error(
                            "INVITE_ALREADY_EXISTS",
                            "An invitation has already been sent to this email",
                        )
                    )
            for invitation in pending:
                await self.uow.invitations.transition_from_pending(
                    invitation.id, InvitationStatus.expired
                )

            invitation = TeamInvitation(
                artist_id=artist_id,
                email=email,
                name=command.name,
                role=role,
                custom_role=command.custom_role,
                message=command.message,
                token=secrets.token_urlsafe(32),
                expires_at=now + timedelta(days=ApplicationConfig.INVITATION_EXPIRE_DAYS),
            )
            try:
                invitation = await self.uow.invitations.create(invitation)
            except DuplicateRecordError:
                return Return.err(
                    Error(
                        "INVITE_ALREADY_EXISTS",
                        "An invitation has already been sent to this email",
                    )
                )

            audit = AuditEvent(
                artist_id=artist_id,
                user_id=inviter_user_id,
                action="invite_sent",
                event_metadata={
                    "invitation_id": str(invitation.id),
                    "invited_email": email,
                    "role": role.value,
                },
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info(
                "Invitation %s created for artist %s (%s)",
                invitation.id,
                artist_id,
                role.value,
            )

            return Return.ok(
                InviteMemberResponse(
                    message="Team member invitation sent successfully",
                    invitation=InvitationSummary.from_entity(invitation),
                )
            )
