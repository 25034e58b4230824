"""
Update Team Member Use Case

Handles editing a member's details, role and capability flags.
"""

import logging
from typing import Any, Dict, Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.team_ledger import TeamLedger
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent, ContextKind

from .dtos import TeamMemberResponse, summarize

logger = logging.getLogger(__name__)

# Fields that grant or shape access; only the artist or primary agent may set them
PRIVILEGED_FIELDS = (
    "role",
    "is_primary",
    "can_invite_others",
    "can_manage_bookings",
    "can_access_financials",
)

MANAGING_CONTEXTS = (ContextKind.artist.value, ContextKind.agent.value)


class UpdateTeamMemberUseCase:
    """
    Use case for updating a team member.

    Business Rules:
    - Caller must hold manage_team (checked by the authorization gate)
    - Member must be active and belong to the caller's current artist
    - Outside artist/agent context, role, primary flag and capability flags
      cannot be changed (CANNOT_CHANGE_PRIVILEGES) and the caller cannot
      edit their own membership (CANNOT_EDIT_OWN_MEMBERSHIP)
    - Promoting a row to primary agent fails if another primary agent exists
    - Creates audit event listing the changed fields
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        requester_user_id: UUID,
        artist_id: UUID,
        member_id: UUID,
        changes: Dict[str, Any],
        requester_context: Optional[str] = None,
    ) -> Result[TeamMemberResponse]:
        async with self.uow:
            if requester_context not in MANAGING_CONTEXTS:
                locked = sorted(field for field in changes if field in PRIVILEGED_FIELDS)
                if locked:
                    return Return.err(
                        Error(
                            "CANNOT_CHANGE_PRIVILEGES",
                            "Only the artist or primary agent can change roles and permissions",
                            {"fields": locked},
                        )
                    )

                target = await self.uow.team_members.get_by_id(member_id)
                if target is not None and target.user_id == requester_user_id:
                    return Return.err(
                        Error(
                            "CANNOT_EDIT_OWN_MEMBERSHIP",
                            "You cannot edit your own team membership",
                        )
                    )

            result = await TeamLedger(self.uow).update(member_id, artist_id, changes)
            if result.is_err():
                return result
            member = result.value

            audit = AuditEvent(
                artist_id=artist_id,
                user_id=requester_user_id,
                action="member_updated",
                event_metadata={
                    "team_member_id": str(member.id),
                    "fields": sorted(changes.keys()),
                },
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            return Return.ok(
                TeamMemberResponse(
                    message="Team member updated successfully",
                    team_member=summarize(member),
                )
            )
