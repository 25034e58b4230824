"""
Remove Team Member Use Case

Handles removing (soft delete) members from an artist's team.
"""

import logging
from uuid import UUID

from libs.result import Result, Return
from src.app.services.team_ledger import TeamLedger
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent

from .dtos import MessageResponse

logger = logging.getLogger(__name__)


class RemoveTeamMemberUseCase:
    """
    Use case for removing members from a team.

    Business Rules:
    - Soft delete: is_active=False, the row is kept
    - Removing your own primary-agent membership fails with
      CANNOT_REMOVE_PRIMARY_AGENT
    - Creates audit event
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, requester_user_id: UUID, artist_id: UUID, member_id: UUID
    ) -> Result[MessageResponse]:
        async with self.uow:
            result = await TeamLedger(self.uow).deactivate(
                member_id, artist_id, requester_user_id
            )
            if result.is_err():
                return result
            member = result.value

            audit = AuditEvent(
                artist_id=artist_id,
                user_id=requester_user_id,
                action="member_removed",
                event_metadata={
                    "team_member_id": str(member.id),
                    "removed_user_id": str(member.user_id) if member.user_id else None,
                    "role": member.role.value,
                },
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()
            logger.info("Team member %s removed from artist %s", member.id, artist_id)

            return Return.ok(MessageResponse(message="Team member removed successfully"))
