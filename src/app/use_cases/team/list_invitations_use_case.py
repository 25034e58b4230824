from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now

from .dtos import InvitationListResponse, InvitationSummary


class ListInvitationsUseCase:
    """Pending invitations of an artist whose expiry has not passed"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, artist_id: UUID) -> Result[InvitationListResponse]:
        async with self.uow:
            now = utc_now()
            invitations = [
                InvitationSummary.from_entity(invitation)
                for invitation in await self.uow.invitations.get_pending_by_artist_id(artist_id)
                if invitation.is_pending(now)
            ]
            return Return.ok(
                InvitationListResponse(
                    invitations=invitations, total_count=len(invitations)
                )
            )
