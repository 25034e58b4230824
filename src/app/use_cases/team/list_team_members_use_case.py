from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import TeamMemberInfo, TeamMemberListResponse


class ListTeamMembersUseCase:
    """Active members of an artist's team, oldest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, artist_id: UUID) -> Result[TeamMemberListResponse]:
        async with self.uow:
            members = [
                TeamMemberInfo.from_entity(member)
                for member in await self.uow.team_members.get_active_by_artist_id(artist_id)
            ]
            return Return.ok(
                TeamMemberListResponse(team_members=members, total_count=len(members))
            )
