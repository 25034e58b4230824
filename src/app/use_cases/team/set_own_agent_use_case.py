from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.team_ledger import TeamLedger
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent

from .dtos import TeamMemberResponse, summarize


class SetOwnAgentUseCase:
    """
    Use case for an artist acting as their own primary agent.

    Business Rules:
    - Caller must own an artist profile
    - Idempotent: a second call returns the existing membership
    - Fails with PRIMARY_AGENT_EXISTS if someone else is the primary agent
    - The new agent context becomes switchable after contexts are refreshed
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[TeamMemberResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            artist = await self.uow.artists.get_by_user_id(user_id)
            if artist is None:
                return Return.err(Error("ARTIST_NOT_FOUND", "Artist profile not found"))

            result = await TeamLedger(self.uow).set_own_agent(user, artist)
            if result.is_err():
                return result
            member, created = result.value

            if not created:
                return Return.ok(
                    TeamMemberResponse(
                        message="You are already set as your own agent",
                        team_member=summarize(member),
                    )
                )

            audit = AuditEvent(
                artist_id=artist.id,
                user_id=user.id,
                action="own_agent_set",
                event_metadata={"team_member_id": str(member.id)},
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            return Return.ok(
                TeamMemberResponse(
                    message="You are now set as your own agent",
                    team_member=summarize(member),
                )
            )
