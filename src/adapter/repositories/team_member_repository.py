from typing import List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.exceptions import DuplicateRecordError
from src.app.repositories.team_member_repository import ITeamMemberRepository
from src.domain.entities import TeamMember, TeamRole


class TeamMemberRepository(ITeamMemberRepository):
    """Team member repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, member_id: UUID) -> Optional[TeamMember]:
        """Get membership by ID (active or not)"""
        stmt = select(TeamMember).where(TeamMember.id == member_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_active_by_user_id(self, user_id: UUID) -> List[TeamMember]:
        """Get active memberships of a user, oldest first"""
        stmt = (
            select(TeamMember)
            .where(TeamMember.user_id == user_id, TeamMember.is_active == True)
            .order_by(col(TeamMember.created_at), col(TeamMember.id))
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_active_by_artist_id(self, artist_id: UUID) -> List[TeamMember]:
        """Get active members of an artist's team, oldest first"""
        stmt = (
            select(TeamMember)
            .where(TeamMember.artist_id == artist_id, TeamMember.is_active == True)
            .order_by(col(TeamMember.created_at), col(TeamMember.id))
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_active_by_artist_and_user(
        self, artist_id: UUID, user_id: UUID
    ) -> Optional[TeamMember]:
        """Get the active membership linking a user to an artist"""
        stmt = select(TeamMember).where(
            TeamMember.artist_id == artist_id,
            TeamMember.user_id == user_id,
            TeamMember.is_active == True,
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def get_active_by_artist_and_email(
        self, artist_id: UUID, email: str
    ) -> Optional[TeamMember]:
        """Get an active membership of an artist's team by email, ignoring case"""
        stmt = select(TeamMember).where(
            TeamMember.artist_id == artist_id,
            func.lower(TeamMember.email) == email.lower(),
            TeamMember.is_active == True,
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def get_primary_agent(self, artist_id: UUID) -> Optional[TeamMember]:
        """Get the artist's active primary agent"""
        stmt = (
            select(TeamMember)
            .where(
                TeamMember.artist_id == artist_id,
                TeamMember.role == TeamRole.agent,
                TeamMember.is_primary == True,
                TeamMember.is_active == True,
            )
            .order_by(col(TeamMember.created_at))
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def create(self, member: TeamMember) -> TeamMember:
        """Create a new membership"""
        self.session.add(member)
        await self._flush()
        await self.session.refresh(member)
        return member

    async def update(self, member: TeamMember) -> TeamMember:
        """Update existing membership"""
        self.session.add(member)
        await self._flush()
        await self.session.refresh(member)
        return member

    async def _flush(self) -> None:
        # Partial unique indexes back the one-active-membership and
        # one-primary-agent rules under concurrent writers
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise DuplicateRecordError(str(exc.orig)) from exc
