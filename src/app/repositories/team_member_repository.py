from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import TeamMember


class ITeamMemberRepository(ABC):
    """Team member repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, member_id: UUID) -> Optional[TeamMember]:
        """Get membership by ID (active or not)"""
        pass

    @abstractmethod
    async def get_active_by_user_id(self, user_id: UUID) -> List[TeamMember]:
        """Get active memberships of a user, oldest first"""
        pass

    @abstractmethod
    async def get_active_by_artist_id(self, artist_id: UUID) -> List[TeamMember]:
        """Get active members of an artist's team, oldest first"""
        pass

    @abstractmethod
    async def get_active_by_artist_and_user(
        self, artist_id: UUID, user_id: UUID
    ) -> Optional[TeamMember]:
        """Get the active membership linking a user to an artist"""
        pass

    @abstractmethod
    async def get_active_by_artist_and_email(
        self, artist_id: UUID, email: str
    ) -> Optional[TeamMember]:
        """Get an active membership of an artist's team by email"""
        pass

    @abstractmethod
    async def get_primary_agent(self, artist_id: UUID) -> Optional[TeamMember]:
        """Get the artist's active primary agent"""
        pass

    @abstractmethod
    async def create(self, member: TeamMember) -> TeamMember:
        """Create a new membership (raises DuplicateRecordError on conflict)"""
        pass

    @abstractmethod
    async def update(self, member: TeamMember) -> TeamMember:
        """Update existing membership (raises DuplicateRecordError on conflict)"""
        pass
