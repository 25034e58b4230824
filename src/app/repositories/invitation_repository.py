from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import InvitationStatus, TeamInvitation


class IInvitationRepository(ABC):
    """Invitation repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, invitation_id: UUID) -> Optional[TeamInvitation]:
        """Get invitation by ID"""
        pass

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[TeamInvitation]:
        """Get invitation by token"""
        pass

    @abstractmethod
    async def get_pending_by_artist_and_email(
        self, artist_id: UUID, email: str
    ) -> List[TeamInvitation]:
        """Get invitations with status=pending for an artist and email (expired included)"""
        pass

    @abstractmethod
    async def get_pending_by_artist_id(self, artist_id: UUID) -> List[TeamInvitation]:
        """Get invitations with status=pending for an artist (expired included)"""
        pass

    @abstractmethod
    async def create(self, invitation: TeamInvitation) -> TeamInvitation:
        """Create a new invitation; DuplicateRecordError if one is already pending for (artist, email)"""
        pass

    @abstractmethod
    async def transition_from_pending(
        self, invitation_id: UUID, status: InvitationStatus
    ) -> bool:
        """
        Conditionally move a pending invitation to another status.

        Returns False if the invitation was no longer pending, so a token can
        only ever be consumed once.
        """
        pass
