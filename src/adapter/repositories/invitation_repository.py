from typing import List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlmodel import col, select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.exceptions import DuplicateRecordError
from src.app.repositories.invitation_repository import IInvitationRepository
from src.domain.entities import InvitationStatus, TeamInvitation


class InvitationRepository(IInvitationRepository):
    """Invitation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, invitation_id: UUID) -> Optional[TeamInvitation]:
        """Get invitation by ID"""
        stmt = select(TeamInvitation).where(TeamInvitation.id == invitation_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_token(self, token: str) -> Optional[TeamInvitation]:
        """Get invitation by token"""
        stmt = select(TeamInvitation).where(TeamInvitation.token == token)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_pending_by_artist_and_email(
        self, artist_id: UUID, email: str
    ) -> List[TeamInvitation]:
        """Get pending invitations for an artist and email, ignoring case"""
        stmt = select(TeamInvitation).where(
            TeamInvitation.artist_id == artist_id,
            func.lower(TeamInvitation.email) == email.lower(),
            TeamInvitation.status == InvitationStatus.pending,
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_pending_by_artist_id(self, artist_id: UUID) -> List[TeamInvitation]:
        """Get pending invitations for an artist, newest first"""
        stmt = (
            select(TeamInvitation)
            .where(
                TeamInvitation.artist_id == artist_id,
                TeamInvitation.status == InvitationStatus.pending,
            )
            .order_by(col(TeamInvitation.created_at).desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, invitation: TeamInvitation) -> TeamInvitation:
        """Create a new invitation"""
        self.session.add(invitation)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            # Another pending invitation for this (artist, email) won the race
            raise DuplicateRecordError(str(exc.orig)) from exc
        await self.session.refresh(invitation)
        return invitation

    async def transition_from_pending(
        self, invitation_id: UUID, status: InvitationStatus
    ) -> bool:
        """Single conditional UPDATE; only one caller can win the transition"""
        stmt = (
            update(TeamInvitation)
            .where(
                TeamInvitation.id == invitation_id,
                TeamInvitation.status == InvitationStatus.pending,
            )
            .values(status=status)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
