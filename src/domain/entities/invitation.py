"""
TeamInvitation Entity

Pending invitations to join an artist's team.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import text
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now

from .enums import InvitationStatus, TeamRole, role_display_name


class TeamInvitation(SQLModel, table=True):
    """
    TeamInvitation entity - a time-limited offer to join an artist's team.

    Business Rules:
    - Expires 7 days after creation; expires_at is never changed afterwards
    - Token is single-use, cryptographically secure, used as a bearer credential
    - One pending invitation per (artist_id, email); email is stored lowercased
    - pending -> accepted | declined | expired; terminal states are final
    """

    __tablename__ = "team_invitations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    artist_id: UUID = Field(foreign_key="artists.id", nullable=False, index=True)
    email: str = Field(max_length=255, nullable=False)
    name: str = Field(max_length=255)

    role: TeamRole = Field(nullable=False)
    custom_role: Optional[str] = Field(default=None, max_length=255)

    status: InvitationStatus = Field(default=InvitationStatus.pending)
    token: str = Field(unique=True, index=True, max_length=64)
    message: Optional[str] = Field(default=None, max_length=1000)

    # Timestamps
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_invitation_artist_status", "artist_id", "status"),
        Index("idx_invitation_email_status", "email", "status"),
        Index(
            "uq_invitation_pending_email",
            "artist_id",
            "email",
            unique=True,
            sqlite_where=text("status = 'pending'"),
            postgresql_where=text("status = 'pending'"),
        ),
    )

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """Expiry is evaluated live, independent of the stored status"""
        return (now or utc_now()) > self.expires_at

    def is_pending(self, now: Optional[datetime] = None) -> bool:
        return self.status == InvitationStatus.pending and not self.is_expired(now)

    @property
    def role_display(self) -> str:
        return role_display_name(self.role, self.custom_role)
