"""
TeamMember Entity

Links a person to an artist's team with a role and capability flags.
"""

from datetime import datetime
from typing import Optional, TYPE_CHECKING
from uuid import UUID, uuid4

from sqlalchemy import text
from sqlmodel import JSON, Column, DateTime, Field, Index, Relationship, SQLModel

from src.domain.base import utc_now

from .enums import TeamRole, role_display_name

if TYPE_CHECKING:
    from .artist import Artist
    from .user import User


class TeamMember(SQLModel, table=True):
    """
    TeamMember entity - a person's standing relationship to an artist's team.

    Business Rules:
    - At most one active membership per (artist_id, user_id)
    - At most one active primary agent (role=agent, is_primary) per artist
    - user_id stays null until the invited person registers/accepts
    - Removal is a soft delete (is_active=False); rows are never deleted
    """

    __tablename__ = "artist_team_members"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    artist_id: UUID = Field(foreign_key="artists.id", nullable=False, index=True)
    user_id: Optional[UUID] = Field(default=None, foreign_key="users.id", index=True)

    name: str = Field(max_length=255)
    email: str = Field(max_length=255, index=True)
    phone: Optional[str] = Field(default=None, max_length=255)

    role: TeamRole = Field(nullable=False)
    custom_role: Optional[str] = Field(default=None, max_length=255)

    is_primary: bool = Field(default=False)
    can_invite_others: bool = Field(default=False)
    can_manage_bookings: bool = Field(default=False)
    can_access_financials: bool = Field(default=False)
    permissions: Optional[list[str]] = Field(default=None, sa_column=Column(JSON))

    is_active: bool = Field(default=True)
    joined_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    # Relationships
    artist: "Artist" = Relationship(back_populates="team_members")
    user: Optional["User"] = Relationship(back_populates="memberships")

    __table_args__ = (
        Index("idx_team_member_artist_role", "artist_id", "role"),
        Index("idx_team_member_artist_active", "artist_id", "is_active"),
        Index(
            "uq_team_member_active_user",
            "artist_id",
            "user_id",
            unique=True,
            sqlite_where=text("is_active = 1"),
            postgresql_where=text("is_active"),
        ),
        Index(
            "uq_team_member_primary_agent",
            "artist_id",
            unique=True,
            sqlite_where=text("is_active = 1 AND is_primary = 1 AND role = 'agent'"),
            postgresql_where=text("is_active AND is_primary AND role = 'agent'"),
        ),
    )

    @property
    def is_primary_agent(self) -> bool:
        return self.role == TeamRole.agent and self.is_primary

    @property
    def role_display(self) -> str:
        return role_display_name(self.role, self.custom_role)
