"""
Artist Entity

The performer a team works for.
"""

from datetime import datetime
from typing import Optional, TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Relationship, SQLModel

from src.domain.base import utc_now

if TYPE_CHECKING:
    from .team_member import TeamMember


class Artist(SQLModel, table=True):
    """
    Artist entity - the business entity a team operates on behalf of.

    Business Rules:
    - Owned by exactly one user (user_id is unique)
    - Never deleted; mutated by profile updates only
    """

    __tablename__ = "artists"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    email: Optional[str] = Field(default=None, max_length=255)
    bio: Optional[str] = Field(default=None)
    avatar: Optional[str] = Field(default=None, max_length=500)

    user_id: UUID = Field(foreign_key="users.id", unique=True, index=True)
    agency_id: Optional[UUID] = Field(default=None, index=True)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    # Relationships
    team_members: list["TeamMember"] = Relationship(back_populates="artist")
