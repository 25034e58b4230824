"""
User Entity

Represents a person who can authenticate and act in one or more contexts.
"""

from datetime import datetime
from typing import Optional, TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Relationship, SQLModel

from src.domain.base import utc_now

from .enums import ContextKind

if TYPE_CHECKING:
    from .team_member import TeamMember


class User(SQLModel, table=True):
    """
    User entity - a person who may act as artist, agent or team member.

    Business Rules:
    - Email must be unique across all users
    - Password stored as bcrypt hash
    - available_contexts is a cached set, recomputed on login and explicit refresh
    - current_context is either null or one of available_contexts
    - is_multi_role is true when more than one context is available
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    # Context switching state
    current_context: Optional[ContextKind] = Field(default=None)
    available_contexts: list[str] = Field(default_factory=list, sa_column=Column(JSON))
    is_multi_role: bool = Field(default=False)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    last_login_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Relationships
    memberships: list["TeamMember"] = Relationship(back_populates="user")

    def stored_contexts(self) -> set[ContextKind]:
        """Contexts as last persisted by a refresh"""
        return {ContextKind(c) for c in (self.available_contexts or [])}
