"""
Team Membership Ledger

Creates, updates and deactivates team memberships while holding the
ledger invariants:
- at most one active membership per (artist, user)
- at most one active primary agent per artist
- memberships are deactivated, never deleted
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.repositories.exceptions import DuplicateRecordError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import Artist, TeamMember, TeamRole, User

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = (
    "name",
    "email",
    "phone",
    "role",
    "custom_role",
    "is_primary",
    "can_invite_others",
    "can_manage_bookings",
    "can_access_financials",
)

ALREADY_MEMBER = Error("ALREADY_MEMBER", "This person is already a team member")
PRIMARY_AGENT_EXISTS = Error(
    "PRIMARY_AGENT_EXISTS", "This artist already has a primary agent"
)
MEMBER_NOT_FOUND = Error("MEMBER_NOT_FOUND", "Team member not found")


class TeamLedger:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def add_membership(
        self,
        artist_id: UUID,
        user_id: Optional[UUID],
        name: str,
        email: str,
        role: TeamRole,
        custom_role: Optional[str] = None,
        phone: Optional[str] = None,
        is_primary: bool = False,
        can_invite_others: bool = False,
        can_manage_bookings: bool = False,
        can_access_financials: bool = False,
        permissions: Optional[List[str]] = None,
        joined_at: Optional[datetime] = None,
    ) -> Result[TeamMember]:
        """
        Insert a membership after checking both uniqueness rules.

        The partial unique indexes on the table reject a concurrent writer
        that slipped past the checks; that surfaces as the same conflict.
        """
        if user_id is not None:
            existing = await self.uow.team_members.get_active_by_artist_and_user(
                artist_id, user_id
            )
            if existing:
                return Return.err(ALREADY_MEMBER)

        if role == TeamRole.agent and is_primary:
            primary_agent = await self.uow.team_members.get_primary_agent(artist_id)
            if primary_agent:
                return Return.err(PRIMARY_AGENT_EXISTS)

        member = TeamMember(
            artist_id=artist_id,
            user_id=user_id,
            name=name,
            email=email,
            phone=phone,
            role=role,
            custom_role=custom_role,
            is_primary=is_primary,
            can_invite_others=can_invite_others,
            can_manage_bookings=can_manage_bookings,
            can_access_financials=can_access_financials,
            permissions=permissions,
            is_active=True,
            joined_at=joined_at,
        )

        try:
            member = await self.uow.team_members.create(member)
        except DuplicateRecordError:
            logger.warning(
                "Concurrent membership write rejected for artist %s", artist_id
            )
            if role == TeamRole.agent and is_primary:
                return Return.err(PRIMARY_AGENT_EXISTS)
            return Return.err(ALREADY_MEMBER)

        return Return.ok(member)

    async def find_own_agent(self, artist: Artist) -> Optional[TeamMember]:
        """The owner's own active agent membership, if any"""
        membership = await self.uow.team_members.get_active_by_artist_and_user(
            artist.id, artist.user_id
        )
        if membership and membership.role == TeamRole.agent:
            return membership
        return None

    async def set_own_agent(
        self, user: User, artist: Artist
    ) -> Result[Tuple[TeamMember, bool]]:
        """
        Make the artist's owner their own primary agent.

        Idempotent: returns (membership, created) where created is False if
        the owner was already their own agent.
        """
        existing = await self.find_own_agent(artist)
        if existing:
            return Return.ok((existing, False))

        result = await self.add_membership(
            artist_id=artist.id,
            user_id=artist.user_id,
            name=user.name,
            email=user.email,
            role=TeamRole.agent,
            is_primary=True,
            can_invite_others=True,
            can_manage_bookings=True,
            can_access_financials=True,
            joined_at=utc_now(),
        )
        if result.is_err():
            return result

        return Return.ok((result.value, True))

    async def deactivate(
        self, member_id: UUID, artist_id: UUID, requester_user_id: UUID
    ) -> Result[TeamMember]:
        """Soft delete; the requester may not remove their own primary-agent row"""
        member = await self.uow.team_members.get_by_id(member_id)
        if member is None or member.artist_id != artist_id or not member.is_active:
            return Return.err(MEMBER_NOT_FOUND)

        if member.user_id == requester_user_id and member.is_primary_agent:
            return Return.err(
                Error(
                    "CANNOT_REMOVE_PRIMARY_AGENT",
                    "Cannot remove yourself as the primary agent",
                )
            )

        member.is_active = False
        member = await self.uow.team_members.update(member)
        return Return.ok(member)

    async def update(
        self, member_id: UUID, artist_id: UUID, changes: Dict[str, Any]
    ) -> Result[TeamMember]:
        """
        Apply allowed field changes.

        The primary-agent rule is checked against the prospective row before
        anything is written.
        """
        member = await self.uow.team_members.get_by_id(member_id)
        if member is None or member.artist_id != artist_id or not member.is_active:
            return Return.err(MEMBER_NOT_FOUND)

        changes = {k: v for k, v in changes.items() if k in UPDATABLE_FIELDS}
        if "role" in changes:
            try:
                changes["role"] = TeamRole(changes["role"])
            except ValueError:
                return Return.err(
                    Error("INVALID_ROLE", f"Invalid role: {changes['role']}")
                )

        role = changes.get("role", member.role)
        is_primary = changes.get("is_primary", member.is_primary)
        if role == TeamRole.agent and is_primary:
            primary_agent = await self.uow.team_members.get_primary_agent(artist_id)
            if primary_agent and primary_agent.id != member.id:
                return Return.err(PRIMARY_AGENT_EXISTS)

        for field, value in changes.items():
            setattr(member, field, value)

        try:
            member = await self.uow.team_members.update(member)
        except DuplicateRecordError:
            return Return.err(PRIMARY_AGENT_EXISTS)

        return Return.ok(member)
