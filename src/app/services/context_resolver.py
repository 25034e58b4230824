"""
Context Resolver

Computes which contexts a user may act in, tracks the active one, and
resolves the artist, role and capabilities that follow from it. Runs inside
the caller's unit of work; only refresh_contexts and switch_context write.
"""

import logging
from typing import Optional

from src.app.services.unit_of_work import UnitOfWork
from src.domain.contexts import (
    default_context,
    derive_contexts,
    membership_for_context,
    ordered_contexts,
)
from src.domain.entities import Artist, ContextKind, TeamMember, User
from src.domain.permissions import Permissions, resolve_permissions

logger = logging.getLogger(__name__)


class ContextResolver:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def compute_available_contexts(self, user: User) -> set[ContextKind]:
        """Fresh computation from ledger state, no side effects"""
        artist = await self.uow.artists.get_by_user_id(user.id)
        memberships = await self.uow.team_members.get_active_by_user_id(user.id)
        return derive_contexts(artist is not None, memberships)

    async def refresh_contexts(self, user: User) -> User:
        """
        Recompute and persist available contexts.

        A missing or stale current_context falls back to the highest
        priority available context (artist > agent > team_member).
        """
        contexts = await self.compute_available_contexts(user)

        user.available_contexts = [c.value for c in ordered_contexts(contexts)]
        user.is_multi_role = len(contexts) > 1
        if user.current_context is None or user.current_context not in contexts:
            user.current_context = default_context(contexts)

        return await self.uow.users.update(user)

    async def switch_context(self, user: User, requested: str) -> bool:
        """
        Switch to a context from the stored available_contexts.

        Availability is not recomputed here; a context gained since the last
        refresh cannot be selected until contexts are refreshed.
        """
        try:
            context = ContextKind(requested)
        except ValueError:
            return False

        if context not in user.stored_contexts():
            return False

        user.current_context = context
        await self.uow.users.update(user)
        logger.info("User %s switched context to %s", user.id, context.value)
        return True

    async def get_current_membership(self, user: User) -> Optional[TeamMember]:
        """Membership backing an agent or team_member context"""
        if user.current_context not in (ContextKind.agent, ContextKind.team_member):
            return None
        memberships = await self.uow.team_members.get_active_by_user_id(user.id)
        return membership_for_context(user.current_context, memberships)

    async def get_current_artist(self, user: User) -> Optional[Artist]:
        if user.current_context == ContextKind.artist:
            return await self.uow.artists.get_by_user_id(user.id)

        membership = await self.get_current_membership(user)
        if membership is None:
            return None
        return await self.uow.artists.get_by_id(membership.artist_id)

    async def get_current_role(self, user: User) -> Optional[str]:
        if user.current_context == ContextKind.artist:
            return ContextKind.artist.value
        if user.current_context == ContextKind.agent:
            return ContextKind.agent.value
        if user.current_context == ContextKind.team_member:
            membership = await self.get_current_membership(user)
            return membership.role.value if membership else None
        return None

    async def get_permissions(self, user: User) -> Permissions:
        membership = await self.get_current_membership(user)
        return resolve_permissions(user.current_context, membership)

    async def has_permission(self, user: User, capability: str) -> bool:
        permissions = await self.get_permissions(user)
        return permissions.allows(capability)
