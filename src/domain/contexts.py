"""
Context derivation rules.

Pure functions over ledger state; persistence is handled by the
application-layer ContextResolver.
"""

from typing import Iterable, Optional

from .entities import CONTEXT_PRIORITY, ContextKind, TeamMember


def derive_contexts(owns_artist: bool, memberships: Iterable[TeamMember]) -> set[ContextKind]:
    """
    Contexts a user may adopt.

    - artist: the user owns an artist profile
    - agent: any active primary-agent membership
    - team_member: any other active membership
    """
    contexts: set[ContextKind] = set()
    if owns_artist:
        contexts.add(ContextKind.artist)
    for membership in memberships:
        if not membership.is_active:
            continue
        if membership.is_primary_agent:
            contexts.add(ContextKind.agent)
        else:
            contexts.add(ContextKind.team_member)
    return contexts


def ordered_contexts(contexts: Iterable[ContextKind]) -> list[ContextKind]:
    """Contexts in fixed priority order (artist > agent > team_member)"""
    present = set(contexts)
    return [c for c in CONTEXT_PRIORITY if c in present]


def default_context(contexts: Iterable[ContextKind]) -> Optional[ContextKind]:
    ordered = ordered_contexts(contexts)
    return ordered[0] if ordered else None


def membership_for_context(
    context: Optional[ContextKind], memberships: Iterable[TeamMember]
) -> Optional[TeamMember]:
    """
    Membership backing an agent or team_member context.

    Memberships are expected in creation order; the first match wins.
    """
    if context == ContextKind.agent:
        wanted = True
    elif context == ContextKind.team_member:
        wanted = False
    else:
        return None

    for membership in memberships:
        if membership.is_active and membership.is_primary_agent == wanted:
            return membership
    return None
