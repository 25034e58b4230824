"""
Capability model.

Every context yields a defined answer for every capability; unknown
capability names are denied.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel

from .entities import ContextKind, TeamMember


class Capability(str, Enum):
    manage_team = "manage_team"
    manage_bookings = "manage_bookings"
    access_financials = "access_financials"
    invite_members = "invite_members"
    create_threads = "create_threads"


class Permissions(BaseModel):
    """Fixed-shape capability set"""

    manage_team: bool = False
    manage_bookings: bool = False
    access_financials: bool = False
    invite_members: bool = False
    create_threads: bool = False

    def allows(self, capability: str) -> bool:
        try:
            name = Capability(capability).value
        except ValueError:
            return False
        return bool(getattr(self, name))


FULL_ACCESS = Permissions(
    manage_team=True,
    manage_bookings=True,
    access_financials=True,
    invite_members=True,
    create_threads=True,
)

NO_ACCESS = Permissions()


def resolve_permissions(
    context: Optional[ContextKind], membership: Optional[TeamMember]
) -> Permissions:
    """Capabilities for a context and the membership backing it"""
    if context in (ContextKind.artist, ContextKind.agent):
        return FULL_ACCESS.model_copy()

    if context == ContextKind.team_member:
        if membership is None or not membership.is_active:
            return NO_ACCESS.model_copy()
        return Permissions(
            manage_team=membership.can_invite_others,
            manage_bookings=membership.can_manage_bookings,
            access_financials=membership.can_access_financials,
            invite_members=membership.can_invite_others,
            create_threads=membership.can_invite_others,
        )

    return NO_ACCESS.model_copy()
