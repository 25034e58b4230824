"""
Artist Team Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum
from typing import Optional


class ContextKind(str, Enum):
    """Role a user is currently acting as"""

    artist = "artist"
    agent = "agent"
    team_member = "team_member"
    venue = "venue"
    promoter = "promoter"


# Used to pick the default context and to order stored contexts
CONTEXT_PRIORITY = (
    ContextKind.artist,
    ContextKind.agent,
    ContextKind.team_member,
    ContextKind.venue,
    ContextKind.promoter,
)


class TeamRole(str, Enum):
    """Role of a team member within an artist's team"""

    tour_manager = "tour_manager"
    booking_agent = "booking_agent"
    sound_engineer = "sound_engineer"
    venue_manager = "venue_manager"
    technical_director = "technical_director"
    agent = "agent"
    legal = "legal"
    production_manager = "production_manager"
    stage_manager = "stage_manager"
    pr_manager = "pr_manager"
    media_coordinator = "media_coordinator"
    travel_coordinator = "travel_coordinator"
    custom = "custom"


TEAM_ROLE_LABELS = {
    TeamRole.agent: "Agent",
    TeamRole.tour_manager: "Tour Manager",
    TeamRole.booking_agent: "Booking Agent",
    TeamRole.sound_engineer: "Sound Engineer",
    TeamRole.venue_manager: "Venue Manager",
    TeamRole.technical_director: "Technical Director",
    TeamRole.legal: "Legal",
    TeamRole.production_manager: "Production Manager",
    TeamRole.stage_manager: "Stage Manager",
    TeamRole.pr_manager: "PR Manager",
    TeamRole.media_coordinator: "Media Coordinator",
    TeamRole.travel_coordinator: "Travel Coordinator",
    TeamRole.custom: "Custom Role",
}


def role_display_name(role: TeamRole, custom_role: Optional[str] = None) -> str:
    """Human readable role; custom roles show their own label"""
    if role == TeamRole.custom:
        return custom_role or "Team Member"
    return TEAM_ROLE_LABELS.get(role, "Team Member")


class InvitationStatus(str, Enum):
    """Invitation status"""

    pending = "pending"
    accepted = "accepted"
    declined = "declined"
    expired = "expired"
