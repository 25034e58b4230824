"""
Artist Team Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    CONTEXT_PRIORITY,
    TEAM_ROLE_LABELS,
    ContextKind,
    InvitationStatus,
    TeamRole,
    role_display_name,
)

# Export all entities
from .user import User
from .artist import Artist
from .team_member import TeamMember
from .invitation import TeamInvitation
from .session import Session
from .audit_event import AuditEvent

__all__ = [
    # Enums
    "ContextKind",
    "TeamRole",
    "InvitationStatus",
    "CONTEXT_PRIORITY",
    "TEAM_ROLE_LABELS",
    "role_display_name",
    # Entities
    "User",
    "Artist",
    "TeamMember",
    "TeamInvitation",
    "Session",
    "AuditEvent",
]
