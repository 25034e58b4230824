"""
Team Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the team domain.
Provides type safety and clear contracts between layers.
"""

from typing import List, Optional
from pydantic import BaseModel

from src.domain.entities import TeamInvitation, TeamMember


# ============================================================================
# Command DTOs
# ============================================================================


class InviteMemberCommand(BaseModel):
    """Invite someone to the current artist's team"""

    name: str
    email: str
    role: str
    custom_role: Optional[str] = None
    message: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class InvitationSummary(BaseModel):
    """Invitation as shown to the team; never carries the token"""

    id: str
    name: str
    email: str
    role: str
    status: str
    expires_at: str
    created_at: Optional[str] = None

    @classmethod
    def from_entity(cls, invitation: TeamInvitation) -> "InvitationSummary":
        return cls(
            id=str(invitation.id),
            name=invitation.name,
            email=invitation.email,
            role=invitation.role_display,
            status=invitation.status.value,
            expires_at=invitation.expires_at.isoformat(),
            created_at=invitation.created_at.isoformat() if invitation.created_at else None,
        )


class InviteMemberResponse(BaseModel):
    """Response for invite member use case"""

    message: str
    invitation: InvitationSummary


class InvitationListResponse(BaseModel):
    """Response for list invitations use case"""

    invitations: List[InvitationSummary]
    total_count: int


class TeamMemberInfo(BaseModel):
    """Full team member row"""

    id: str
    name: str
    email: str
    phone: Optional[str] = None
    role: str
    role_display: str
    custom_role: Optional[str] = None
    is_primary: bool
    can_invite_others: bool
    can_manage_bookings: bool
    can_access_financials: bool
    permissions: List[str]
    joined_at: Optional[str] = None
    is_registered_user: bool

    @classmethod
    def from_entity(cls, member: TeamMember) -> "TeamMemberInfo":
        return cls(
            id=str(member.id),
            name=member.name,
            email=member.email,
            phone=member.phone,
            role=member.role.value,
            role_display=member.role_display,
            custom_role=member.custom_role,
            is_primary=member.is_primary,
            can_invite_others=member.can_invite_others,
            can_manage_bookings=member.can_manage_bookings,
            can_access_financials=member.can_access_financials,
            permissions=list(member.permissions or []),
            joined_at=member.joined_at.isoformat() if member.joined_at else None,
            is_registered_user=member.user_id is not None,
        )


class TeamMemberListResponse(BaseModel):
    """Response for list team members use case"""

    team_members: List[TeamMemberInfo]
    total_count: int


class AcceptedMembership(BaseModel):
    """Membership created by accepting an invitation"""

    id: str
    name: str
    role: str
    artist: str


class AcceptInvitationResponse(BaseModel):
    """Response for accept invitation use case"""

    message: str
    team_member: AcceptedMembership


class TeamMemberSummary(BaseModel):
    """Short membership view returned by mutations"""

    id: str
    name: str
    email: str
    role: str
    is_primary: bool


class TeamMemberResponse(BaseModel):
    """Response for update member and set own agent use cases"""

    message: str
    team_member: TeamMemberSummary


class MessageResponse(BaseModel):
    """Response carrying only a status message"""

    message: str


def summarize(member: TeamMember) -> TeamMemberSummary:
    return TeamMemberSummary(
        id=str(member.id),
        name=member.name,
        email=member.email,
        role=member.role_display,
        is_primary=member.is_primary,
    )
