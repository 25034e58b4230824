"""
Team Management Use Cases

Invitation workflow and team membership business logic.
"""

from .accept_invitation_use_case import AcceptInvitationUseCase
from .decline_invitation_use_case import DeclineInvitationUseCase
from .dtos import (
    AcceptedMembership,
    AcceptInvitationResponse,
    InvitationListResponse,
    InvitationSummary,
    InviteMemberCommand,
    InviteMemberResponse,
    MessageResponse,
    TeamMemberInfo,
    TeamMemberListResponse,
    TeamMemberResponse,
    TeamMemberSummary,
)
from .invite_member_use_case import InviteMemberUseCase
from .list_invitations_use_case import ListInvitationsUseCase
from .list_team_members_use_case import ListTeamMembersUseCase
from .remove_team_member_use_case import RemoveTeamMemberUseCase
from .revoke_invitation_use_case import RevokeInvitationUseCase
from .set_own_agent_use_case import SetOwnAgentUseCase
from .update_team_member_use_case import UpdateTeamMemberUseCase

__all__ = [
    # Use Cases
    "InviteMemberUseCase",
    "AcceptInvitationUseCase",
    "DeclineInvitationUseCase",
    "RevokeInvitationUseCase",
    "ListInvitationsUseCase",
    "ListTeamMembersUseCase",
    "UpdateTeamMemberUseCase",
    "RemoveTeamMemberUseCase",
    "SetOwnAgentUseCase",
    # DTOs
    "InviteMemberCommand",
    "InviteMemberResponse",
    "InvitationSummary",
    "InvitationListResponse",
    "AcceptInvitationResponse",
    "AcceptedMembership",
    "TeamMemberInfo",
    "TeamMemberListResponse",
    "TeamMemberResponse",
    "TeamMemberSummary",
    "MessageResponse",
]
