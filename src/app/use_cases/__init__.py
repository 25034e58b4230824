"""
Use Cases

Organized into domain folders:
- auth/: Identity, sessions and context switching
- team/: Invitations and team membership
- artists/: Artist profile
- users/: Current user

Import from subdirectories for better organization.
"""

from .artists import GetArtistProfileUseCase, UpdateArtistProfileUseCase
from .auth import (
    AuthenticateUseCase,
    LoginUseCase,
    LogoutUseCase,
    RefreshContextsUseCase,
    RefreshTokenUseCase,
    RegisterCommand,
    RegisterUseCase,
    SwitchContextUseCase,
)
from .team import (
    AcceptInvitationUseCase,
    DeclineInvitationUseCase,
    InviteMemberUseCase,
    ListInvitationsUseCase,
    ListTeamMembersUseCase,
    RemoveTeamMemberUseCase,
    RevokeInvitationUseCase,
    SetOwnAgentUseCase,
    UpdateTeamMemberUseCase,
)
from .users import LoadContextUseCase

__all__ = [
    # Auth
    "RegisterUseCase",
    "RegisterCommand",
    "LoginUseCase",
    "LogoutUseCase",
    "RefreshTokenUseCase",
    "SwitchContextUseCase",
    "RefreshContextsUseCase",
    "AuthenticateUseCase",
    # Team
    "InviteMemberUseCase",
    "AcceptInvitationUseCase",
    "DeclineInvitationUseCase",
    "RevokeInvitationUseCase",
    "ListInvitationsUseCase",
    "ListTeamMembersUseCase",
    "UpdateTeamMemberUseCase",
    "RemoveTeamMemberUseCase",
    "SetOwnAgentUseCase",
    # Artists
    "GetArtistProfileUseCase",
    "UpdateArtistProfileUseCase",
    # Users
    "LoadContextUseCase",
]
