from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from libs.result import Error
from src.api.error import (
    BadRequestError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ServerError,
    UnauthenticatedError,
)
from src.app.services.authorization_gate import AccessContext
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import AuthenticatedUser
from src.app.use_cases.team import (
    AcceptInvitationResponse,
    AcceptInvitationUseCase,
    DeclineInvitationUseCase,
    InvitationListResponse,
    InviteMemberCommand,
    InviteMemberResponse,
    InviteMemberUseCase,
    ListInvitationsUseCase,
    ListTeamMembersUseCase,
    MessageResponse,
    RemoveTeamMemberUseCase,
    RevokeInvitationUseCase,
    SetOwnAgentUseCase,
    TeamMemberListResponse,
    TeamMemberResponse,
    UpdateTeamMemberUseCase,
)
from src.depends import get_current_user, get_unit_of_work, require_permission
from src.domain.entities import TEAM_ROLE_LABELS
from src.domain.permissions import Capability

router = APIRouter(prefix="/team", tags=["Team"])


def current_artist_id(access: AccessContext) -> UUID:
    """Artist the caller's current context acts for"""
    if access.artist_id is None:
        raise NotFoundError(Error("ARTIST_NOT_FOUND", "Artist profile not found"))
    return access.artist_id


@router.get("/members", status_code=status.HTTP_200_OK, response_model=TeamMemberListResponse)
async def list_members(
    access: AccessContext = Depends(require_permission()),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List the active team of the current artist.

    Raises:
        - 400 Bad Request: No active context
        - 404 Not Found: Current context has no artist
    """
    result = await ListTeamMembersUseCase(uow).execute(current_artist_id(access))

    if result.is_err():
        raise ServerError(result.error)

    return result.value


class InviteMemberRequest(BaseModel):
    """
    Invite member HTTP request payload

    role is one of the values from GET /team/roles.
    """

    name: str = Field(..., min_length=1, max_length=255, description="Invitee name")
    email: EmailStr = Field(..., description="Email address to invite")
    role: str = Field(..., description="Team role")
    custom_role: Optional[str] = Field(None, max_length=255, description="Label for custom role")
    message: Optional[str] = Field(None, description="Personal message")


@router.post("/invite", status_code=status.HTTP_200_OK, response_model=InviteMemberResponse)
async def invite_member(
    request: InviteMemberRequest,
    access: AccessContext = Depends(require_permission(Capability.invite_members.value)),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Invite someone to the current artist's team.

    The invitation token is never returned here.

    Raises:
        - 400 Bad Request: INVALID_ROLE, ALREADY_MEMBER, INVITE_ALREADY_EXISTS
        - 403 Forbidden: Missing invite_members
        - 404 Not Found: Current context has no artist
    """
    command = InviteMemberCommand(
        name=request.name,
        email=request.email,
        role=request.role,
        custom_role=request.custom_role,
        message=request.message,
    )

    result = await InviteMemberUseCase(uow).execute(
        access.user_id, current_artist_id(access), command
    )

    if result.is_err():
        error = result.error
        if error.code == "INVALID_ROLE":
            raise BadRequestError(error)
        elif error.code in ("ALREADY_MEMBER", "INVITE_ALREADY_EXISTS"):
            raise ConflictError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "ARTIST_NOT_FOUND":
            raise NotFoundError(error)
        raise ServerError(error)

    return result.value


@router.get(
    "/invitations", status_code=status.HTTP_200_OK, response_model=InvitationListResponse
)
async def list_invitations(
    access: AccessContext = Depends(require_permission(Capability.invite_members.value)),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List pending invitations of the current artist"""
    result = await ListInvitationsUseCase(uow).execute(current_artist_id(access))

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.delete(
    "/invitations/{invitation_id}",
    status_code=status.HTTP_200_OK,
    response_model=MessageResponse,
)
async def revoke_invitation(
    invitation_id: UUID,
    access: AccessContext = Depends(require_permission(Capability.invite_members.value)),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Revoke a pending invitation.

    Raises:
        - 403 Forbidden: Missing invite_members
        - 404 Not Found: Invitation not found for this artist
        - 409 Conflict: Invitation is no longer pending
    """
    result = await RevokeInvitationUseCase(uow).execute(
        access.user_id, current_artist_id(access), invitation_id
    )

    if result.is_err():
        error = result.error
        if error.code == "INVITATION_NOT_FOUND":
            raise NotFoundError(error)
        elif error.code == "INVITATION_NOT_PENDING":
            raise ConflictError(error)
        raise ServerError(error)

    return result.value


@router.post(
    "/accept-invitation/{token}",
    status_code=status.HTTP_200_OK,
    response_model=AcceptInvitationResponse,
)
async def accept_invitation(
    token: str,
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Accept an invitation as the authenticated user.

    No capability is required; the membership attaches to the caller.
    Call GET /auth/contexts afterwards to make the new context switchable.

    Raises:
        - 404 Not Found: Token invalid, expired or already used
        - 409 Conflict: Caller is already on this team
    """
    result = await AcceptInvitationUseCase(uow).execute(token, UUID(current_user.user_id))

    if result.is_err():
        error = result.error
        if error.code == "INVITATION_NOT_FOUND":
            raise NotFoundError(error)
        elif error.code in ("ALREADY_MEMBER", "PRIMARY_AGENT_EXISTS"):
            raise ConflictError(error)
        elif error.code == "USER_NOT_FOUND":
            raise UnauthenticatedError(error)
        raise ServerError(error)

    return result.value


@router.post(
    "/decline-invitation/{token}",
    status_code=status.HTTP_200_OK,
    response_model=MessageResponse,
)
async def decline_invitation(
    token: str,
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Decline an invitation.

    Raises:
        - 404 Not Found: Token invalid, expired or already used
    """
    result = await DeclineInvitationUseCase(uow).execute(token, UUID(current_user.user_id))

    if result.is_err():
        error = result.error
        if error.code == "INVITATION_NOT_FOUND":
            raise NotFoundError(error)
        raise ServerError(error)

    return result.value


class UpdateTeamMemberRequest(BaseModel):
    """
    Update team member HTTP request payload

    Only fields that are sent are changed.
    """

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=50)
    role: Optional[str] = None
    custom_role: Optional[str] = Field(None, max_length=255)
    is_primary: Optional[bool] = None
    can_invite_others: Optional[bool] = None
    can_manage_bookings: Optional[bool] = None
    can_access_financials: Optional[bool] = None


@router.put(
    "/members/{member_id}", status_code=status.HTTP_200_OK, response_model=TeamMemberResponse
)
async def update_member(
    member_id: UUID,
    request: UpdateTeamMemberRequest,
    access: AccessContext = Depends(require_permission(Capability.manage_team.value)),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update a team member of the current artist.

    Raises:
        - 400 Bad Request: INVALID_ROLE
        - 403 Forbidden: Missing manage_team, changing roles or permissions
          outside artist/agent context, or editing your own membership
        - 404 Not Found: Member not on this team
        - 409 Conflict: PRIMARY_AGENT_EXISTS
    """
    changes = {
        field: value
        for field, value in request.model_dump(exclude_unset=True).items()
        if value is not None or field in ("phone", "custom_role")
    }

    result = await UpdateTeamMemberUseCase(uow).execute(
        access.user_id,
        current_artist_id(access),
        member_id,
        changes,
        requester_context=access.current_context,
    )

    if result.is_err():
        error = result.error
        if error.code == "INVALID_ROLE":
            raise BadRequestError(error)
        elif error.code in ("CANNOT_CHANGE_PRIVILEGES", "CANNOT_EDIT_OWN_MEMBERSHIP"):
            raise ForbiddenError(error)
        elif error.code == "MEMBER_NOT_FOUND":
            raise NotFoundError(error)
        elif error.code == "PRIMARY_AGENT_EXISTS":
            raise ConflictError(error)
        raise ServerError(error)

    return result.value


@router.delete(
    "/members/{member_id}", status_code=status.HTTP_200_OK, response_model=MessageResponse
)
async def remove_member(
    member_id: UUID,
    access: AccessContext = Depends(require_permission(Capability.manage_team.value)),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Remove (deactivate) a team member of the current artist.

    Raises:
        - 403 Forbidden: Missing manage_team, or removing yourself as primary agent
        - 404 Not Found: Member not on this team
    """
    result = await RemoveTeamMemberUseCase(uow).execute(
        access.user_id, current_artist_id(access), member_id
    )

    if result.is_err():
        error = result.error
        if error.code == "MEMBER_NOT_FOUND":
            raise NotFoundError(error)
        elif error.code == "CANNOT_REMOVE_PRIMARY_AGENT":
            raise ForbiddenError(error)
        raise ServerError(error)

    return result.value


@router.post(
    "/set-own-agent", status_code=status.HTTP_200_OK, response_model=TeamMemberResponse
)
async def set_own_agent(
    access: AccessContext = Depends(require_permission(Capability.manage_team.value)),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Make the caller the primary agent of their own artist profile.

    Idempotent. Call GET /auth/contexts afterwards to gain the agent context.

    Raises:
        - 403 Forbidden: Missing manage_team
        - 404 Not Found: Caller owns no artist profile
        - 409 Conflict: Another primary agent exists
    """
    result = await SetOwnAgentUseCase(uow).execute(access.user_id)

    if result.is_err():
        error = result.error
        if error.code == "ARTIST_NOT_FOUND":
            raise NotFoundError(error)
        elif error.code in ("PRIMARY_AGENT_EXISTS", "ALREADY_MEMBER"):
            raise ConflictError(error)
        elif error.code == "USER_NOT_FOUND":
            raise UnauthenticatedError(error)
        raise ServerError(error)

    return result.value


class RoleInfo(BaseModel):
    value: str
    label: str


class RolesResponse(BaseModel):
    roles: List[RoleInfo]


@router.get("/roles", status_code=status.HTTP_200_OK, response_model=RolesResponse)
async def list_roles():
    """Allowed team roles and their display labels"""
    return RolesResponse(
        roles=[RoleInfo(value=role.value, label=label) for role, label in TEAM_ROLE_LABELS.items()]
    )
