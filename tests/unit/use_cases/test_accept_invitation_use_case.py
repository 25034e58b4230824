from datetime import timedelta
from uuid import uuid4

import pytest

from src.app.use_cases.team import AcceptInvitationUseCase, DeclineInvitationUseCase
from src.domain.base import utc_now
from src.domain.entities import InvitationStatus, TeamInvitation, TeamRole


@pytest.fixture
def artist(make_user, make_artist):
    return make_artist(make_user().id, name="Northern Lights")


@pytest.fixture
def invitee(make_user):
    return make_user(name="Bob", email="bob@example.com")


def make_invitation(artist_id, status=InvitationStatus.pending, expires_in=timedelta(days=7)):
    return TeamInvitation(
        id=uuid4(),
        artist_id=artist_id,
        email="bob@example.com",
        name="Bob",
        role=TeamRole.tour_manager,
        status=status,
        token="valid-token",
        expires_at=utc_now() + expires_in,
    )


@pytest.mark.asyncio
async def test_accept_creates_membership(mock_uow, artist, invitee):
    invitation = make_invitation(artist.id)
    mock_uow.invitations.get_by_token.return_value = invitation
    mock_uow.users.get_by_id.return_value = invitee
    mock_uow.artists.get_by_id.return_value = artist

    result = await AcceptInvitationUseCase(mock_uow).execute("valid-token", invitee.id)

    assert result.is_ok()
    response = result.value
    assert response.team_member.role == "Tour Manager"
    assert response.team_member.artist == "Northern Lights"

    mock_uow.invitations.transition_from_pending.assert_called_once_with(
        invitation.id, InvitationStatus.accepted
    )
    member = mock_uow.team_members.create.call_args.args[0]
    assert member.user_id == invitee.id
    assert member.artist_id == artist.id
    assert member.role == TeamRole.tour_manager
    assert member.is_active is True
    assert member.joined_at is not None
    audit = mock_uow.audit_events.create.call_args.args[0]
    assert audit.action == "invitation_accepted"
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_unknown_token(mock_uow, invitee):
    result = await AcceptInvitationUseCase(mock_uow).execute("nope", invitee.id)

    assert result.is_err()
    assert result.error.code == "INVITATION_NOT_FOUND"


@pytest.mark.asyncio
async def test_expired_but_still_pending_is_not_found(mock_uow, artist, invitee):
    """Expiry is evaluated live even though the stored status says pending"""
    mock_uow.invitations.get_by_token.return_value = make_invitation(
        artist.id, expires_in=-timedelta(seconds=1)
    )
    mock_uow.users.get_by_id.return_value = invitee

    result = await AcceptInvitationUseCase(mock_uow).execute("valid-token", invitee.id)

    assert result.is_err()
    assert result.error.code == "INVITATION_NOT_FOUND"
    mock_uow.invitations.transition_from_pending.assert_not_called()
    mock_uow.team_members.create.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "status", [InvitationStatus.accepted, InvitationStatus.declined, InvitationStatus.expired]
)
async def test_used_invitation_is_not_found(mock_uow, artist, invitee, status):
    mock_uow.invitations.get_by_token.return_value = make_invitation(artist.id, status=status)
    mock_uow.users.get_by_id.return_value = invitee

    result = await AcceptInvitationUseCase(mock_uow).execute("valid-token", invitee.id)

    assert result.is_err()
    assert result.error.code == "INVITATION_NOT_FOUND"


@pytest.mark.asyncio
async def test_lost_race_creates_no_membership(mock_uow, artist, invitee):
    """Another request consumed the token between read and transition"""
    mock_uow.invitations.get_by_token.return_value = make_invitation(artist.id)
    mock_uow.users.get_by_id.return_value = invitee
    mock_uow.invitations.transition_from_pending.return_value = False

    result = await AcceptInvitationUseCase(mock_uow).execute("valid-token", invitee.id)

    assert result.is_err()
    assert result.error.code == "INVITATION_NOT_FOUND"
    mock_uow.team_members.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_existing_member_cannot_accept(mock_uow, artist, invitee, make_member):
    mock_uow.invitations.get_by_token.return_value = make_invitation(artist.id)
    mock_uow.users.get_by_id.return_value = invitee
    mock_uow.team_members.get_active_by_artist_and_user.return_value = make_member(
        artist.id, invitee.id
    )

    result = await AcceptInvitationUseCase(mock_uow).execute("valid-token", invitee.id)

    assert result.is_err()
    assert result.error.code == "ALREADY_MEMBER"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_decline(mock_uow, artist, invitee):
    invitation = make_invitation(artist.id)
    mock_uow.invitations.get_by_token.return_value = invitation

    result = await DeclineInvitationUseCase(mock_uow).execute("valid-token", invitee.id)

    assert result.is_ok()
    mock_uow.invitations.transition_from_pending.assert_called_once_with(
        invitation.id, InvitationStatus.declined
    )
    mock_uow.team_members.create.assert_not_called()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_decline_expired(mock_uow, artist, invitee):
    mock_uow.invitations.get_by_token.return_value = make_invitation(
        artist.id, expires_in=-timedelta(days=1)
    )

    result = await DeclineInvitationUseCase(mock_uow).execute("valid-token", invitee.id)

    assert result.is_err()
    assert result.error.code == "INVITATION_NOT_FOUND"
