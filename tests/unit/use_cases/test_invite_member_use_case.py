from datetime import timedelta
from uuid import uuid4

import pytest

from src.app.repositories.exceptions import DuplicateRecordError
from src.app.use_cases.team import InviteMemberCommand, InviteMemberUseCase
from src.domain.base import utc_now
from src.domain.entities import InvitationStatus, TeamInvitation, TeamRole


def invitation_for(artist_id, email, expires_at):
    return TeamInvitation(
        id=uuid4(),
        artist_id=artist_id,
        email=email,
        name="Bob",
        role=TeamRole.tour_manager,
        status=InvitationStatus.pending,
        token="existing-token",
        expires_at=expires_at,
    )


@pytest.fixture
def artist(make_user, make_artist):
    return make_artist(make_user().id)


@pytest.fixture
def command():
    return InviteMemberCommand(name="Bob", email="bob@example.com", role="tour_manager")


@pytest.mark.asyncio
async def test_successful_invite(mock_uow, artist, command):
    mock_uow.artists.get_by_id.return_value = artist
    inviter_id = uuid4()

    result = await InviteMemberUseCase(mock_uow).execute(inviter_id, artist.id, command)

    assert result.is_ok()
    response = result.value
    assert response.invitation.email == "bob@example.com"
    assert response.invitation.role == "Tour Manager"
    assert response.invitation.status == "pending"
    assert "token" not in response.model_dump()["invitation"]

    created = mock_uow.invitations.create.call_args.args[0]
    assert created.role == TeamRole.tour_manager
    assert len(created.token) >= 32
    assert created.expires_at - created.created_at >= timedelta(days=7) - timedelta(seconds=5)

    audit = mock_uow.audit_events.create.call_args.args[0]
    assert audit.action == "invite_sent"
    assert audit.user_id == inviter_id
    assert "existing-token" not in str(audit.event_metadata)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_tokens_are_unique(mock_uow, artist, command):
    mock_uow.artists.get_by_id.return_value = artist

    await InviteMemberUseCase(mock_uow).execute(uuid4(), artist.id, command)
    await InviteMemberUseCase(mock_uow).execute(uuid4(), artist.id, command)

    first, second = [c.args[0].token for c in mock_uow.invitations.create.call_args_list]
    assert first != second


@pytest.mark.asyncio
async def test_invalid_role(mock_uow, artist):
    command = InviteMemberCommand(name="Bob", email="bob@example.com", role="roadie")

    result = await InviteMemberUseCase(mock_uow).execute(uuid4(), artist.id, command)

    assert result.is_err()
    assert result.error.code == "INVALID_ROLE"
    mock_uow.invitations.create.assert_not_called()


@pytest.mark.asyncio
async def test_custom_role_display(mock_uow, artist):
    mock_uow.artists.get_by_id.return_value = artist
    command = InviteMemberCommand(
        name="Bob", email="bob@example.com", role="custom", custom_role="Merch Lead"
    )

    result = await InviteMemberUseCase(mock_uow).execute(uuid4(), artist.id, command)

    assert result.is_ok()
    assert result.value.invitation.role == "Merch Lead"


@pytest.mark.asyncio
async def test_existing_member_cannot_be_invited(mock_uow, artist, command, make_member):
    mock_uow.artists.get_by_id.return_value = artist
    mock_uow.team_members.get_active_by_artist_and_email.return_value = make_member(
        artist.id, uuid4(), email="bob@example.com"
    )

    result = await InviteMemberUseCase(mock_uow).execute(uuid4(), artist.id, command)

    assert result.is_err()
    assert result.error.code == "ALREADY_MEMBER"
    mock_uow.invitations.create.assert_not_called()


@pytest.mark.asyncio
async def test_pending_unexpired_invite_blocks_a_new_one(mock_uow, artist, command):
    mock_uow.artists.get_by_id.return_value = artist
    mock_uow.invitations.get_pending_by_artist_and_email.return_value = [
        invitation_for(artist.id, "bob@example.com", utc_now() + timedelta(days=3))
    ]

    result = await InviteMemberUseCase(mock_uow).execute(uuid4(), artist.id, command)

    assert result.is_err()
    assert result.error.code == "INVITE_ALREADY_EXISTS"
    mock_uow.invitations.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_expired_pending_invite_is_replaced(mock_uow, artist, command):
    mock_uow.artists.get_by_id.return_value = artist
    stale = invitation_for(artist.id, "bob@example.com", utc_now() - timedelta(minutes=1))
    mock_uow.invitations.get_pending_by_artist_and_email.return_value = [stale]

    result = await InviteMemberUseCase(mock_uow).execute(uuid4(), artist.id, command)

    assert result.is_ok()
    mock_uow.invitations.transition_from_pending.assert_called_once_with(
        stale.id, InvitationStatus.expired
    )
    mock_uow.invitations.create.assert_called_once()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_unknown_artist(mock_uow, command):
    result = await InviteMemberUseCase(mock_uow).execute(uuid4(), uuid4(), command)

    assert result.is_err()
    assert result.error.code == "ARTIST_NOT_FOUND"


@pytest.mark.asyncio
async def test_concurrent_duplicate_is_reported_as_existing_invite(mock_uow, artist, command):
    mock_uow.artists.get_by_id.return_value = artist
    mock_uow.invitations.create.side_effect = DuplicateRecordError("uq_invitation_pending_email")

    result = await InviteMemberUseCase(mock_uow).execute(uuid4(), artist.id, command)

    assert result.is_err()
    assert result.error.code == "INVITE_ALREADY_EXISTS"
    mock_uow.audit_events.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_email_is_lowercased(mock_uow, artist):
    mock_uow.artists.get_by_id.return_value = artist
    command = InviteMemberCommand(name="Bob", email="Bob@Example.COM", role="tour_manager")

    result = await InviteMemberUseCase(mock_uow).execute(uuid4(), artist.id, command)

    assert result.is_ok()
    mock_uow.invitations.get_pending_by_artist_and_email.assert_called_once_with(
        artist.id, "bob@example.com"
    )
    assert mock_uow.invitations.create.call_args.args[0].email == "bob@example.com"
