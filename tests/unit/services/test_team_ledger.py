from uuid import uuid4

import pytest

from src.app.repositories.exceptions import DuplicateRecordError
from src.app.services.team_ledger import TeamLedger
from src.domain.entities import TeamRole


@pytest.mark.asyncio
async def test_add_membership_creates_active_row(mock_uow):
    artist_id, user_id = uuid4(), uuid4()

    result = await TeamLedger(mock_uow).add_membership(
        artist_id=artist_id,
        user_id=user_id,
        name="Sam",
        email="sam@example.com",
        role=TeamRole.tour_manager,
    )

    assert result.is_ok()
    member = result.value
    assert member.is_active is True
    assert member.artist_id == artist_id
    assert member.role == TeamRole.tour_manager
    mock_uow.team_members.create.assert_called_once()


@pytest.mark.asyncio
async def test_add_membership_rejects_duplicate_active_member(mock_uow, make_member):
    artist_id, user_id = uuid4(), uuid4()
    mock_uow.team_members.get_active_by_artist_and_user.return_value = make_member(
        artist_id, user_id
    )

    result = await TeamLedger(mock_uow).add_membership(
        artist_id=artist_id,
        user_id=user_id,
        name="Sam",
        email="sam@example.com",
        role=TeamRole.legal,
    )

    assert result.is_err()
    assert result.error.code == "ALREADY_MEMBER"
    mock_uow.team_members.create.assert_not_called()


@pytest.mark.asyncio
async def test_add_second_primary_agent_is_rejected(mock_uow, make_member):
    artist_id = uuid4()
    mock_uow.team_members.get_primary_agent.return_value = make_member(
        artist_id, uuid4(), role=TeamRole.agent, is_primary=True
    )

    result = await TeamLedger(mock_uow).add_membership(
        artist_id=artist_id,
        user_id=uuid4(),
        name="Agent Two",
        email="two@example.com",
        role=TeamRole.agent,
        is_primary=True,
    )

    assert result.is_err()
    assert result.error.code == "PRIMARY_AGENT_EXISTS"
    mock_uow.team_members.create.assert_not_called()


@pytest.mark.asyncio
async def test_concurrent_primary_agent_write_is_a_conflict(mock_uow):
    """Index violation from a racing writer surfaces as the same conflict"""
    mock_uow.team_members.create.side_effect = DuplicateRecordError("uq_team_member_primary_agent")

    result = await TeamLedger(mock_uow).add_membership(
        artist_id=uuid4(),
        user_id=uuid4(),
        name="Agent",
        email="agent@example.com",
        role=TeamRole.agent,
        is_primary=True,
    )

    assert result.is_err()
    assert result.error.code == "PRIMARY_AGENT_EXISTS"


@pytest.mark.asyncio
async def test_set_own_agent_creates_primary_agent(mock_uow, make_user, make_artist):
    user = make_user(name="Robin")
    artist = make_artist(user.id)

    result = await TeamLedger(mock_uow).set_own_agent(user, artist)

    assert result.is_ok()
    member, created = result.value
    assert created is True
    assert member.is_primary_agent
    assert member.user_id == user.id
    assert member.name == "Robin"
    assert member.can_invite_others and member.can_manage_bookings
    assert member.joined_at is not None


@pytest.mark.asyncio
async def test_set_own_agent_is_idempotent(mock_uow, make_user, make_artist, make_member):
    user = make_user()
    artist = make_artist(user.id)
    existing = make_member(artist.id, user.id, role=TeamRole.agent, is_primary=True)
    mock_uow.team_members.get_active_by_artist_and_user.return_value = existing

    result = await TeamLedger(mock_uow).set_own_agent(user, artist)

    assert result.is_ok()
    assert result.value == (existing, False)
    mock_uow.team_members.create.assert_not_called()


@pytest.mark.asyncio
async def test_set_own_agent_when_someone_else_is_primary(
    mock_uow, make_user, make_artist, make_member
):
    user = make_user()
    artist = make_artist(user.id)
    mock_uow.team_members.get_primary_agent.return_value = make_member(
        artist.id, uuid4(), role=TeamRole.agent, is_primary=True
    )

    result = await TeamLedger(mock_uow).set_own_agent(user, artist)

    assert result.is_err()
    assert result.error.code == "PRIMARY_AGENT_EXISTS"


@pytest.mark.asyncio
async def test_deactivate_is_a_soft_delete(mock_uow, make_member):
    artist_id = uuid4()
    member = make_member(artist_id, uuid4())
    mock_uow.team_members.get_by_id.return_value = member

    result = await TeamLedger(mock_uow).deactivate(member.id, artist_id, uuid4())

    assert result.is_ok()
    assert member.is_active is False
    mock_uow.team_members.update.assert_called_once_with(member)


@pytest.mark.asyncio
async def test_cannot_remove_self_as_primary_agent(mock_uow, make_member):
    artist_id, user_id = uuid4(), uuid4()
    member = make_member(artist_id, user_id, role=TeamRole.agent, is_primary=True)
    mock_uow.team_members.get_by_id.return_value = member

    result = await TeamLedger(mock_uow).deactivate(member.id, artist_id, user_id)

    assert result.is_err()
    assert result.error.code == "CANNOT_REMOVE_PRIMARY_AGENT"
    assert member.is_active is True
    mock_uow.team_members.update.assert_not_called()


@pytest.mark.asyncio
async def test_deactivate_member_of_another_artist(mock_uow, make_member):
    member = make_member(uuid4(), uuid4())
    mock_uow.team_members.get_by_id.return_value = member

    result = await TeamLedger(mock_uow).deactivate(member.id, uuid4(), uuid4())

    assert result.is_err()
    assert result.error.code == "MEMBER_NOT_FOUND"


@pytest.mark.asyncio
async def test_update_applies_allowed_fields_only(mock_uow, make_member):
    artist_id = uuid4()
    member = make_member(artist_id, uuid4())
    mock_uow.team_members.get_by_id.return_value = member

    result = await TeamLedger(mock_uow).update(
        member.id,
        artist_id,
        {"phone": "+1 555 0100", "can_manage_bookings": True, "artist_id": uuid4()},
    )

    assert result.is_ok()
    assert member.phone == "+1 555 0100"
    assert member.can_manage_bookings is True
    assert member.artist_id == artist_id


@pytest.mark.asyncio
async def test_update_rejects_unknown_role(mock_uow, make_member):
    artist_id = uuid4()
    member = make_member(artist_id, uuid4())
    mock_uow.team_members.get_by_id.return_value = member

    result = await TeamLedger(mock_uow).update(member.id, artist_id, {"role": "roadie"})

    assert result.is_err()
    assert result.error.code == "INVALID_ROLE"
    assert member.role == TeamRole.tour_manager


@pytest.mark.asyncio
async def test_update_cannot_create_second_primary_agent(mock_uow, make_member):
    artist_id = uuid4()
    member = make_member(artist_id, uuid4(), role=TeamRole.agent)
    mock_uow.team_members.get_by_id.return_value = member
    mock_uow.team_members.get_primary_agent.return_value = make_member(
        artist_id, uuid4(), role=TeamRole.agent, is_primary=True
    )

    result = await TeamLedger(mock_uow).update(member.id, artist_id, {"is_primary": True})

    assert result.is_err()
    assert result.error.code == "PRIMARY_AGENT_EXISTS"
    assert member.is_primary is False
    mock_uow.team_members.update.assert_not_called()


@pytest.mark.asyncio
async def test_update_of_current_primary_agent_is_allowed(mock_uow, make_member):
    artist_id = uuid4()
    member = make_member(artist_id, uuid4(), role=TeamRole.agent, is_primary=True)
    mock_uow.team_members.get_by_id.return_value = member
    mock_uow.team_members.get_primary_agent.return_value = member

    result = await TeamLedger(mock_uow).update(member.id, artist_id, {"name": "Renamed"})

    assert result.is_ok()
    assert member.name == "Renamed"
