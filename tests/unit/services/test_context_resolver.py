from uuid import uuid4

import pytest

from src.app.services.context_resolver import ContextResolver
from src.domain.entities import ContextKind, TeamRole


@pytest.mark.asyncio
async def test_refresh_for_artist_owner(mock_uow, make_user, make_artist):
    """Owner of an artist profile only: single artist context with full access"""
    user = make_user()
    mock_uow.artists.get_by_user_id.return_value = make_artist(user.id)

    resolver = ContextResolver(mock_uow)
    user = await resolver.refresh_contexts(user)

    assert user.available_contexts == ["artist"]
    assert user.is_multi_role is False
    assert user.current_context == ContextKind.artist
    permissions = await resolver.get_permissions(user)
    assert all(permissions.model_dump().values())
    mock_uow.users.update.assert_called_once_with(user)


@pytest.mark.asyncio
async def test_refresh_for_crew_member(mock_uow, make_user, make_member):
    user = make_user()
    membership = make_member(
        uuid4(), user.id, role=TeamRole.sound_engineer, can_manage_bookings=True
    )
    mock_uow.team_members.get_active_by_user_id.return_value = [membership]

    resolver = ContextResolver(mock_uow)
    user = await resolver.refresh_contexts(user)

    assert user.available_contexts == ["team_member"]
    assert user.current_context == ContextKind.team_member
    assert await resolver.get_current_role(user) == "sound_engineer"
    permissions = await resolver.get_permissions(user)
    assert permissions.model_dump() == {
        "manage_team": False,
        "manage_bookings": True,
        "access_financials": False,
        "invite_members": False,
        "create_threads": False,
    }


@pytest.mark.asyncio
async def test_refresh_resets_stale_current_context(
    mock_uow, make_user, make_artist
):
    """An agent context lost since the last refresh falls back to the default"""
    user = make_user(
        current_context=ContextKind.agent,
        available_contexts=["artist", "agent"],
        is_multi_role=True,
    )
    mock_uow.artists.get_by_user_id.return_value = make_artist(user.id)

    user = await ContextResolver(mock_uow).refresh_contexts(user)

    assert user.available_contexts == ["artist"]
    assert user.current_context == ContextKind.artist
    assert user.is_multi_role is False


@pytest.mark.asyncio
async def test_refresh_keeps_valid_current_context(
    mock_uow, make_user, make_artist, make_member
):
    user = make_user(current_context=ContextKind.agent)
    mock_uow.artists.get_by_user_id.return_value = make_artist(user.id)
    mock_uow.team_members.get_active_by_user_id.return_value = [
        make_member(uuid4(), user.id, role=TeamRole.agent, is_primary=True)
    ]

    user = await ContextResolver(mock_uow).refresh_contexts(user)

    assert user.current_context == ContextKind.agent
    assert user.available_contexts == ["artist", "agent"]
    assert user.is_multi_role is True


@pytest.mark.asyncio
async def test_refresh_with_nothing_clears_context(mock_uow, make_user):
    user = make_user(current_context=ContextKind.team_member, available_contexts=["team_member"])

    user = await ContextResolver(mock_uow).refresh_contexts(user)

    assert user.available_contexts == []
    assert user.current_context is None
    assert await ContextResolver(mock_uow).get_current_artist(user) is None


@pytest.mark.asyncio
async def test_switch_to_stored_context(mock_uow, make_user):
    user = make_user(
        current_context=ContextKind.artist, available_contexts=["artist", "agent"]
    )

    switched = await ContextResolver(mock_uow).switch_context(user, "agent")

    assert switched is True
    assert user.current_context == ContextKind.agent
    mock_uow.users.update.assert_called_once_with(user)


@pytest.mark.asyncio
async def test_switch_ignores_contexts_not_yet_refreshed(
    mock_uow, make_user, make_member
):
    """A freshly gained agent membership is not switchable before a refresh"""
    user = make_user(current_context=ContextKind.artist, available_contexts=["artist"])
    mock_uow.team_members.get_active_by_user_id.return_value = [
        make_member(uuid4(), user.id, role=TeamRole.agent, is_primary=True)
    ]

    switched = await ContextResolver(mock_uow).switch_context(user, "agent")

    assert switched is False
    assert user.current_context == ContextKind.artist
    mock_uow.users.update.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("requested", ["venue", "superuser", ""])
async def test_switch_rejects_unavailable_or_unknown(mock_uow, make_user, requested):
    user = make_user(current_context=ContextKind.artist, available_contexts=["artist"])

    assert await ContextResolver(mock_uow).switch_context(user, requested) is False
    assert user.current_context == ContextKind.artist


@pytest.mark.asyncio
async def test_agent_context_resolves_the_represented_artist(
    mock_uow, make_user, make_artist, make_member
):
    """Owner who is also primary agent elsewhere sees the other artist as agent"""
    user = make_user(
        current_context=ContextKind.artist, available_contexts=["artist", "agent"]
    )
    own_artist = make_artist(user.id, name="Own Project")
    other_artist = make_artist(uuid4(), name="Client Artist")
    agency = make_member(other_artist.id, user.id, role=TeamRole.agent, is_primary=True)

    mock_uow.artists.get_by_user_id.return_value = own_artist
    mock_uow.artists.get_by_id.return_value = other_artist
    mock_uow.team_members.get_active_by_user_id.return_value = [agency]

    resolver = ContextResolver(mock_uow)
    assert await resolver.get_current_artist(user) is own_artist

    assert await resolver.switch_context(user, "agent") is True

    assert await resolver.get_current_artist(user) is other_artist
    mock_uow.artists.get_by_id.assert_called_with(other_artist.id)
    assert await resolver.get_current_role(user) == "agent"
    assert await resolver.has_permission(user, "access_financials") is True


@pytest.mark.asyncio
async def test_has_permission_without_backing_membership(mock_uow, make_user):
    user = make_user(
        current_context=ContextKind.team_member, available_contexts=["team_member"]
    )

    resolver = ContextResolver(mock_uow)

    assert await resolver.has_permission(user, "manage_bookings") is False
    assert await resolver.get_current_role(user) is None
