from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.domain.entities import Artist, TeamMember, TeamRole, User


def _returns_argument():
    return AsyncMock(side_effect=lambda entity: entity)


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.create = _returns_argument()
    uow.users.update = _returns_argument()

    uow.artists = MagicMock()
    uow.artists.get_by_id = AsyncMock(return_value=None)
    uow.artists.get_by_user_id = AsyncMock(return_value=None)
    uow.artists.create = _returns_argument()
    uow.artists.update = _returns_argument()

    uow.team_members = MagicMock()
    uow.team_members.get_by_id = AsyncMock(return_value=None)
    uow.team_members.get_active_by_user_id = AsyncMock(return_value=[])
    uow.team_members.get_active_by_artist_id = AsyncMock(return_value=[])
    uow.team_members.get_active_by_artist_and_user = AsyncMock(return_value=None)
    uow.team_members.get_active_by_artist_and_email = AsyncMock(return_value=None)
    uow.team_members.get_primary_agent = AsyncMock(return_value=None)
    uow.team_members.create = _returns_argument()
    uow.team_members.update = _returns_argument()

    uow.invitations = MagicMock()
    uow.invitations.get_by_id = AsyncMock(return_value=None)
    uow.invitations.get_by_token = AsyncMock(return_value=None)
    uow.invitations.get_pending_by_artist_and_email = AsyncMock(return_value=[])
    uow.invitations.get_pending_by_artist_id = AsyncMock(return_value=[])
    uow.invitations.create = _returns_argument()
    uow.invitations.transition_from_pending = AsyncMock(return_value=True)

    uow.sessions = MagicMock()
    uow.sessions.get_by_id = AsyncMock(return_value=None)
    uow.sessions.create = _returns_argument()
    uow.sessions.revoke_by_id = AsyncMock(return_value=True)

    uow.audit_events = MagicMock()
    uow.audit_events.create = _returns_argument()

    return uow


@pytest.fixture
def make_user():
    def _make(**kwargs):
        kwargs.setdefault("name", "Test User")
        kwargs.setdefault("email", f"{uuid4().hex[:8]}@example.com")
        kwargs.setdefault("password_hash", "hashed")
        return User(id=uuid4(), **kwargs)

    return _make


@pytest.fixture
def make_artist():
    def _make(user_id, **kwargs):
        kwargs.setdefault("name", "The Band")
        return Artist(id=uuid4(), user_id=user_id, **kwargs)

    return _make


@pytest.fixture
def make_member():
    def _make(artist_id, user_id=None, role=TeamRole.tour_manager, **kwargs):
        kwargs.setdefault("name", "Crew Member")
        kwargs.setdefault("email", f"{uuid4().hex[:8]}@example.com")
        return TeamMember(
            id=uuid4(), artist_id=artist_id, user_id=user_id, role=role, **kwargs
        )

    return _make
