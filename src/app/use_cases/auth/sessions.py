from datetime import timedelta
from uuid import UUID

from config import ApplicationConfig
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import Session


async def open_session(uow: UnitOfWork, user_id: UUID) -> Session:
    """Create the session a new bearer token is bound to"""
    session = Session(
        user_id=user_id,
        expires_at=utc_now()
        + timedelta(minutes=ApplicationConfig.ACCESS_TOKEN_EXPIRE_MINUTES),
    )
    return await uow.sessions.create(session)


def issue_token(session: Session) -> str:
    # Import JWT utility here to avoid circular dependency
    from src.api.utils.jwt import create_access_token

    return create_access_token(session.user_id, session.id)
