from typing import Optional
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from libs.result import Error
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import BadRequestError, ForbiddenError, ServerError, UnauthenticatedError
from src.api.utils.jwt import verify_jwt
from src.app.services.authorization_gate import AccessContext, AuthorizationGate
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import AuthenticatedUser, AuthenticateUseCase

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

# auto_error=False so a missing header is a 401, not FastAPI's default 403
security = HTTPBearer(auto_error=False)

UNAUTHENTICATED = Error("UNAUTHENTICATED", "Invalid or expired token")


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> AuthenticatedUser:
    """
    Dependency to extract and verify the bearer token.

    The token must decode and its session must still be usable.

    Raises:
        UnauthenticatedError: 401 if the token is missing, invalid, expired or revoked
    """
    if credentials is None:
        raise UnauthenticatedError(UNAUTHENTICATED)

    payload = verify_jwt(credentials.credentials)
    if payload is None:
        raise UnauthenticatedError(UNAUTHENTICATED)

    try:
        user_id = UUID(payload["user_id"])
        session_id = UUID(payload["session_id"])
    except ValueError:
        raise UnauthenticatedError(UNAUTHENTICATED)

    result = await AuthenticateUseCase(uow).execute(user_id, session_id)
    if result.is_err():
        raise UnauthenticatedError(result.error)

    return result.value


def require_permission(capability: Optional[str] = None):
    """
    Build a dependency that runs the authorization gate for `capability`.

    With no capability the caller only needs an active context.
    """

    async def dependency(
        current_user: AuthenticatedUser = Depends(get_current_user),
        uow: UnitOfWork = Depends(get_unit_of_work),
    ) -> AccessContext:
        result = await AuthorizationGate(uow).authorize(
            UUID(current_user.user_id), capability
        )
        if result.is_err():
            error = result.error
            if error.code == "UNAUTHENTICATED":
                raise UnauthenticatedError(error)
            elif error.code == "INSUFFICIENT_PERMISSIONS":
                raise ForbiddenError(error)
            elif error.code == "NO_ACTIVE_CONTEXT":
                raise BadRequestError(error)
            raise ServerError(error)

        return result.value

    return dependency
