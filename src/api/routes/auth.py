from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import BadRequestError, ConflictError, ServerError, UnauthenticatedError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    AuthenticatedUser,
    AuthResponse,
    ContextsResponse,
    LoginUseCase,
    LogoutResponse,
    LogoutUseCase,
    RefreshContextsUseCase,
    RefreshTokenUseCase,
    RegisterCommand,
    RegisterUseCase,
    SwitchContextResponse,
    SwitchContextUseCase,
)
from src.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    API layer responsibility: HTTP validation and serialization.
    """

    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=8, description="User password (min 8 chars)")
    artist_name: Optional[str] = Field(
        None, min_length=1, max_length=255, description="Create an owned artist profile"
    )


@router.post(
    "/register", status_code=status.HTTP_201_CREATED, response_model=AuthResponse
)
async def register(
    request: RegisterRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Register a new user, optionally with their own artist profile.

    Returns a bearer token and the user with resolved contexts.

    Raises:
        - 409 Conflict: Email already exists
        - 422 Unprocessable Entity: Invalid input (handled by FastAPI)
    """
    command = RegisterCommand(
        name=request.name,
        email=request.email,
        password=request.password,
        artist_name=request.artist_name,
    )

    result = await RegisterUseCase(uow).execute(command)

    if result.is_err():
        error = result.error
        if error.code == "EMAIL_ALREADY_EXISTS":
            raise ConflictError(error)
        raise ServerError(error)

    return result.value


class LoginRequest(BaseModel):
    """
    Login HTTP request payload

    context optionally selects the context to start in.
    """

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., description="User password")
    context: Optional[str] = Field(None, description="artist, agent or team_member")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=AuthResponse)
async def login(request: LoginRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    User Login

    Authenticates the user, recomputes their available contexts and returns
    a bearer token with the resolved user.

    Raises:
        - 401 Unauthorized: Invalid credentials
        - 400 Bad Request: Requested context is not available (body lists
          available_contexts)
    """
    result = await LoginUseCase(uow).execute(
        request.email, request.password, request.context
    )

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise UnauthenticatedError(error)
        elif error.code == "INVALID_CONTEXT":
            raise BadRequestError(error)
        raise ServerError(error)

    return result.value


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=LogoutResponse)
async def logout(
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Revoke the session behind the current token"""
    result = await LogoutUseCase(uow).execute(UUID(current_user.session_id))

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.post("/refresh", status_code=status.HTTP_200_OK, response_model=AuthResponse)
async def refresh(
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Rotate the bearer token.

    The current session is revoked and a new token issued.

    Raises:
        - 401 Unauthorized: Invalid token or revoked session
    """
    result = await RefreshTokenUseCase(uow).execute(
        UUID(current_user.user_id), UUID(current_user.session_id)
    )

    if result.is_err():
        error = result.error
        if error.code in ("SESSION_REVOKED", "USER_NOT_FOUND"):
            raise UnauthenticatedError(error)
        raise ServerError(error)

    return result.value


class SwitchContextRequest(BaseModel):
    """Switch context HTTP request payload"""

    context: str = Field(..., description="artist, agent or team_member")


@router.post(
    "/switch-context",
    status_code=status.HTTP_200_OK,
    response_model=SwitchContextResponse,
)
async def switch_context(
    request: SwitchContextRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Switch the active context.

    Only contexts in the stored available_contexts can be selected; call
    GET /auth/contexts first to pick up newly gained contexts.

    Raises:
        - 400 Bad Request: Context not available (body lists available_contexts)
        - 401 Unauthorized: Invalid or expired token
    """
    result = await SwitchContextUseCase(uow).execute(
        UUID(current_user.user_id), request.context
    )

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CONTEXT":
            raise BadRequestError(error)
        elif error.code == "USER_NOT_FOUND":
            raise UnauthenticatedError(error)
        raise ServerError(error)

    return result.value


@router.get("/contexts", status_code=status.HTTP_200_OK, response_model=ContextsResponse)
async def get_contexts(
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Recompute and return the user's available contexts"""
    result = await RefreshContextsUseCase(uow).execute(UUID(current_user.user_id))

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise UnauthenticatedError(error)
        raise ServerError(error)

    return result.value
