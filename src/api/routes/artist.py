from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import NotFoundError, ServerError
from src.api.routes.team import current_artist_id
from src.app.services.authorization_gate import AccessContext
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.artists import (
    ArtistProfileResponse,
    GetArtistProfileUseCase,
    UpdateArtistProfileCommand,
    UpdateArtistProfileUseCase,
)
from src.depends import get_unit_of_work, require_permission
from src.domain.permissions import Capability

router = APIRouter(prefix="/artist", tags=["Artist"])


@router.get("/profile", status_code=status.HTTP_200_OK, response_model=ArtistProfileResponse)
async def get_profile(
    access: AccessContext = Depends(require_permission()),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Profile of the artist the current context acts for.

    Raises:
        - 400 Bad Request: No active context
        - 404 Not Found: Current context has no artist
    """
    result = await GetArtistProfileUseCase(uow).execute(current_artist_id(access))

    if result.is_err():
        error = result.error
        if error.code == "ARTIST_NOT_FOUND":
            raise NotFoundError(error)
        raise ServerError(error)

    return result.value


class UpdateArtistProfileRequest(BaseModel):
    """Update artist profile HTTP request payload"""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    bio: Optional[str] = None


@router.put("/profile", status_code=status.HTTP_200_OK, response_model=ArtistProfileResponse)
async def update_profile(
    request: UpdateArtistProfileRequest,
    access: AccessContext = Depends(require_permission(Capability.manage_team.value)),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update the current artist's profile.

    Raises:
        - 403 Forbidden: Missing manage_team
        - 404 Not Found: Current context has no artist
    """
    command = UpdateArtistProfileCommand(
        name=request.name, email=request.email, bio=request.bio
    )

    result = await UpdateArtistProfileUseCase(uow).execute(
        access.user_id, current_artist_id(access), command
    )

    if result.is_err():
        error = result.error
        if error.code == "ARTIST_NOT_FOUND":
            raise NotFoundError(error)
        raise ServerError(error)

    return result.value
