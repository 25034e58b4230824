from uuid import UUID
from fastapi import APIRouter, Depends, status

from src.api.error import ServerError, UnauthenticatedError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import AuthenticatedUser, UserPayload
from src.app.use_cases.users import LoadContextUseCase
from src.depends import get_current_user, get_unit_of_work

router = APIRouter(tags=["User"])


@router.get("/me", status_code=status.HTTP_200_OK, response_model=UserPayload)
async def get_me(
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Load Current User & Context

    Returns the user with current context, role, permissions and the artist
    that context acts for.

    Raises:
        - 401 Unauthorized: Invalid or expired token
    """
    use_case = LoadContextUseCase(uow)
    result = await use_case.execute(UUID(current_user.user_id))

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise UnauthenticatedError(error)
        raise ServerError(error)

    return result.value
