from fastapi import APIRouter, Depends, status

from src.api.error import unwrap
from src.api.schemas import success
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import GetProfileUseCase, LoginCommand, LoginUseCase
from src.depends import get_actor, get_unit_of_work
from src.domain.actor import ActorContext

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/login", status_code=status.HTTP_200_OK)
async def login(request: LoginCommand, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    User Login

    Verifies email and password and returns a bearer access token together
    with the user's profile.

    Raises:
        - 401 Unauthorized: Invalid credentials or inactive account
    """
    result = await LoginUseCase(uow).execute(request)
    return success("Login successful", data=unwrap(result))


@router.get("/me")
async def get_profile(
    actor: ActorContext = Depends(get_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Current user's profile with organization name and assigned clients"""
    result = await GetProfileUseCase(uow).execute(actor)
    return success("Profile retrieved successfully", data=unwrap(result))
