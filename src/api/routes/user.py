from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from config import ApplicationConfig
from src.api.error import unwrap
from src.api.schemas import paginated, success
from src.app.repositories.user_repository import UserFilters
from src.app.services.pagination import PageRequest
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users import (
    AssignClientsCommand,
    AssignClientsUseCase,
    AssignRoleCommand,
    AssignRoleUseCase,
    CreateUserCommand,
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserCommand,
    UpdateUserUseCase,
)
from src.depends import get_actor, get_unit_of_work
from src.domain.actor import ActorContext
from src.domain.entities import UserRole

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    request: CreateUserCommand,
    actor: ActorContext = Depends(get_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Create a user (manager or admin)"""
    result = await CreateUserUseCase(uow).execute(actor, request)
    return success("User created successfully", data=unwrap(result))


@router.get("")
async def list_users(
    page: int = Query(1, ge=1),
    limit: int = Query(ApplicationConfig.DEFAULT_PAGE_SIZE, ge=1, le=ApplicationConfig.MAX_PAGE_SIZE),
    role: Optional[UserRole] = None,
    is_active: Optional[bool] = Query(None, alias="isActive"),
    organization: Optional[UUID] = None,
    actor: ActorContext = Depends(get_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List users; the organization filter only applies for admins"""
    filters = UserFilters(role=role, is_active=is_active, organization_id=organization)
    result = await ListUsersUseCase(uow).execute(
        actor, filters, PageRequest(page=page, limit=limit)
    )
    return paginated("Users retrieved successfully", unwrap(result))


@router.get("/{user_id}")
async def get_user(
    user_id: UUID,
    actor: ActorContext = Depends(get_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetUserUseCase(uow).execute(actor, user_id)
    return success("User retrieved successfully", data=unwrap(result))


@router.put("/{user_id}")
async def update_user(
    user_id: UUID,
    request: UpdateUserCommand,
    actor: ActorContext = Depends(get_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateUserUseCase(uow).execute(actor, user_id, request)
    return success("User updated successfully", data=unwrap(result))


@router.delete("/{user_id}")
async def delete_user(
    user_id: UUID,
    actor: ActorContext = Depends(get_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    unwrap(await DeleteUserUseCase(uow).execute(actor, user_id))
    return success("User deleted successfully")


@router.patch("/{user_id}/role")
async def assign_role(
    user_id: UUID,
    request: AssignRoleCommand,
    actor: ActorContext = Depends(get_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await AssignRoleUseCase(uow).execute(actor, user_id, request)
    return success("User role updated successfully", data=unwrap(result))


@router.patch("/{user_id}/clients")
async def assign_clients(
    user_id: UUID,
    request: AssignClientsCommand,
    actor: ActorContext = Depends(get_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await AssignClientsUseCase(uow).execute(actor, user_id, request)
    return success("User clients updated successfully", data=unwrap(result))
