from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from config import ApplicationConfig
from src.api.error import unwrap
from src.api.schemas import paginated, success
from src.app.repositories.client_repository import ClientFilters
from src.app.services.pagination import PageRequest
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.clients import (
    CreateClientCommand,
    CreateClientUseCase,
    DeleteClientUseCase,
    GetClientUseCase,
    ListClientsUseCase,
    RestoreClientUseCase,
    SearchClientsUseCase,
    UpdateClientCommand,
    UpdateClientUseCase,
)
from src.depends import get_actor, get_unit_of_work
from src.domain.actor import ActorContext
from src.domain.entities import ClientType

router = APIRouter(prefix="/organizations/{organization_id}/clients", tags=["Clients"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_client(
    organization_id: UUID,
    request: CreateClientCommand,
    actor: ActorContext = Depends(get_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await CreateClientUseCase(uow).execute(actor, organization_id, request)
    return success("Client created successfully", data=unwrap(result))


@router.get("")
async def list_clients(
    organization_id: UUID,
    page: int = Query(1, ge=1),
    limit: int = Query(ApplicationConfig.DEFAULT_PAGE_SIZE, ge=1, le=ApplicationConfig.MAX_PAGE_SIZE),
    name: Optional[str] = None,
    email: Optional[str] = None,
    phone: Optional[str] = None,
    client_type: Optional[ClientType] = Query(None, alias="clientType"),
    is_active: Optional[bool] = Query(None, alias="isActive"),
    city: Optional[str] = None,
    state: Optional[str] = None,
    actor: ActorContext = Depends(get_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    filters = ClientFilters(
        name=name,
        email=email,
        phone=phone,
        client_type=client_type,
        is_active=is_active,
        city=city,
        state=state,
    )
    result = await ListClientsUseCase(uow).execute(
        actor, organization_id, filters, PageRequest(page=page, limit=limit)
    )
    return paginated("Clients retrieved successfully", unwrap(result))


# Declared before /{client_id} so "search" is not read as an id
@router.get("/search")
async def search_clients(
    organization_id: UUID,
    q: str = Query(..., min_length=1),
    page: int = Query(1, ge=1),
    limit: int = Query(ApplicationConfig.DEFAULT_PAGE_SIZE, ge=1, le=ApplicationConfig.MAX_PAGE_SIZE),
    actor: ActorContext = Depends(get_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await SearchClientsUseCase(uow).execute(
        actor, organization_id, q, PageRequest(page=page, limit=limit)
    )
    return paginated("Clients retrieved successfully", unwrap(result))


@router.get("/{client_id}")
async def get_client(
    organization_id: UUID,
    client_id: UUID,
    actor: ActorContext = Depends(get_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetClientUseCase(uow).execute(actor, organization_id, client_id)
    return success("Client retrieved successfully", data=unwrap(result))


@router.put("/{client_id}")
async def update_client(
    organization_id: UUID,
    client_id: UUID,
    request: UpdateClientCommand,
    actor: ActorContext = Depends(get_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateClientUseCase(uow).execute(
        actor, organization_id, client_id, request
    )
    return success("Client updated successfully", data=unwrap(result))


@router.delete("/{client_id}")
async def delete_client(
    organization_id: UUID,
    client_id: UUID,
    actor: ActorContext = Depends(get_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    unwrap(await DeleteClientUseCase(uow).execute(actor, organization_id, client_id))
    return success("Client deleted successfully")


@router.patch("/{client_id}/restore")
async def restore_client(
    organization_id: UUID,
    client_id: UUID,
    actor: ActorContext = Depends(get_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await RestoreClientUseCase(uow).execute(actor, organization_id, client_id)
    return success("Client restored successfully", data=unwrap(result))
