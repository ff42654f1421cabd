from datetime import datetime
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from config import ApplicationConfig
from src.api.error import unwrap
from src.api.schemas import paginated, success
from src.app.services.pagination import PageRequest
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import naive_utc
from src.app.use_cases.collections import (
    CollectionFilters,
    CreateCollectionCommand,
    CreateCollectionUseCase,
    DeleteCollectionUseCase,
    GetCollectionStatsUseCase,
    GetCollectionUseCase,
    ListCollectionsByClientUseCase,
    ListCollectionsByStatusUseCase,
    ListCollectionsUseCase,
    UpdateCollectionCommand,
    UpdateCollectionUseCase,
)
from src.depends import get_actor, get_unit_of_work
from src.domain.actor import ActorContext
from src.domain.entities import CollectionStatus

router = APIRouter(prefix="/collections", tags=["Collections"])


def page_params(
    page: int = Query(1, ge=1),
    limit: int = Query(
        ApplicationConfig.DEFAULT_PAGE_SIZE, ge=1, le=ApplicationConfig.MAX_PAGE_SIZE
    ),
) -> PageRequest:
    return PageRequest(page=page, limit=limit)


def range_filters(
    client_id: Optional[UUID] = Query(None, alias="clientId"),
    collected_by: Optional[UUID] = Query(None, alias="collectedBy"),
    date_from: Optional[datetime] = Query(None, alias="dateFrom"),
    date_to: Optional[datetime] = Query(None, alias="dateTo"),
) -> CollectionFilters:
    return CollectionFilters(
        client_id=client_id,
        collected_by=collected_by,
        date_from=naive_utc(date_from),
        date_to=naive_utc(date_to),
    )


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_collection(
    request: CreateCollectionCommand,
    actor: ActorContext = Depends(get_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Collection

    Collector or above, for a client assigned to the caller. The code is
    generated when not supplied.
    """
    result = await CreateCollectionUseCase(uow).execute(actor, request)
    return success("Collection created successfully", data=unwrap(result))


@router.get("")
async def list_collections(
    filters: CollectionFilters = Depends(range_filters),
    status: Optional[CollectionStatus] = None,
    search: Optional[str] = None,
    page: PageRequest = Depends(page_params),
    actor: ActorContext = Depends(get_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    filters.status = status
    filters.search = search.strip() if search and search.strip() else None
    result = await ListCollectionsUseCase(uow).execute(actor, filters, page)
    return paginated("Collections retrieved successfully", unwrap(result))


@router.get("/stats")
async def get_collection_stats(
    filters: CollectionFilters = Depends(range_filters),
    actor: ActorContext = Depends(get_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetCollectionStatsUseCase(uow).execute(actor, filters)
    return success("Collection statistics retrieved successfully", data=unwrap(result))


@router.get("/client/{client_id}")
async def list_collections_by_client(
    client_id: UUID,
    page: PageRequest = Depends(page_params),
    actor: ActorContext = Depends(get_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListCollectionsByClientUseCase(uow).execute(
        actor, client_id, CollectionFilters(), page
    )
    return paginated("Client collections retrieved successfully", unwrap(result))


@router.get("/status/{status}")
async def list_collections_by_status(
    status: str,
    page: PageRequest = Depends(page_params),
    actor: ActorContext = Depends(get_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListCollectionsByStatusUseCase(uow).execute(
        actor, status, CollectionFilters(), page
    )
    return paginated("Collections retrieved successfully", unwrap(result))


@router.get("/{collection_id}")
async def get_collection(
    collection_id: UUID,
    actor: ActorContext = Depends(get_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetCollectionUseCase(uow).execute(actor, collection_id)
    return success("Collection retrieved successfully", data=unwrap(result))


@router.put("/{collection_id}")
async def update_collection(
    collection_id: UUID,
    request: UpdateCollectionCommand,
    actor: ActorContext = Depends(get_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateCollectionUseCase(uow).execute(actor, collection_id, request)
    return success("Collection updated successfully", data=unwrap(result))


@router.delete("/{collection_id}")
async def delete_collection(
    collection_id: UUID,
    actor: ActorContext = Depends(get_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    unwrap(await DeleteCollectionUseCase(uow).execute(actor, collection_id))
    return success("Collection deleted successfully")
