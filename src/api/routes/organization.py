from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from config import ApplicationConfig
from src.api.error import unwrap
from src.api.schemas import paginated, success
from src.app.repositories.organization_repository import OrganizationFilters
from src.app.services.pagination import PageRequest
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.organizations import (
    CreateOrganizationCommand,
    CreateOrganizationUseCase,
    DeleteOrganizationUseCase,
    GetOrganizationUseCase,
    ListOrganizationsUseCase,
    RestoreOrganizationUseCase,
    UpdateOrganizationCommand,
    UpdateOrganizationUseCase,
)
from src.depends import get_actor, get_unit_of_work
from src.domain.actor import ActorContext
from src.domain.entities import OrganizationSize

router = APIRouter(prefix="/organizations", tags=["Organizations"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_organization(
    request: CreateOrganizationCommand,
    actor: ActorContext = Depends(get_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Create an organization (admin only)"""
    result = await CreateOrganizationUseCase(uow).execute(actor, request)
    return success("Organization created successfully", data=unwrap(result))


@router.get("")
async def list_organizations(
    page: int = Query(1, ge=1),
    limit: int = Query(ApplicationConfig.DEFAULT_PAGE_SIZE, ge=1, le=ApplicationConfig.MAX_PAGE_SIZE),
    name: Optional[str] = None,
    industry: Optional[str] = None,
    size: Optional[OrganizationSize] = None,
    is_active: Optional[bool] = Query(None, alias="isActive"),
    actor: ActorContext = Depends(get_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List organizations (admin: all, manager: own)"""
    filters = OrganizationFilters(
        name=name, industry=industry, size=size, is_active=is_active
    )
    result = await ListOrganizationsUseCase(uow).execute(
        actor, filters, PageRequest(page=page, limit=limit)
    )
    return paginated("Organizations retrieved successfully", unwrap(result))


@router.get("/{organization_id}")
async def get_organization(
    organization_id: UUID,
    actor: ActorContext = Depends(get_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetOrganizationUseCase(uow).execute(actor, organization_id)
    return success("Organization retrieved successfully", data=unwrap(result))


@router.put("/{organization_id}")
async def update_organization(
    organization_id: UUID,
    request: UpdateOrganizationCommand,
    actor: ActorContext = Depends(get_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateOrganizationUseCase(uow).execute(actor, organization_id, request)
    return success("Organization updated successfully", data=unwrap(result))


@router.delete("/{organization_id}")
async def delete_organization(
    organization_id: UUID,
    actor: ActorContext = Depends(get_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    unwrap(await DeleteOrganizationUseCase(uow).execute(actor, organization_id))
    return success("Organization deleted successfully")


@router.patch("/{organization_id}/restore")
async def restore_organization(
    organization_id: UUID,
    actor: ActorContext = Depends(get_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await RestoreOrganizationUseCase(uow).execute(actor, organization_id)
    return success("Organization restored successfully", data=unwrap(result))
