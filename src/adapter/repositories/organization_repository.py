from typing import Any, Dict, Iterable, List, Optional, Tuple
from uuid import UUID

from sqlalchemy import func
from sqlmodel import select

from src.adapter.repositories.base import SoftDeleteRepository, ilike_contains
from src.app.repositories.organization_repository import (
    IOrganizationRepository,
    OrganizationFilters,
)
from src.domain.entities import Organization


class OrganizationRepository(SoftDeleteRepository, IOrganizationRepository):
    """Organization repository implementation using SQLModel"""

    model = Organization

    async def get_by_id(
        self, organization_id: UUID, include_deleted: bool = False
    ) -> Optional[Organization]:
        """Get organization by ID"""
        stmt = (
            select(Organization)
            .where(Organization.id == organization_id)
            .execution_options(populate_existing=True)
        )
        if not include_deleted:
            stmt = stmt.where(Organization.deleted_at.is_(None))
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_ids(self, organization_ids: Iterable[UUID]) -> List[Organization]:
        ids = list(set(organization_ids))
        if not ids:
            return []
        result = await self.session.exec(
            select(Organization).where(Organization.id.in_(ids))
        )
        return list(result.all())

    async def get_live_by_email(
        self, email: str, exclude_id: Optional[UUID] = None
    ) -> Optional[Organization]:
        stmt = select(Organization).where(
            Organization.email == email, Organization.deleted_at.is_(None)
        )
        if exclude_id is not None:
            stmt = stmt.where(Organization.id != exclude_id)
        result = await self.session.exec(stmt)
        return result.first()

    async def list(
        self, filters: OrganizationFilters, offset: int, limit: int
    ) -> Tuple[List[Organization], int]:
        conditions = [Organization.deleted_at.is_(None)]
        if filters.organization_id is not None:
            conditions.append(Organization.id == filters.organization_id)
        if filters.name:
            conditions.append(ilike_contains(Organization.name, filters.name))
        if filters.industry:
            conditions.append(ilike_contains(Organization.industry, filters.industry))
        if filters.size is not None:
            conditions.append(Organization.size == filters.size)
        if filters.is_active is not None:
            conditions.append(Organization.is_active == filters.is_active)

        stmt = (
            select(Organization)
            .where(*conditions)
            .order_by(Organization.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        total = await self.session.scalar(
            select(func.count()).select_from(Organization).where(*conditions)
        )
        return list(result.all()), total or 0

    async def create(self, organization: Organization) -> Organization:
        """Create a new organization"""
        return await self._add(organization)

    async def update_fields(self, organization_id: UUID, values: Dict[str, Any]) -> bool:
        return await self._update_live([Organization.id == organization_id], values)

    async def mark_deleted(self, organization_id: UUID, deleted_by: UUID) -> bool:
        return await self._mark_deleted([Organization.id == organization_id], deleted_by)

    async def mark_restored(self, organization_id: UUID) -> bool:
        return await self._mark_restored([Organization.id == organization_id])
