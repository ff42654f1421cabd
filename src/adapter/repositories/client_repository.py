from typing import Any, Dict, Iterable, List, Optional, Set, Tuple
from uuid import UUID

from sqlalchemy import func, or_
from sqlmodel import select

from src.adapter.repositories.base import SoftDeleteRepository, ilike_contains
from src.app.repositories.client_repository import ClientFilters, IClientRepository
from src.domain.entities import Client


class ClientRepository(SoftDeleteRepository, IClientRepository):
    """Client repository implementation using SQLModel"""

    model = Client

    async def get_by_id(
        self, client_id: UUID, organization_id: UUID, include_deleted: bool = False
    ) -> Optional[Client]:
        """Get client by ID inside an organization"""
        stmt = (
            select(Client)
            .where(Client.id == client_id, Client.organization_id == organization_id)
            .execution_options(populate_existing=True)
        )
        if not include_deleted:
            stmt = stmt.where(Client.deleted_at.is_(None))
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_ids(self, client_ids: Iterable[UUID]) -> List[Client]:
        ids = list(set(client_ids))
        if not ids:
            return []
        result = await self.session.exec(select(Client).where(Client.id.in_(ids)))
        return list(result.all())

    async def get_live_by_email(
        self, organization_id: UUID, email: str, exclude_id: Optional[UUID] = None
    ) -> Optional[Client]:
        stmt = select(Client).where(
            Client.organization_id == organization_id,
            Client.email == email,
            Client.deleted_at.is_(None),
        )
        if exclude_id is not None:
            stmt = stmt.where(Client.id != exclude_id)
        result = await self.session.exec(stmt)
        return result.first()

    async def get_live_by_code(
        self, organization_id: UUID, client_code: str, exclude_id: Optional[UUID] = None
    ) -> Optional[Client]:
        stmt = select(Client).where(
            Client.organization_id == organization_id,
            Client.client_code == client_code,
            Client.deleted_at.is_(None),
        )
        if exclude_id is not None:
            stmt = stmt.where(Client.id != exclude_id)
        result = await self.session.exec(stmt)
        return result.first()

    async def get_live_ids(
        self, organization_id: UUID, client_ids: Iterable[UUID]
    ) -> Set[UUID]:
        ids = list(set(client_ids))
        if not ids:
            return set()
        result = await self.session.exec(
            select(Client.id).where(
                Client.id.in_(ids),
                Client.organization_id == organization_id,
                Client.deleted_at.is_(None),
            )
        )
        return set(result.all())

    async def list(
        self, organization_id: UUID, filters: ClientFilters, offset: int, limit: int
    ) -> Tuple[List[Client], int]:
        conditions = [
            Client.organization_id == organization_id,
            Client.deleted_at.is_(None),
        ]
        if filters.name:
            conditions.append(ilike_contains(Client.name, filters.name))
        if filters.email:
            conditions.append(ilike_contains(Client.email, filters.email))
        if filters.phone:
            conditions.append(ilike_contains(Client.phone, filters.phone))
        if filters.client_type is not None:
            conditions.append(Client.client_type == filters.client_type)
        if filters.is_active is not None:
            conditions.append(Client.is_active == filters.is_active)
        if filters.city:
            conditions.append(
                ilike_contains(Client.address["city"].as_string(), filters.city)
            )
        if filters.state:
            conditions.append(
                ilike_contains(Client.address["state"].as_string(), filters.state)
            )
        return await self._page(conditions, offset, limit)

    async def search(
        self, organization_id: UUID, term: str, offset: int, limit: int
    ) -> Tuple[List[Client], int]:
        conditions = [
            Client.organization_id == organization_id,
            Client.deleted_at.is_(None),
            or_(
                ilike_contains(Client.name, term),
                ilike_contains(Client.alias_name, term),
                ilike_contains(Client.client_code, term),
                ilike_contains(Client.email, term),
                ilike_contains(Client.phone, term),
                ilike_contains(Client.contact_person["name"].as_string(), term),
            ),
        ]
        return await self._page(conditions, offset, limit)

    async def _page(self, conditions, offset: int, limit: int) -> Tuple[List[Client], int]:
        stmt = (
            select(Client)
            .where(*conditions)
            .order_by(Client.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        total = await self.session.scalar(
            select(func.count()).select_from(Client).where(*conditions)
        )
        return list(result.all()), total or 0

    async def create(self, client: Client) -> Client:
        """Create a new client"""
        return await self._add(client)

    async def update_fields(
        self, client_id: UUID, organization_id: UUID, values: Dict[str, Any]
    ) -> bool:
        return await self._update_live(
            [Client.id == client_id, Client.organization_id == organization_id], values
        )

    async def mark_deleted(
        self, client_id: UUID, organization_id: UUID, deleted_by: UUID
    ) -> bool:
        return await self._mark_deleted(
            [Client.id == client_id, Client.organization_id == organization_id],
            deleted_by,
        )

    async def mark_restored(self, client_id: UUID, organization_id: UUID) -> bool:
        return await self._mark_restored(
            [Client.id == client_id, Client.organization_id == organization_id]
        )
