from typing import Any, Dict, List, Optional, Tuple
from uuid import UUID

from sqlalchemy import func, or_, update
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlmodel import select

from src.adapter.repositories.base import SoftDeleteRepository, ilike_contains
from src.app.repositories.collection_repository import (
    CollectionQuery,
    ICollectionRepository,
)
from src.domain.entities import Collection, CollectionCodeCounter

SEQUENCE_WIDTH = 4

_UPSERT_BY_DIALECT = {
    "sqlite": sqlite_insert,
    "postgresql": postgresql_insert,
}


class CollectionRepository(SoftDeleteRepository, ICollectionRepository):
    """Collection repository implementation using SQLModel"""

    model = Collection

    async def get_by_id(
        self, collection_id: UUID, organization_id: UUID
    ) -> Optional[Collection]:
        """Get a live collection by ID inside an organization"""
        stmt = (
            select(Collection)
            .where(
                Collection.id == collection_id,
                Collection.organization_id == organization_id,
                Collection.deleted_at.is_(None),
            )
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    def _conditions(self, query: CollectionQuery) -> list:
        conditions = [
            Collection.organization_id == query.organization_id,
            Collection.deleted_at.is_(None),
        ]
        if query.status is not None:
            conditions.append(Collection.status == query.status)
        if query.client_id is not None:
            conditions.append(Collection.client_id == query.client_id)
        if query.collected_by is not None:
            conditions.append(Collection.collected_by == query.collected_by)
        if query.date_from is not None:
            conditions.append(Collection.date_time >= query.date_from)
        if query.date_to is not None:
            conditions.append(Collection.date_time <= query.date_to)
        if query.search:
            conditions.append(
                or_(
                    ilike_contains(Collection.collection_code, query.search),
                    ilike_contains(Collection.notes, query.search),
                )
            )
        if query.visibility is not None:
            assigned = [UUID(c) for c in query.visibility.client_ids]
            visible = [Collection.collected_by == query.visibility.user_id]
            if assigned:
                visible.append(Collection.client_id.in_(assigned))
            conditions.append(or_(*visible))
        return conditions

    async def list(
        self, query: CollectionQuery, offset: int, limit: int
    ) -> Tuple[List[Collection], int]:
        conditions = self._conditions(query)
        stmt = (
            select(Collection)
            .where(*conditions)
            .order_by(Collection.date_time.desc(), Collection.collection_code.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        total = await self.session.scalar(
            select(func.count()).select_from(Collection).where(*conditions)
        )
        return list(result.all()), total or 0

    async def count_by_status(self, query: CollectionQuery) -> Dict[str, int]:
        stmt = (
            select(Collection.status, func.count())
            .where(*self._conditions(query))
            .group_by(Collection.status)
        )
        result = await self.session.exec(stmt)
        return {
            getattr(status, "value", status): count for status, count in result.all()
        }

    async def create(self, collection: Collection) -> Collection:
        """Create a new collection"""
        return await self._add(collection)

    async def update_fields(
        self, collection_id: UUID, organization_id: UUID, values: Dict[str, Any]
    ) -> bool:
        return await self._update_live(
            [
                Collection.id == collection_id,
                Collection.organization_id == organization_id,
            ],
            values,
        )

    async def mark_deleted(
        self, collection_id: UUID, organization_id: UUID, deleted_by: UUID
    ) -> bool:
        return await self._mark_deleted(
            [
                Collection.id == collection_id,
                Collection.organization_id == organization_id,
            ],
            deleted_by,
        )

    async def reserve_code_sequence(
        self, organization_id: UUID, day: str, code_prefix: str
    ) -> int:
        """
        Reserve the next sequence for (organization, day).

        The common path is a single UPDATE ... RETURNING on an existing
        counter row, which the store serializes per row. The first code of a
        day seeds the counter from codes already stored for that prefix and
        inserts it with an upsert, so two first-of-day requests cannot both
        get the same value.
        """
        stmt = (
            update(CollectionCodeCounter)
            .where(
                CollectionCodeCounter.organization_id == organization_id,
                CollectionCodeCounter.day == day,
            )
            .values(last_value=CollectionCodeCounter.last_value + 1)
            .returning(CollectionCodeCounter.last_value)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        reserved = result.scalar_one_or_none()
        if reserved is not None:
            return reserved

        seed = await self._highest_stored_sequence(organization_id, code_prefix)
        insert = _UPSERT_BY_DIALECT[self.session.get_bind().dialect.name]
        stmt = (
            insert(CollectionCodeCounter)
            .values(organization_id=organization_id, day=day, last_value=seed + 1)
            .on_conflict_do_update(
                index_elements=["organization_id", "day"],
                set_={"last_value": CollectionCodeCounter.last_value + 1},
            )
            .returning(CollectionCodeCounter.last_value)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def code_exists(self, organization_id: UUID, collection_code: str) -> bool:
        """Whether any collection of the organization, deleted or not, holds the code"""
        stmt = select(Collection.id).where(
            Collection.organization_id == organization_id,
            Collection.collection_code == collection_code,
        )
        result = await self.session.exec(stmt)
        return result.first() is not None

    async def advance_code_sequence(
        self, organization_id: UUID, day: str, at_least: int
    ) -> None:
        """Move an existing counter forward to ``at_least``; never moves it back"""
        stmt = (
            update(CollectionCodeCounter)
            .where(
                CollectionCodeCounter.organization_id == organization_id,
                CollectionCodeCounter.day == day,
                CollectionCodeCounter.last_value < at_least,
            )
            .values(last_value=at_least)
            .execution_options(synchronize_session=False)
        )
        await self.session.execute(stmt)

    async def sync_code_sequence(
        self, organization_id: UUID, day: str, code_prefix: str
    ) -> None:
        """Move the counter past every code already stored under the prefix"""
        highest = await self._highest_stored_sequence(organization_id, code_prefix)
        await self.advance_code_sequence(organization_id, day, highest)

    async def _highest_stored_sequence(self, organization_id: UUID, code_prefix: str) -> int:
        # Fixed-width zero padding makes the lexicographic max the numeric max
        stmt = select(func.max(Collection.collection_code)).where(
            Collection.organization_id == organization_id,
            Collection.collection_code.startswith(code_prefix, autoescape=True),
            func.length(Collection.collection_code) == len(code_prefix) + SEQUENCE_WIDTH,
        )
        highest = await self.session.scalar(stmt)
        if not highest:
            return 0
        suffix = highest[len(code_prefix):]
        return int(suffix) if suffix.isdigit() else 0
