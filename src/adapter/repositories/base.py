from typing import Any, Dict

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.services.lifecycle import deletion_values, restoration_values, touched
from src.app.services.unit_of_work import UniqueViolation


LIKE_ESCAPE = "\\"


def like_pattern(term: str) -> str:
    """Substring pattern for LIKE with the term's own % and _ matched literally"""
    escaped = (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def ilike_contains(column, term: str):
    """Case-insensitive substring match of a user-supplied term"""
    return column.ilike(like_pattern(term), escape=LIKE_ESCAPE)


class SoftDeleteRepository:
    """
    Shared plumbing for repositories of lifecycle-managed tables.

    All state transitions are single conditional UPDATE statements whose
    WHERE clause repeats the precondition (live / deleted, in scope). A
    rowcount of zero means the precondition no longer holds.
    """

    model: Any = None

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _add(self, entity):
        self.session.add(entity)
        await self._flush()
        await self.session.refresh(entity)
        return entity

    async def _flush(self):
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise UniqueViolation(str(exc.orig)) from exc

    async def _conditional_update(self, conditions, values: Dict[str, Any]) -> bool:
        stmt = (
            update(self.model)
            .where(*conditions)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise UniqueViolation(str(exc.orig)) from exc
        return result.rowcount > 0

    async def _update_live(self, conditions, values: Dict[str, Any]) -> bool:
        return await self._conditional_update(
            [*conditions, self.model.deleted_at.is_(None)], touched(values)
        )

    async def _mark_deleted(self, conditions, deleted_by) -> bool:
        return await self._conditional_update(
            [*conditions, self.model.deleted_at.is_(None)], deletion_values(deleted_by)
        )

    async def _mark_restored(self, conditions) -> bool:
        return await self._conditional_update(
            [*conditions, self.model.deleted_at.is_not(None)], restoration_values()
        )
