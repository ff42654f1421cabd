from typing import Any, Dict, Iterable, List, Optional, Tuple
from uuid import UUID

from sqlalchemy import func, or_
from sqlmodel import select

from src.adapter.repositories.base import SoftDeleteRepository
from src.app.repositories.user_repository import IUserRepository, UserFilters
from src.domain.entities import User


class UserRepository(SoftDeleteRepository, IUserRepository):
    """User repository implementation using SQLModel"""

    model = User

    async def get_by_id(
        self, user_id: UUID, include_deleted: bool = False
    ) -> Optional[User]:
        """Get user by ID"""
        stmt = (
            select(User)
            .where(User.id == user_id)
            .execution_options(populate_existing=True)
        )
        if not include_deleted:
            stmt = stmt.where(User.deleted_at.is_(None))
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_ids(self, user_ids: Iterable[UUID]) -> List[User]:
        ids = list(set(user_ids))
        if not ids:
            return []
        result = await self.session.exec(select(User).where(User.id.in_(ids)))
        return list(result.all())

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        stmt = select(User).where(User.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def find_conflicting(
        self,
        username: Optional[str],
        email: Optional[str],
        exclude_id: Optional[UUID] = None,
    ) -> Optional[User]:
        clauses = []
        if username:
            clauses.append(User.username == username)
        if email:
            clauses.append(User.email == email)
        if not clauses:
            return None
        stmt = select(User).where(or_(*clauses))
        if exclude_id is not None:
            stmt = stmt.where(User.id != exclude_id)
        result = await self.session.exec(stmt)
        return result.first()

    async def list(
        self, filters: UserFilters, offset: int, limit: int
    ) -> Tuple[List[User], int]:
        conditions = [User.deleted_at.is_(None)]
        if filters.role is not None:
            conditions.append(User.role == filters.role)
        if filters.is_active is not None:
            conditions.append(User.is_active == filters.is_active)
        if filters.organization_id is not None:
            conditions.append(User.organization_id == filters.organization_id)

        stmt = (
            select(User)
            .where(*conditions)
            .order_by(User.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        total = await self.session.scalar(
            select(func.count()).select_from(User).where(*conditions)
        )
        return list(result.all()), total or 0

    async def create(self, user: User) -> User:
        """Create a new user"""
        return await self._add(user)

    async def update(self, user: User) -> User:
        """Update existing user"""
        return await self._add(user)

    async def update_fields(self, user_id: UUID, values: Dict[str, Any]) -> bool:
        return await self._update_live([User.id == user_id], values)

    async def mark_deleted(self, user_id: UUID, deleted_by: UUID) -> bool:
        return await self._mark_deleted([User.id == user_id], deleted_by)
