from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple
from uuid import UUID

from src.domain.entities import User, UserRole


@dataclass
class UserFilters:
    role: Optional[UserRole] = None
    is_active: Optional[bool] = None
    organization_id: Optional[UUID] = None


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_id(
        self, user_id: UUID, include_deleted: bool = False
    ) -> Optional[User]:
        """Get user by ID (live rows only unless include_deleted)"""
        pass

    @abstractmethod
    async def get_by_ids(self, user_ids: Iterable[UUID]) -> List[User]:
        """Get users by IDs, deleted rows included"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        pass

    @abstractmethod
    async def find_conflicting(
        self,
        username: Optional[str],
        email: Optional[str],
        exclude_id: Optional[UUID] = None,
    ) -> Optional[User]:
        """Get any user already holding the username or email"""
        pass

    @abstractmethod
    async def list(
        self, filters: UserFilters, offset: int, limit: int
    ) -> Tuple[List[User], int]:
        """List live users, newest first, with total count"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user"""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Persist changes made to a loaded user"""
        pass

    @abstractmethod
    async def update_fields(self, user_id: UUID, values: Dict[str, Any]) -> bool:
        """Conditionally update a live user; False if no row matched"""
        pass

    @abstractmethod
    async def mark_deleted(self, user_id: UUID, deleted_by: UUID) -> bool:
        """Soft delete a live user; False if no row matched"""
        pass
