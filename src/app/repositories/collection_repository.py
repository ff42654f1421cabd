from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple
from uuid import UUID

from src.domain.entities import Collection, CollectionStatus


@dataclass
class CollectionVisibility:
    """Rows visible to a non-privileged actor: authored by them OR for an assigned client"""

    user_id: UUID
    client_ids: Tuple[str, ...] = ()


@dataclass
class CollectionQuery:
    """
    Predicate shared by listing and statistics.

    Explicit filters are ANDed; ``visibility`` (when set) adds the
    (collected_by == user OR client_id IN assigned) restriction.
    """

    organization_id: UUID
    status: Optional[CollectionStatus] = None
    client_id: Optional[UUID] = None
    collected_by: Optional[UUID] = None
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None
    search: Optional[str] = None
    visibility: Optional[CollectionVisibility] = None


class ICollectionRepository(ABC):
    """Collection repository interface - application layer"""

    @abstractmethod
    async def get_by_id(
        self, collection_id: UUID, organization_id: UUID
    ) -> Optional[Collection]:
        """Get a live collection by ID inside an organization"""
        pass

    @abstractmethod
    async def list(
        self, query: CollectionQuery, offset: int, limit: int
    ) -> Tuple[List[Collection], int]:
        """List matching collections ordered by date_time DESC, with total count"""
        pass

    @abstractmethod
    async def count_by_status(self, query: CollectionQuery) -> Dict[str, int]:
        """Count matching collections grouped by status"""
        pass

    @abstractmethod
    async def create(self, collection: Collection) -> Collection:
        """Create a new collection"""
        pass

    @abstractmethod
    async def update_fields(
        self, collection_id: UUID, organization_id: UUID, values: Dict[str, Any]
    ) -> bool:
        """Conditionally update a live collection; False if no row matched"""
        pass

    @abstractmethod
    async def mark_deleted(
        self, collection_id: UUID, organization_id: UUID, deleted_by: UUID
    ) -> bool:
        """Soft delete a live collection; False if no row matched"""
        pass

    @abstractmethod
    async def reserve_code_sequence(
        self, organization_id: UUID, day: str, code_prefix: str
    ) -> int:
        """
        Atomically reserve the next collection code sequence for an
        organization and day (YYYYMMDD). ``code_prefix`` is the full code
        prefix for that day, used to seed a new counter from existing codes.
        """
        pass

    @abstractmethod
    async def code_exists(self, organization_id: UUID, collection_code: str) -> bool:
        pass

    @abstractmethod
    async def advance_code_sequence(
        self, organization_id: UUID, day: str, at_least: int
    ) -> None:
        """Raise an existing day counter to at least ``at_least``"""
        pass

    @abstractmethod
    async def sync_code_sequence(
        self, organization_id: UUID, day: str, code_prefix: str
    ) -> None:
        """Raise an existing day counter past the highest stored code with the prefix"""
        pass
