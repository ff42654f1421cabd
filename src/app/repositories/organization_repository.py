from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple
from uuid import UUID

from src.domain.entities import Organization, OrganizationSize


@dataclass
class OrganizationFilters:
    name: Optional[str] = None
    industry: Optional[str] = None
    size: Optional[OrganizationSize] = None
    is_active: Optional[bool] = None
    # Restricts the listing to a single organization (non-admin callers)
    organization_id: Optional[UUID] = None


class IOrganizationRepository(ABC):
    """Organization repository interface - application layer"""

    @abstractmethod
    async def get_by_id(
        self, organization_id: UUID, include_deleted: bool = False
    ) -> Optional[Organization]:
        """Get organization by ID (live rows only unless include_deleted)"""
        pass

    @abstractmethod
    async def get_by_ids(self, organization_ids: Iterable[UUID]) -> List[Organization]:
        """Get organizations by IDs, deleted rows included"""
        pass

    @abstractmethod
    async def get_live_by_email(
        self, email: str, exclude_id: Optional[UUID] = None
    ) -> Optional[Organization]:
        """Get a non-deleted organization by email"""
        pass

    @abstractmethod
    async def list(
        self, filters: OrganizationFilters, offset: int, limit: int
    ) -> Tuple[List[Organization], int]:
        """List live organizations, newest first, with total count"""
        pass

    @abstractmethod
    async def create(self, organization: Organization) -> Organization:
        """Create a new organization"""
        pass

    @abstractmethod
    async def update_fields(self, organization_id: UUID, values: Dict[str, Any]) -> bool:
        """Conditionally update a live organization; False if no row matched"""
        pass

    @abstractmethod
    async def mark_deleted(self, organization_id: UUID, deleted_by: UUID) -> bool:
        """Soft delete a live organization; False if no row matched"""
        pass

    @abstractmethod
    async def mark_restored(self, organization_id: UUID) -> bool:
        """Restore a soft-deleted organization; False if no row matched"""
        pass
