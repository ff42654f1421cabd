from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple
from uuid import UUID

from src.domain.entities import Client, ClientType


@dataclass
class ClientFilters:
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    client_type: Optional[ClientType] = None
    is_active: Optional[bool] = None
    city: Optional[str] = None
    state: Optional[str] = None


class IClientRepository(ABC):
    """Client repository interface - application layer"""

    @abstractmethod
    async def get_by_id(
        self, client_id: UUID, organization_id: UUID, include_deleted: bool = False
    ) -> Optional[Client]:
        """Get client by ID inside an organization"""
        pass

    @abstractmethod
    async def get_by_ids(self, client_ids: Iterable[UUID]) -> List[Client]:
        """Get clients by IDs, deleted rows included"""
        pass

    @abstractmethod
    async def get_live_by_email(
        self, organization_id: UUID, email: str, exclude_id: Optional[UUID] = None
    ) -> Optional[Client]:
        """Get a non-deleted client of the organization by email"""
        pass

    @abstractmethod
    async def get_live_by_code(
        self, organization_id: UUID, client_code: str, exclude_id: Optional[UUID] = None
    ) -> Optional[Client]:
        """Get a non-deleted client of the organization by client code"""
        pass

    @abstractmethod
    async def get_live_ids(self, organization_id: UUID, client_ids: Iterable[UUID]) -> Set[UUID]:
        """Return the subset of IDs that are live clients of the organization"""
        pass

    @abstractmethod
    async def list(
        self, organization_id: UUID, filters: ClientFilters, offset: int, limit: int
    ) -> Tuple[List[Client], int]:
        """List live clients of an organization, newest first"""
        pass

    @abstractmethod
    async def search(
        self, organization_id: UUID, term: str, offset: int, limit: int
    ) -> Tuple[List[Client], int]:
        """Case-insensitive search across the client's identifying fields"""
        pass

    @abstractmethod
    async def create(self, client: Client) -> Client:
        """Create a new client"""
        pass

    @abstractmethod
    async def update_fields(
        self, client_id: UUID, organization_id: UUID, values: Dict[str, Any]
    ) -> bool:
        """Conditionally update a live client; False if no row matched"""
        pass

    @abstractmethod
    async def mark_deleted(
        self, client_id: UUID, organization_id: UUID, deleted_by: UUID
    ) -> bool:
        """Soft delete a live client; False if no row matched"""
        pass

    @abstractmethod
    async def mark_restored(self, client_id: UUID, organization_id: UUID) -> bool:
        """Restore a soft-deleted client; False if no row matched"""
        pass
