from abc import ABC, abstractmethod

from src.app.repositories.client_repository import IClientRepository
from src.app.repositories.collection_repository import ICollectionRepository
from src.app.repositories.organization_repository import IOrganizationRepository
from src.app.repositories.user_repository import IUserRepository


class UniqueViolation(Exception):
    """Raised by repositories when a write hits a unique constraint in the store"""


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    organizations: IOrganizationRepository
    clients: IClientRepository
    collections: ICollectionRepository
    users: IUserRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
