from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.client_repository import ClientRepository
from src.adapter.repositories.collection_repository import CollectionRepository
from src.adapter.repositories.organization_repository import OrganizationRepository
from src.adapter.repositories.user_repository import UserRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.organizations = OrganizationRepository(self.session)
        self.clients = ClientRepository(self.session)
        self.collections = CollectionRepository(self.session)
        self.users = UserRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
