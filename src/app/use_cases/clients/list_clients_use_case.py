"""
List Clients Use Case
"""

from uuid import UUID

from libs.result import Result, Return
from src.app.repositories.client_repository import ClientFilters
from src.app.services.access_control import (
    SUPERVISOR_OR_ABOVE,
    check_organization_access,
    require_role,
)
from src.app.services.pagination import PageRequest, build_pagination
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import Paginated
from src.domain.actor import ActorContext
from .dtos import ClientView
from .support import ORGANIZATION_NOT_FOUND, build_views


class ListClientsUseCase:
    """
    Business Rules:
    - Supervisor or above, inside the actor's organization
    - Live clients only, newest first
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor: ActorContext,
        organization_id: UUID,
        filters: ClientFilters,
        page: PageRequest,
    ) -> Result[Paginated[ClientView]]:
        denied = require_role(actor, SUPERVISOR_OR_ABOVE)
        if denied:
            return Return.err(denied)
        if not check_organization_access(actor, organization_id):
            return Return.err(ORGANIZATION_NOT_FOUND)

        async with self.uow:
            clients, total = await self.uow.clients.list(
                organization_id, filters, page.offset, page.limit
            )
            items = await build_views(self.uow, clients)

        return Return.ok(Paginated(items=items, pagination=build_pagination(page, total)))
