"""
Search Clients Use Case

Case-insensitive substring search over name, alias, code, email, phone and
contact person name.
"""

from uuid import UUID

from libs.result import Error, Result, Return
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


class SearchClientsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: ActorContext, organization_id: UUID, term: str, page: PageRequest
    ) -> Result[Paginated[ClientView]]:
        denied = require_role(actor, SUPERVISOR_OR_ABOVE)
        if denied:
            return Return.err(denied)
        if not check_organization_access(actor, organization_id):
            return Return.err(ORGANIZATION_NOT_FOUND)

        term = (term or "").strip()
        if not term:
            return Return.err(Error("VALIDATION_ERROR", "Search term is required"))

        async with self.uow:
            clients, total = await self.uow.clients.search(
                organization_id, term, page.offset, page.limit
            )
            items = await build_views(self.uow, clients)

        return Return.ok(Paginated(items=items, pagination=build_pagination(page, total)))
