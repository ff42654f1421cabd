"""
Get Client Use Case
"""

from uuid import UUID

from libs.result import Result, Return
from src.app.services.access_control import (
    SUPERVISOR_OR_ABOVE,
    check_organization_access,
    require_role,
)
from src.app.services.unit_of_work import UnitOfWork
from src.domain.actor import ActorContext
from .dtos import ClientView
from .support import CLIENT_NOT_FOUND, build_view


class GetClientUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: ActorContext, organization_id: UUID, client_id: UUID
    ) -> Result[ClientView]:
        denied = require_role(actor, SUPERVISOR_OR_ABOVE)
        if denied:
            return Return.err(denied)
        if not check_organization_access(actor, organization_id):
            return Return.err(CLIENT_NOT_FOUND)

        async with self.uow:
            client = await self.uow.clients.get_by_id(client_id, organization_id)
            if client is None:
                return Return.err(CLIENT_NOT_FOUND)
            return Return.ok(await build_view(self.uow, client))
