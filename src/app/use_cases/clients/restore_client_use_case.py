"""
Restore Client Use Case
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.access_control import (
    MANAGER_OR_ADMIN,
    check_organization_access,
    require_role,
)
from src.app.services.unit_of_work import UniqueViolation, UnitOfWork
from src.domain.actor import ActorContext
from .dtos import ClientView
from .support import CLIENT_NOT_FOUND, DUPLICATE_CLIENT, build_view, find_duplicate

logger = logging.getLogger(__name__)


class RestoreClientUseCase:
    """
    Business Rules:
    - Manager or above, inside the actor's organization
    - Only a soft deleted client can be restored (NOT_FOUND otherwise)
    - CONFLICT when a live client took the email or code meanwhile
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: ActorContext, organization_id: UUID, client_id: UUID
    ) -> Result[ClientView]:
        denied = require_role(actor, MANAGER_OR_ADMIN)
        if denied:
            return Return.err(denied)

        not_found = Error("NOT_FOUND", "Deleted client not found")
        if not check_organization_access(actor, organization_id):
            return Return.err(not_found)

        async with self.uow:
            client = await self.uow.clients.get_by_id(
                client_id, organization_id, include_deleted=True
            )
            if client is None or not client.is_deleted:
                return Return.err(not_found)

            duplicate = await find_duplicate(
                self.uow,
                organization_id,
                client.email,
                client.client_code,
                exclude_id=client_id,
            )
            if duplicate:
                return Return.err(duplicate)

            try:
                restored = await self.uow.clients.mark_restored(client_id, organization_id)
            except UniqueViolation:
                return Return.err(DUPLICATE_CLIENT)
            if not restored:
                return Return.err(not_found)
            await self.uow.commit()
            logger.info(f"Client restored: {client_id} by {actor.id}")

            client = await self.uow.clients.get_by_id(client_id, organization_id)
            if client is None:
                return Return.err(CLIENT_NOT_FOUND)
            return Return.ok(await build_view(self.uow, client))
