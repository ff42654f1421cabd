"""
Delete Client Use Case
"""

import logging
from uuid import UUID

from libs.result import Result, Return
from src.app.services.access_control import (
    MANAGER_OR_ADMIN,
    check_organization_access,
    require_role,
)
from src.app.services.unit_of_work import UnitOfWork
from src.domain.actor import ActorContext
from .support import CLIENT_NOT_FOUND

logger = logging.getLogger(__name__)


class DeleteClientUseCase:
    """
    Business Rules:
    - Manager or above, inside the actor's organization
    - Soft delete; a second delete is NOT_FOUND
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: ActorContext, organization_id: UUID, client_id: UUID
    ) -> Result[None]:
        denied = require_role(actor, MANAGER_OR_ADMIN)
        if denied:
            return Return.err(denied)
        if not check_organization_access(actor, organization_id):
            return Return.err(CLIENT_NOT_FOUND)

        async with self.uow:
            deleted = await self.uow.clients.mark_deleted(
                client_id, organization_id, actor.id
            )
            if not deleted:
                return Return.err(CLIENT_NOT_FOUND)
            await self.uow.commit()

        logger.info(f"Client deleted: {client_id} by {actor.id}")
        return Return.ok(None)
