"""
Delete Organization Use Case

Soft deletes an organization. Its clients, collections and users are left
untouched.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.access_control import ADMIN_ONLY, require_role
from src.app.services.unit_of_work import UnitOfWork
from src.domain.actor import ActorContext

logger = logging.getLogger(__name__)


class DeleteOrganizationUseCase:
    """
    Business Rules:
    - Admin only
    - Deleting an already deleted organization is NOT_FOUND
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: ActorContext, organization_id: UUID) -> Result[None]:
        denied = require_role(actor, ADMIN_ONLY)
        if denied:
            return Return.err(denied)

        async with self.uow:
            deleted = await self.uow.organizations.mark_deleted(organization_id, actor.id)
            if not deleted:
                return Return.err(Error("NOT_FOUND", "Organization not found"))
            await self.uow.commit()

        logger.info(f"Organization deleted: {organization_id} by {actor.id}")
        return Return.ok(None)
