"""
Restore Organization Use Case
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.access_control import ADMIN_ONLY, require_role
from src.app.services.references import user_names
from src.app.services.unit_of_work import UniqueViolation, UnitOfWork
from src.domain.actor import ActorContext
from .create_organization_use_case import EMAIL_TAKEN
from .dtos import OrganizationView

logger = logging.getLogger(__name__)


class RestoreOrganizationUseCase:
    """
    Business Rules:
    - Admin only
    - Only a soft deleted organization can be restored (NOT_FOUND otherwise)
    - CONFLICT when another live organization took the email meanwhile
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: ActorContext, organization_id: UUID
    ) -> Result[OrganizationView]:
        denied = require_role(actor, ADMIN_ONLY)
        if denied:
            return Return.err(denied)

        not_found = Error("NOT_FOUND", "Deleted organization not found")

        async with self.uow:
            organization = await self.uow.organizations.get_by_id(
                organization_id, include_deleted=True
            )
            if organization is None or not organization.is_deleted:
                return Return.err(not_found)

            if await self.uow.organizations.get_live_by_email(
                organization.email, exclude_id=organization_id
            ):
                return Return.err(EMAIL_TAKEN)

            try:
                restored = await self.uow.organizations.mark_restored(organization_id)
            except UniqueViolation:
                return Return.err(EMAIL_TAKEN)
            if not restored:
                return Return.err(not_found)
            await self.uow.commit()
            logger.info(f"Organization restored: {organization_id} by {actor.id}")

            organization = await self.uow.organizations.get_by_id(organization_id)
            names = await user_names(self.uow, [organization.created_by])
            return Return.ok(
                OrganizationView.build(organization, names.get(organization.created_by))
            )
