"""
Update Organization Use Case
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.access_control import ADMIN_ONLY, require_role
from src.app.services.references import user_names
from src.app.services.unit_of_work import UniqueViolation, UnitOfWork
from src.app.use_cases.common import provided_fields
from src.domain.actor import ActorContext
from .create_organization_use_case import EMAIL_TAKEN
from .dtos import OrganizationView, UpdateOrganizationCommand

logger = logging.getLogger(__name__)


class UpdateOrganizationUseCase:
    """
    Business Rules:
    - Admin only
    - Partial update; email uniqueness re-checked when the email changes
    - Deleted organizations cannot be updated (NOT_FOUND)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor: ActorContext,
        organization_id: UUID,
        command: UpdateOrganizationCommand,
    ) -> Result[OrganizationView]:
        denied = require_role(actor, ADMIN_ONLY)
        if denied:
            return Return.err(denied)

        not_found = Error("NOT_FOUND", "Organization not found")
        values = provided_fields(command)

        async with self.uow:
            current = await self.uow.organizations.get_by_id(organization_id)
            if current is None:
                return Return.err(not_found)

            if "email" in values and values["email"] != current.email:
                taken = await self.uow.organizations.get_live_by_email(
                    values["email"], exclude_id=organization_id
                )
                if taken:
                    return Return.err(EMAIL_TAKEN)

            if values:
                try:
                    updated = await self.uow.organizations.update_fields(
                        organization_id, values
                    )
                except UniqueViolation:
                    return Return.err(EMAIL_TAKEN)
                if not updated:
                    return Return.err(not_found)
                await self.uow.commit()
                logger.info(f"Organization updated: {organization_id} by {actor.id}")

            organization = await self.uow.organizations.get_by_id(organization_id)
            if organization is None:
                return Return.err(not_found)
            names = await user_names(self.uow, [organization.created_by])
            return Return.ok(
                OrganizationView.build(organization, names.get(organization.created_by))
            )
