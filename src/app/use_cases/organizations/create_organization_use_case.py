"""
Create Organization Use Case

Registers a new organization (tenant boundary).
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.access_control import ADMIN_ONLY, require_role
from src.app.services.references import user_names
from src.app.services.unit_of_work import UniqueViolation, UnitOfWork
from src.domain.actor import ActorContext
from src.domain.entities import Organization
from src.app.use_cases.common import stored_value
from .dtos import CreateOrganizationCommand, OrganizationView

logger = logging.getLogger(__name__)

EMAIL_TAKEN = Error("CONFLICT", "Organization with this email already exists")


class CreateOrganizationUseCase:
    """
    Use case for creating an organization.

    Business Rules:
    - Admin only
    - Email unique among non-deleted organizations
    - Creator recorded as created_by
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: ActorContext, command: CreateOrganizationCommand
    ) -> Result[OrganizationView]:
        denied = require_role(actor, ADMIN_ONLY)
        if denied:
            return Return.err(denied)

        async with self.uow:
            if await self.uow.organizations.get_live_by_email(command.email):
                return Return.err(EMAIL_TAKEN)

            organization = Organization(
                name=command.name,
                description=command.description,
                email=command.email,
                phone=command.phone,
                website=command.website,
                address=stored_value(command.address),
                industry=command.industry,
                size=command.size,
                logo=command.logo,
                created_by=actor.id,
            )
            try:
                organization = await self.uow.organizations.create(organization)
            except UniqueViolation:
                return Return.err(EMAIL_TAKEN)

            await self.uow.commit()
            logger.info(f"Organization created: {organization.id} by {actor.id}")

            names = await user_names(self.uow, [organization.created_by])
            return Return.ok(
                OrganizationView.build(organization, names.get(organization.created_by))
            )
