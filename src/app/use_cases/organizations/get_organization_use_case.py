"""
Get Organization Use Case
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.access_control import (
    MANAGER_OR_ADMIN,
    check_organization_access,
    require_role,
)
from src.app.services.references import user_names
from src.app.services.unit_of_work import UnitOfWork
from src.domain.actor import ActorContext
from .dtos import OrganizationView


class GetOrganizationUseCase:
    """
    Business Rules:
    - Admin or manager
    - A manager only sees their own organization; any other id is NOT_FOUND
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: ActorContext, organization_id: UUID
    ) -> Result[OrganizationView]:
        denied = require_role(actor, MANAGER_OR_ADMIN)
        if denied:
            return Return.err(denied)

        not_found = Error("NOT_FOUND", "Organization not found")
        if not check_organization_access(actor, organization_id):
            return Return.err(not_found)

        async with self.uow:
            organization = await self.uow.organizations.get_by_id(organization_id)
            if organization is None:
                return Return.err(not_found)

            names = await user_names(self.uow, [organization.created_by])
            return Return.ok(
                OrganizationView.build(organization, names.get(organization.created_by))
            )
