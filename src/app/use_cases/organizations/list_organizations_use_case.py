"""
List Organizations Use Case
"""

from dataclasses import replace

from libs.result import Result, Return
from src.app.repositories.organization_repository import OrganizationFilters
from src.app.services.access_control import MANAGER_OR_ADMIN, require_role
from src.app.services.pagination import PageRequest, build_pagination
from src.app.services.references import user_names
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import Paginated
from src.domain.actor import ActorContext
from src.domain.entities import UserRole
from .dtos import OrganizationView


class ListOrganizationsUseCase:
    """
    Business Rules:
    - Admin sees every live organization
    - Manager sees only their own organization
    - Newest first
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: ActorContext, filters: OrganizationFilters, page: PageRequest
    ) -> Result[Paginated[OrganizationView]]:
        denied = require_role(actor, MANAGER_OR_ADMIN)
        if denied:
            return Return.err(denied)

        if actor.role != UserRole.admin:
            if actor.organization_id is None:
                return Return.ok(Paginated(items=[], pagination=build_pagination(page, 0)))
            filters = replace(filters, organization_id=actor.organization_id)

        async with self.uow:
            organizations, total = await self.uow.organizations.list(
                filters, page.offset, page.limit
            )
            names = await user_names(self.uow, [o.created_by for o in organizations])
            items = [OrganizationView.build(o, names.get(o.created_by)) for o in organizations]

        return Return.ok(Paginated(items=items, pagination=build_pagination(page, total)))
