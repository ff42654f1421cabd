"""
Create Client Use Case

Registers a laundry customer inside an organization.
"""

import logging
from uuid import UUID

from libs.result import Result, Return
from src.app.services.access_control import (
    SUPERVISOR_OR_ABOVE,
    check_organization_access,
    require_role,
)
from src.app.services.unit_of_work import UniqueViolation, UnitOfWork
from src.app.use_cases.common import stored_value
from src.domain.actor import ActorContext
from src.domain.entities import Client
from .dtos import ClientView, CreateClientCommand
from .support import DUPLICATE_CLIENT, ORGANIZATION_NOT_FOUND, build_view, find_duplicate

logger = logging.getLogger(__name__)


class CreateClientUseCase:
    """
    Use case for creating a client.

    Business Rules:
    - Supervisor or above
    - Non-admins only inside their own organization (NOT_FOUND otherwise)
    - Email, and client code when present, unique among the organization's
      live clients
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: ActorContext, organization_id: UUID, command: CreateClientCommand
    ) -> Result[ClientView]:
        denied = require_role(actor, SUPERVISOR_OR_ABOVE)
        if denied:
            return Return.err(denied)
        if not check_organization_access(actor, organization_id):
            return Return.err(ORGANIZATION_NOT_FOUND)

        async with self.uow:
            if await self.uow.organizations.get_by_id(organization_id) is None:
                return Return.err(ORGANIZATION_NOT_FOUND)

            duplicate = await find_duplicate(
                self.uow, organization_id, command.email, command.client_code
            )
            if duplicate:
                return Return.err(duplicate)

            client = Client(
                organization_id=organization_id,
                name=command.name,
                alias_name=command.alias_name,
                client_code=command.client_code,
                email=command.email,
                phone=command.phone,
                alternate_phone=command.alternate_phone,
                address=stored_value(command.address),
                client_type=command.client_type,
                contact_person=stored_value(command.contact_person),
                billing_address=stored_value(command.billing_address),
                tax_info=stored_value(command.tax_info),
                payment_terms=command.payment_terms,
                credit_limit=command.credit_limit,
                notes=command.notes,
                preferred_pickup_time=command.preferred_pickup_time,
                preferred_delivery_time=command.preferred_delivery_time,
                created_by=actor.id,
            )
            try:
                client = await self.uow.clients.create(client)
            except UniqueViolation:
                return Return.err(DUPLICATE_CLIENT)

            await self.uow.commit()
            logger.info(f"Client created: {client.id} in organization {organization_id}")
            return Return.ok(await build_view(self.uow, client))
