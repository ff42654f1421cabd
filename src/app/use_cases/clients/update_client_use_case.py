"""
Update Client Use Case
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
from src.app.use_cases.common import provided_fields
from src.domain.actor import ActorContext
from .dtos import ClientView, UpdateClientCommand
from .support import CLIENT_NOT_FOUND, DUPLICATE_CLIENT, build_view, find_duplicate

logger = logging.getLogger(__name__)


class UpdateClientUseCase:
    """
    Business Rules:
    - Supervisor or above, inside the actor's organization
    - Partial update; email/code uniqueness re-checked when they change
    - The write only applies to a live client; a concurrent delete wins
      and this update reports NOT_FOUND
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor: ActorContext,
        organization_id: UUID,
        client_id: UUID,
        command: UpdateClientCommand,
    ) -> Result[ClientView]:
        denied = require_role(actor, SUPERVISOR_OR_ABOVE)
        if denied:
            return Return.err(denied)
        if not check_organization_access(actor, organization_id):
            return Return.err(CLIENT_NOT_FOUND)

        values = provided_fields(command)

        async with self.uow:
            current = await self.uow.clients.get_by_id(client_id, organization_id)
            if current is None:
                return Return.err(CLIENT_NOT_FOUND)

            new_email = values.get("email")
            new_code = values.get("client_code")
            duplicate = await find_duplicate(
                self.uow,
                organization_id,
                new_email if new_email != current.email else None,
                new_code if new_code != current.client_code else None,
                exclude_id=client_id,
            )
            if duplicate:
                return Return.err(duplicate)

            if values:
                try:
                    updated = await self.uow.clients.update_fields(
                        client_id, organization_id, values
                    )
                except UniqueViolation:
                    return Return.err(DUPLICATE_CLIENT)
                if not updated:
                    return Return.err(CLIENT_NOT_FOUND)
                await self.uow.commit()
                logger.info(f"Client updated: {client_id} by {actor.id}")

            client = await self.uow.clients.get_by_id(client_id, organization_id)
            if client is None:
                return Return.err(CLIENT_NOT_FOUND)
            return Return.ok(await build_view(self.uow, client))
