"""
Create User Use Case

Creates an account inside an organization.
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.access_control import MANAGER_OR_ADMIN, require_role
from src.app.services.passwords import hash_password
from src.app.services.unit_of_work import UniqueViolation, UnitOfWork
from src.domain.actor import ActorContext
from src.domain.entities import User, UserRole
from .dtos import CreateUserCommand, UserView
from .support import (
    USER_TAKEN,
    as_client_ids,
    build_view,
    check_organization_move,
    check_role_grant,
    validate_client_ids,
)

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """
    Use case for creating a user.

    Business Rules:
    - Manager or admin
    - Username and email unique across all users
    - Managers create users in their own organization; admins pick any
      live organization
    - Only admins create admins
    - Assigned clients must be live clients of the user's organization
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: ActorContext, command: CreateUserCommand
    ) -> Result[UserView]:
        denied = require_role(actor, MANAGER_OR_ADMIN) or check_role_grant(
            actor, command.role
        )
        if denied:
            return Return.err(denied)
        denied = check_organization_move(actor, command.organization_id)
        if denied:
            return Return.err(denied)

        organization_id = command.organization_id
        if organization_id is None and actor.role != UserRole.admin:
            organization_id = actor.organization_id

        async with self.uow:
            if organization_id is not None:
                if await self.uow.organizations.get_by_id(organization_id) is None:
                    return Return.err(Error("NOT_FOUND", "Organization not found"))

            invalid = await validate_client_ids(
                self.uow, organization_id, command.clients or []
            )
            if invalid:
                return Return.err(invalid)

            if await self.uow.users.find_conflicting(command.username, command.email):
                return Return.err(USER_TAKEN)

            user = User(
                username=command.username,
                email=command.email,
                password_hash=hash_password(command.password),
                first_name=command.first_name,
                last_name=command.last_name,
                profile_picture=command.profile_picture,
                role=command.role or UserRole.user,
                organization_id=organization_id,
                client_ids=as_client_ids(command.clients or []),
            )
            try:
                user = await self.uow.users.create(user)
            except UniqueViolation:
                return Return.err(USER_TAKEN)

            await self.uow.commit()
            logger.info(f"User created: {user.username} ({user.role.value}) by {actor.id}")
            return Return.ok(await build_view(self.uow, user))
