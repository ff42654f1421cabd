"""
Update User Use Case
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.access_control import (
    MANAGER_OR_ADMIN,
    can_access_user,
    can_manage_users,
    require_role,
)
from src.app.services.unit_of_work import UniqueViolation, UnitOfWork
from src.app.use_cases.common import provided_fields
from src.domain.actor import ActorContext
from .dtos import RESTRICTED_FIELDS, UpdateUserCommand, UserView
from .support import (
    USER_NOT_FOUND,
    USER_TAKEN,
    as_client_ids,
    build_view,
    check_organization_move,
    check_role_grant,
    validate_client_ids,
)

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """
    Use case for updating a user.

    Business Rules:
    - A user may edit their own profile fields
    - Editing someone else needs manager or admin, inside the actor's
      organization unless admin
    - role, organization, clients and is_active need manager or admin,
      even on one's own account
    - Username and email stay unique
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: ActorContext, user_id: UUID, command: UpdateUserCommand
    ) -> Result[UserView]:
        values = provided_fields(command)

        if user_id != actor.id:
            denied = require_role(actor, MANAGER_OR_ADMIN)
            if denied:
                return Return.err(denied)
        if any(field in values for field in RESTRICTED_FIELDS) and not can_manage_users(actor):
            return Return.err(
                Error(
                    "FORBIDDEN",
                    "Only admin and manager can update user roles and organization assignments",
                )
            )
        denied = check_role_grant(actor, values.get("role")) or check_organization_move(
            actor, values.get("organization_id")
        )
        if denied:
            return Return.err(denied)

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None or not can_access_user(actor, user):
                return Return.err(USER_NOT_FOUND)

            organization_id = values.get("organization_id", user.organization_id)
            if "organization_id" in values:
                if await self.uow.organizations.get_by_id(organization_id) is None:
                    return Return.err(Error("NOT_FOUND", "Organization not found"))

            if "clients" in values:
                invalid = await validate_client_ids(
                    self.uow, organization_id, values["clients"]
                )
                if invalid:
                    return Return.err(invalid)
                values["client_ids"] = as_client_ids(values.pop("clients"))

            username = values.get("username")
            email = values.get("email")
            if (username and username != user.username) or (email and email != user.email):
                if await self.uow.users.find_conflicting(username, email, exclude_id=user_id):
                    return Return.err(USER_TAKEN)

            if values:
                try:
                    updated = await self.uow.users.update_fields(user_id, values)
                except UniqueViolation:
                    return Return.err(USER_TAKEN)
                if not updated:
                    return Return.err(USER_NOT_FOUND)
                await self.uow.commit()
                logger.info(f"User updated: {user_id} by {actor.id}")

            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(USER_NOT_FOUND)
            return Return.ok(await build_view(self.uow, user))
