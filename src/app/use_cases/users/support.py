"""
Helpers shared by the user management use cases.
"""

from typing import Iterable, List, Optional
from uuid import UUID

from libs.result import Error
from src.app.services.access_control import ADMIN_ONLY, require_role
from src.app.services.references import organization_names
from src.app.services.unit_of_work import UnitOfWork
from src.domain.actor import ActorContext
from src.domain.entities import User, UserRole
from .dtos import UserView

USER_NOT_FOUND = Error("NOT_FOUND", "User not found")
USER_TAKEN = Error("CONFLICT", "Username or email already exists")


def check_role_grant(actor: ActorContext, role: Optional[UserRole]) -> Optional[Error]:
    """Only admins hand out the admin role"""
    if role == UserRole.admin:
        return require_role(actor, ADMIN_ONLY)
    return None


def check_organization_move(
    actor: ActorContext, organization_id: Optional[UUID]
) -> Optional[Error]:
    """Non-admins may only place users in their own organization"""
    if organization_id is None or actor.role == UserRole.admin:
        return None
    if organization_id != actor.organization_id:
        return Error("FORBIDDEN", "Only admins can assign users to another organization")
    return None


async def validate_client_ids(
    uow: UnitOfWork, organization_id: Optional[UUID], client_ids: Iterable[UUID]
) -> Optional[Error]:
    """Every assigned client must be a live client of the user's organization"""
    requested = set(client_ids)
    if not requested:
        return None
    if organization_id is None:
        return Error(
            "VALIDATION_ERROR", "Clients can only be assigned to a user with an organization"
        )
    live = await uow.clients.get_live_ids(organization_id, requested)
    missing = requested - live
    if missing:
        listed = ", ".join(sorted(str(c) for c in missing))
        return Error(
            "VALIDATION_ERROR",
            f"Clients not found in the user's organization: {listed}",
        )
    return None


def as_client_ids(clients: Iterable[UUID]) -> List[str]:
    """Stored form of a client assignment, duplicates dropped, order kept"""
    return list(dict.fromkeys(str(c) for c in clients))


async def build_views(uow: UnitOfWork, users: List[User]) -> List[UserView]:
    organizations = await organization_names(uow, [u.organization_id for u in users])
    return [UserView.build(u, organizations.get(u.organization_id)) for u in users]


async def build_view(uow: UnitOfWork, user: User) -> UserView:
    return (await build_views(uow, [user]))[0]
