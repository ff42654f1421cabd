"""
Access Control

Pure functions deciding whether an actor may perform an action. Nothing here
touches the store; callers load the target first and pass it in.

Role hierarchy (highest first): admin > manager > supervisor > collector > user.
"""

from typing import Iterable, Optional, Tuple
from uuid import UUID

from libs.result import Error
from src.domain.actor import ActorContext
from src.domain.entities import Collection, User, UserRole

ADMIN_ONLY: Tuple[UserRole, ...] = (UserRole.admin,)
MANAGER_OR_ADMIN: Tuple[UserRole, ...] = (UserRole.manager, UserRole.admin)
SUPERVISOR_OR_ABOVE: Tuple[UserRole, ...] = (
    UserRole.supervisor,
    UserRole.manager,
    UserRole.admin,
)
COLLECTOR_OR_ABOVE: Tuple[UserRole, ...] = (
    UserRole.collector,
    UserRole.supervisor,
    UserRole.manager,
    UserRole.admin,
)

PRIVILEGED_ROLES = MANAGER_OR_ADMIN


def has_role(actor: ActorContext, allowed: Iterable[UserRole]) -> bool:
    return actor.role in tuple(allowed)


def require_role(actor: ActorContext, allowed: Iterable[UserRole]) -> Optional[Error]:
    """Return a FORBIDDEN error naming the required roles, or None when allowed"""
    allowed = tuple(allowed)
    if has_role(actor, allowed):
        return None
    required = ", ".join(role.value for role in allowed)
    return Error(
        "FORBIDDEN",
        f"Access denied. Required role(s): {required}. Your role: {actor.role.value}",
    )


def is_privileged(actor: ActorContext) -> bool:
    """Admins and managers see every collection of their organization"""
    return has_role(actor, PRIVILEGED_ROLES)


def check_organization_access(actor: ActorContext, organization_id: UUID) -> bool:
    """Admins bypass organization scope; everyone else must belong to it"""
    if actor.role == UserRole.admin:
        return True
    return actor.organization_id is not None and actor.organization_id == organization_id


def is_assigned_client(actor: ActorContext, client_id) -> bool:
    """Exact string membership of the client id in the actor's assignment"""
    return str(client_id) in actor.client_ids


def can_create_collection(actor: ActorContext, client_id) -> bool:
    """
    Collector or above AND the client is assigned to the actor.

    The assignment check applies to every role, admins and managers included.
    """
    return has_role(actor, COLLECTOR_OR_ABOVE) and is_assigned_client(actor, client_id)


def can_view_collection(actor: ActorContext, collection: Collection) -> bool:
    if is_privileged(actor):
        return True
    if collection.collected_by == actor.id:
        return True
    return is_assigned_client(actor, collection.client_id)


can_update_collection = can_view_collection


def can_delete_collection(actor: ActorContext, collection: Collection) -> bool:
    """
    The collection's client must be assigned to the actor (no role bypass),
    and the actor must be a manager/admin or its author. Client assignment
    alone is not enough.
    """
    if not is_assigned_client(actor, collection.client_id):
        return False
    return is_privileged(actor) or collection.collected_by == actor.id


def can_manage_users(actor: ActorContext) -> bool:
    return has_role(actor, MANAGER_OR_ADMIN)


def can_access_user(actor: ActorContext, user: User) -> bool:
    """Admins reach every user; everyone else only users of their organization"""
    if actor.role == UserRole.admin:
        return True
    return actor.organization_id is not None and user.organization_id == actor.organization_id
