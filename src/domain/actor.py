"""
Actor Context

The authenticated caller, resolved once per request from the verified token
and a user lookup, then passed explicitly into every use case.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple
from uuid import UUID

from src.domain.entities import User, UserRole


@dataclass(frozen=True)
class ActorContext:
    id: UUID
    role: UserRole
    organization_id: Optional[UUID] = None
    client_ids: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_user(cls, user: User) -> "ActorContext":
        return cls(
            id=user.id,
            role=UserRole(user.role),
            organization_id=user.organization_id,
            client_ids=tuple(str(c) for c in (user.client_ids or [])),
        )
