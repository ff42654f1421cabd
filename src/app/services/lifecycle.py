"""
Lifecycle helpers for soft-deletable entities.

Every lifecycle-managed table moves between two states, Active and
SoftDeleted, keyed on ``deleted_at``. These helpers build the column values
for each transition; repositories apply them with a conditional UPDATE so
the state check and the write happen in one statement.
"""

from typing import Any, Dict
from uuid import UUID

from src.domain.base import utc_now


def deletion_values(deleted_by: UUID) -> Dict[str, Any]:
    now = utc_now()
    return {
        "deleted_at": now,
        "deleted_by": deleted_by,
        "is_active": False,
        "updated_at": now,
    }


def restoration_values() -> Dict[str, Any]:
    return {
        "deleted_at": None,
        "deleted_by": None,
        "is_active": True,
        "updated_at": utc_now(),
    }


def touched(values: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of a partial update with updated_at refreshed"""
    return {**values, "updated_at": utc_now()}
