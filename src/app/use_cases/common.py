"""
Shared DTO building blocks.

All DTOs serialize with camelCase aliases (``collectionCode``, ``hasNext``)
and accept either alias or field name on input.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class PaginationMeta(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool


class Paginated(CamelModel, Generic[T]):
    items: List[T]
    pagination: PaginationMeta


def _plain(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, exclude_none=True)
    if isinstance(value, list):
        return [_plain(item) for item in value]
    return value


def stored_value(value: Any) -> Any:
    """Nested DTOs are stored as camelCase JSON documents"""
    return _plain(value)


def provided_fields(command: BaseModel) -> Dict[str, Any]:
    """
    Fields the caller actually sent, ready to hand to a repository update.

    An explicit null is treated the same as an omitted field.
    """
    values = {}
    for name in command.model_fields_set:
        value = getattr(command, name)
        if value is None:
            continue
        values[name] = _plain(value)
    return values


def naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Timestamps are stored as naive UTC; aware inputs are converted"""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
