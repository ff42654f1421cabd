from datetime import UTC, datetime
from typing import Optional
from uuid import UUID

from sqlmodel import DateTime, Field, SQLModel


def utc_now() -> datetime:
    """Naive UTC timestamp, the format every DateTime column stores."""
    return datetime.now(UTC).replace(tzinfo=None)


class LifecycleFields(SQLModel):
    """
    Soft delete and audit columns shared by every lifecycle-managed table.

    ``deleted_at`` is the only soft-delete marker: a row is live exactly when
    it is NULL. ``is_active`` is a business flag that lifecycle transitions
    also maintain.
    """

    is_active: bool = Field(default=True)
    deleted_at: Optional[datetime] = Field(default=None, index=True, sa_type=DateTime)
    deleted_by: Optional[UUID] = Field(default=None)

    # A mixin cannot share one Column object between tables, so sa_type and not sa_column
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
