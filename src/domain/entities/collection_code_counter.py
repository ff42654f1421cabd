"""
CollectionCodeCounter Entity

Per-organization, per-day sequence source for collection codes.
"""

from uuid import UUID

from sqlmodel import Field, SQLModel


class CollectionCodeCounter(SQLModel, table=True):
    """
    One row per (organization, day). ``last_value`` is the highest sequence
    handed out for that day and only ever moves forward through an atomic
    increment.
    """

    __tablename__ = "collection_code_counters"

    organization_id: UUID = Field(foreign_key="organizations.id", primary_key=True)
    day: str = Field(max_length=8, primary_key=True)  # YYYYMMDD
    last_value: int = Field(default=0, ge=0)
