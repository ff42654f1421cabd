"""
Organization Entity

The tenant boundary owning clients, collections and users.
"""

from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import text
from sqlmodel import JSON, Column, Field, Index

from src.domain.base import LifecycleFields
from .enums import OrganizationSize


class Organization(LifecycleFields, table=True):
    """
    Organization entity.

    Business Rules:
    - Created, updated, deleted and restored by admins only
    - Email unique among non-deleted organizations
    - Soft deleted; restore clears the delete markers
    """

    __tablename__ = "organizations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    email: str = Field(max_length=255, index=True)
    phone: Optional[str] = Field(default=None, max_length=30)
    website: Optional[str] = Field(default=None, max_length=255)
    address: Optional[dict] = Field(default=None, sa_column=Column(JSON))
    industry: Optional[str] = Field(default=None, max_length=100)
    size: Optional[OrganizationSize] = Field(default=None)
    logo: Optional[str] = Field(default=None, max_length=500)

    created_by: Optional[UUID] = Field(default=None)

    __table_args__ = (
        Index(
            "uq_organization_email_live",
            "email",
            unique=True,
            sqlite_where=text("deleted_at IS NULL"),
            postgresql_where=text("deleted_at IS NULL"),
        ),
    )
