"""
Client Entity

A laundry-service customer belonging to exactly one organization.
"""

from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import text
from sqlmodel import JSON, Column, Field, Index

from src.domain.base import LifecycleFields
from .enums import ClientType


class Client(LifecycleFields, table=True):
    """
    Client entity.

    Business Rules:
    - (email, organization_id) unique among non-deleted clients
    - (client_code, organization_id) unique among non-deleted clients
      when a code is present
    - Managed by supervisors and above inside their own organization
    """

    __tablename__ = "clients"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    organization_id: UUID = Field(foreign_key="organizations.id", index=True)

    name: str = Field(max_length=100, index=True)
    alias_name: Optional[str] = Field(default=None, max_length=100)
    client_code: Optional[str] = Field(default=None, max_length=20)
    email: str = Field(max_length=255)
    phone: str = Field(max_length=20)
    alternate_phone: Optional[str] = Field(default=None, max_length=20)

    address: dict = Field(default_factory=dict, sa_column=Column(JSON))
    client_type: ClientType = Field(index=True)
    contact_person: Optional[dict] = Field(default=None, sa_column=Column(JSON))
    billing_address: Optional[dict] = Field(default=None, sa_column=Column(JSON))
    tax_info: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    payment_terms: Optional[str] = Field(default=None, max_length=100)
    credit_limit: Optional[float] = Field(default=None, ge=0)
    notes: Optional[str] = Field(default=None, max_length=1000)
    preferred_pickup_time: Optional[str] = Field(default=None, max_length=50)
    preferred_delivery_time: Optional[str] = Field(default=None, max_length=50)

    created_by: Optional[UUID] = Field(default=None, index=True)

    __table_args__ = (
        Index(
            "uq_client_org_email_live",
            "organization_id",
            "email",
            unique=True,
            sqlite_where=text("deleted_at IS NULL"),
            postgresql_where=text("deleted_at IS NULL"),
        ),
        Index(
            "uq_client_org_code_live",
            "organization_id",
            "client_code",
            unique=True,
            sqlite_where=text("deleted_at IS NULL AND client_code IS NOT NULL"),
            postgresql_where=text("deleted_at IS NULL AND client_code IS NOT NULL"),
        ),
        Index("idx_client_org_live", "organization_id", "deleted_at", "is_active"),
    )
