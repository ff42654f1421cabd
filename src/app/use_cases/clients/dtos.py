"""
Client Use Case DTOs (Data Transfer Objects)

Commands carry validated input into the use cases; views are what the API
returns. Field names are camelCase on the wire.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import EmailStr, Field, field_validator

from src.app.use_cases.common import CamelModel
from src.domain.entities import Client, ClientType


# ============================================================================
# Nested Models
# ============================================================================


class ClientAddress(CamelModel):
    street: str = Field(..., max_length=200)
    city: str = Field(..., max_length=100)
    state: str = Field(..., max_length=100)
    country: str = Field(..., max_length=100)
    zip_code: str = Field(..., max_length=20)
    landmark: Optional[str] = Field(default=None, max_length=200)


class BillingAddress(CamelModel):
    street: Optional[str] = Field(default=None, max_length=200)
    city: Optional[str] = Field(default=None, max_length=100)
    state: Optional[str] = Field(default=None, max_length=100)
    country: Optional[str] = Field(default=None, max_length=100)
    zip_code: Optional[str] = Field(default=None, max_length=20)


class ContactPerson(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    designation: Optional[str] = Field(default=None, max_length=100)
    phone: Optional[str] = Field(default=None, max_length=20)
    email: Optional[EmailStr] = None


class TaxInfo(CamelModel):
    gst_number: Optional[str] = Field(default=None, max_length=20)
    pan_number: Optional[str] = Field(default=None, max_length=20)


# ============================================================================
# Command DTOs
# ============================================================================


class _ClientFields(CamelModel):
    @field_validator("email", check_fields=False)
    @classmethod
    def lowercase_email(cls, value: Optional[str]) -> Optional[str]:
        return value.strip().lower() if value else value

    @field_validator("client_code", check_fields=False)
    @classmethod
    def uppercase_code(cls, value: Optional[str]) -> Optional[str]:
        return value.strip().upper() if value else value


class CreateClientCommand(_ClientFields):
    name: str = Field(..., min_length=2, max_length=100)
    alias_name: Optional[str] = Field(default=None, max_length=50)
    client_code: Optional[str] = Field(default=None, max_length=20)
    email: EmailStr
    phone: str = Field(..., min_length=5, max_length=20)
    alternate_phone: Optional[str] = Field(default=None, max_length=20)
    address: ClientAddress
    client_type: ClientType
    contact_person: Optional[ContactPerson] = None
    billing_address: Optional[BillingAddress] = None
    tax_info: Optional[TaxInfo] = None
    payment_terms: Optional[str] = Field(default=None, max_length=100)
    credit_limit: Optional[float] = Field(default=None, ge=0)
    notes: Optional[str] = Field(default=None, max_length=1000)
    preferred_pickup_time: Optional[str] = Field(default=None, max_length=50)
    preferred_delivery_time: Optional[str] = Field(default=None, max_length=50)


class UpdateClientCommand(_ClientFields):
    """Partial update: only fields present in the request are changed"""

    name: Optional[str] = Field(default=None, min_length=2, max_length=100)
    alias_name: Optional[str] = Field(default=None, max_length=50)
    client_code: Optional[str] = Field(default=None, max_length=20)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, min_length=5, max_length=20)
    alternate_phone: Optional[str] = Field(default=None, max_length=20)
    address: Optional[ClientAddress] = None
    client_type: Optional[ClientType] = None
    contact_person: Optional[ContactPerson] = None
    billing_address: Optional[BillingAddress] = None
    tax_info: Optional[TaxInfo] = None
    payment_terms: Optional[str] = Field(default=None, max_length=100)
    credit_limit: Optional[float] = Field(default=None, ge=0)
    notes: Optional[str] = Field(default=None, max_length=1000)
    preferred_pickup_time: Optional[str] = Field(default=None, max_length=50)
    preferred_delivery_time: Optional[str] = Field(default=None, max_length=50)
    is_active: Optional[bool] = None


# ============================================================================
# Response DTOs
# ============================================================================


class ClientView(CamelModel):
    id: UUID
    organization_id: UUID
    organization_name: Optional[str] = None
    name: str
    alias_name: Optional[str] = None
    client_code: Optional[str] = None
    email: str
    phone: str
    alternate_phone: Optional[str] = None
    address: dict
    client_type: ClientType
    contact_person: Optional[dict] = None
    billing_address: Optional[dict] = None
    tax_info: Optional[dict] = None
    payment_terms: Optional[str] = None
    credit_limit: Optional[float] = None
    notes: Optional[str] = None
    preferred_pickup_time: Optional[str] = None
    preferred_delivery_time: Optional[str] = None
    is_active: bool
    is_deleted: bool
    deleted_at: Optional[datetime] = None
    deleted_by: Optional[UUID] = None
    created_by: Optional[UUID] = None
    created_by_name: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def build(
        cls,
        client: Client,
        organization_name: Optional[str] = None,
        created_by_name: Optional[str] = None,
    ) -> "ClientView":
        view = cls.model_validate(client)
        view.organization_name = organization_name
        view.created_by_name = created_by_name
        return view
