"""
Organization Use Cases

Admin-managed lifecycle of organizations.
"""

from .create_organization_use_case import CreateOrganizationUseCase
from .get_organization_use_case import GetOrganizationUseCase
from .list_organizations_use_case import ListOrganizationsUseCase
from .update_organization_use_case import UpdateOrganizationUseCase
from .delete_organization_use_case import DeleteOrganizationUseCase
from .restore_organization_use_case import RestoreOrganizationUseCase
from .dtos import (
    CreateOrganizationCommand,
    UpdateOrganizationCommand,
    OrganizationAddress,
    OrganizationView,
)

__all__ = [
    # Use Cases
    "CreateOrganizationUseCase",
    "GetOrganizationUseCase",
    "ListOrganizationsUseCase",
    "UpdateOrganizationUseCase",
    "DeleteOrganizationUseCase",
    "RestoreOrganizationUseCase",
    # DTOs - Commands
    "CreateOrganizationCommand",
    "UpdateOrganizationCommand",
    # DTOs - Nested Models
    "OrganizationAddress",
    # DTOs - Responses
    "OrganizationView",
]
