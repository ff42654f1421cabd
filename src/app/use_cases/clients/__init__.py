"""
Client Use Cases

Organization-scoped client management.
"""

from .create_client_use_case import CreateClientUseCase
from .get_client_use_case import GetClientUseCase
from .list_clients_use_case import ListClientsUseCase
from .search_clients_use_case import SearchClientsUseCase
from .update_client_use_case import UpdateClientUseCase
from .delete_client_use_case import DeleteClientUseCase
from .restore_client_use_case import RestoreClientUseCase
from .dtos import (
    CreateClientCommand,
    UpdateClientCommand,
    ClientAddress,
    BillingAddress,
    ContactPerson,
    TaxInfo,
    ClientView,
)

__all__ = [
    # Use Cases
    "CreateClientUseCase",
    "GetClientUseCase",
    "ListClientsUseCase",
    "SearchClientsUseCase",
    "UpdateClientUseCase",
    "DeleteClientUseCase",
    "RestoreClientUseCase",
    # DTOs - Commands
    "CreateClientCommand",
    "UpdateClientCommand",
    # DTOs - Nested Models
    "ClientAddress",
    "BillingAddress",
    "ContactPerson",
    "TaxInfo",
    # DTOs - Responses
    "ClientView",
]
