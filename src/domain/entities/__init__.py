"""
Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    ClientType,
    CollectionStatus,
    OrganizationSize,
    UserRole,
)

# Export all entities
from .organization import Organization
from .client import Client
from .user import User
from .collection import Collection
from .collection_code_counter import CollectionCodeCounter

__all__ = [
    # Enums
    "ClientType",
    "CollectionStatus",
    "OrganizationSize",
    "UserRole",
    # Entities
    "Organization",
    "Client",
    "User",
    "Collection",
    "CollectionCodeCounter",
]
