"""
Domain Enums

Closed value sets validated once at the API boundary.
"""

from enum import Enum


class UserRole(str, Enum):
    """User role, lowest to highest privilege"""

    user = "user"
    collector = "collector"
    supervisor = "supervisor"
    manager = "manager"
    admin = "admin"


class CollectionStatus(str, Enum):
    """Collection pipeline status"""

    pending = "pending"
    collected = "collected"
    in_transit = "in_transit"
    washing = "washing"
    packing = "packing"
    delivered = "delivered"
    cancelled = "cancelled"


class ClientType(str, Enum):
    individual = "individual"
    business = "business"
    hotel = "hotel"
    restaurant = "restaurant"
    hospital = "hospital"
    other = "other"


class OrganizationSize(str, Enum):
    startup = "startup"
    small = "small"
    medium = "medium"
    large = "large"
    enterprise = "enterprise"
