from enum import Enum


class UserRole(str, Enum):
    """Marketplace roles: sellers own products, admins search wider, clients browse."""

    SELLER = "seller"
    ADMIN = "admin"
    CLIENT = "client"
