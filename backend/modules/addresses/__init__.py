"""
Addresses module.

Owns the shipping and billing addresses attached to users.

Public API:
- IUserAddressService: Interface for address lookups
- Address, UserAddress: Address models
"""

from .interfaces import IUserAddressService
from .models import Address, UserAddress

__all__ = [
    # Interface
    "IUserAddressService",
    # Models
    "Address",
    "UserAddress",
]
