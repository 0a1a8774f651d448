"""
User address repository for database access.
"""

from shared.repository import SupabaseRepository
from .models import UserAddress


class UserAddressRepository(SupabaseRepository[UserAddress]):
    """Repository for the user_addresses table."""

    table_name = "user_addresses"
    model = UserAddress
