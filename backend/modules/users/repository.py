"""
User and account repositories for database access.
"""

from shared.repository import SupabaseRepository
from .models import UserRecord, AccountRecord


class UserRepository(SupabaseRepository[UserRecord]):
    """
    Repository for the users table.

    Note: This repository does NOT enforce email uniqueness. The users
    table carries a unique constraint on email.
    """

    table_name = "users"
    model = UserRecord


class AccountRepository(SupabaseRepository[AccountRecord]):
    """Repository for the accounts table."""

    table_name = "accounts"
    model = AccountRecord
