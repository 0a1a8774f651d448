"""
Address module interface.

The users module only needs to read a user's addresses to compose the
public user view.
"""

from typing import Protocol, runtime_checkable

from .models import UserAddress


@runtime_checkable
class IUserAddressService(Protocol):
    """Interface for user address lookups."""

    async def get_all_user_addresses(self, user_id: str) -> list[UserAddress]:
        """
        Get every address owned by a user.

        Args:
            user_id: Owning user ID

        Returns:
            The user's addresses in store order (empty if none)
        """
        ...
