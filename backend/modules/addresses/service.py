"""
User address service implementation.
"""

from shared.repository import IQueryRepository

from .interfaces import IUserAddressService
from .models import UserAddress


class UserAddressService(IUserAddressService):
    """Reads user addresses from the address store."""

    def __init__(self, repository: IQueryRepository[UserAddress]):
        self._repository = repository

    async def get_all_user_addresses(self, user_id: str) -> list[UserAddress]:
        return await self._repository.find({"user_id": user_id})
