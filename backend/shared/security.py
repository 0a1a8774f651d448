"""
Credential hashing.

Passwords are stored as bcrypt hashes. The cost factor is fixed by
configuration; hashing runs in a worker thread so the event loop keeps
serving other requests while bcrypt does its work.
"""

import asyncio
from typing import Optional, Protocol, runtime_checkable

import bcrypt


@runtime_checkable
class IPasswordHasher(Protocol):
    """One-way transform of a plaintext secret into a storable hash."""

    async def hash(self, password: str) -> str:
        """Return a salted hash of the password."""
        ...

    async def verify(self, password: str, hashed: Optional[str]) -> bool:
        """Return True if the password matches the stored hash."""
        ...


class BcryptPasswordHasher(IPasswordHasher):
    """bcrypt implementation of IPasswordHasher."""

    def __init__(self, rounds: int = 10):
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    async def hash(self, password: str) -> str:
        return await asyncio.to_thread(self._hash_sync, password)

    async def verify(self, password: str, hashed: Optional[str]) -> bool:
        if not hashed:
            return False
        return await asyncio.to_thread(self._verify_sync, password, hashed)

    def _hash_sync(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(password.encode(), salt).decode()

    @staticmethod
    def _verify_sync(password: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode(), hashed.encode())
        except ValueError:
            # Malformed or non-bcrypt hash
            return False
