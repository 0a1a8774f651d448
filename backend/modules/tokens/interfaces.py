"""
Token module interface.

The users module depends on ITokenService to mint and check verification
and password-reset tokens without knowing how they are signed.
"""

from datetime import timedelta
from typing import Protocol, Union, runtime_checkable

from .models import TokenClaims


TokenLifetime = Union[str, timedelta]


@runtime_checkable
class ITokenService(Protocol):
    """
    Interface for signed, time-bounded tokens.
    """

    async def create_token(self, subject_id: str, email: str, ttl: TokenLifetime) -> str:
        """
        Mint a token binding a subject and an email.

        Args:
            subject_id: User ID the token is issued for
            email: Email address the token is issued for
            ttl: Lifetime, either a timedelta or an expression such as "14d" or "30m"

        Returns:
            Opaque signed token string

        Raises:
            InvalidTtlError: If ttl is not a valid lifetime expression
        """
        ...

    async def validate_token(self, token: str, email: str) -> bool:
        """
        Check a presented token against the expected email.

        Returns:
            True if the token is well-formed, correctly signed, unexpired
            and was issued for this email; False otherwise
        """
        ...

    async def decode_token(self, token: str) -> TokenClaims:
        """
        Decode and verify a token.

        Raises:
            InvalidTokenError: If the token is malformed or badly signed
            ExpiredTokenError: If the token has expired
        """
        ...
