"""
Tokens module.

Mints and validates signed, time-bounded tokens used for email
verification and password reset.

Public API:
- ITokenService: Interface for token operations
- TokenService: JWT implementation
- TokenClaims: Decoded token payload
- parse_ttl: Lifetime expression parser ("14d", "30m", ...)
"""

from .interfaces import ITokenService, TokenLifetime
from .models import TokenClaims
from .service import TokenService, parse_ttl
from .exceptions import (
    TokenError,
    InvalidTokenError,
    ExpiredTokenError,
    InvalidTtlError,
)

__all__ = [
    # Interface
    "ITokenService",
    "TokenLifetime",
    # Implementation
    "TokenService",
    "parse_ttl",
    # Models
    "TokenClaims",
    # Exceptions
    "TokenError",
    "InvalidTokenError",
    "ExpiredTokenError",
    "InvalidTtlError",
]
