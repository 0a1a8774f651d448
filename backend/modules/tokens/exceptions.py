"""
Token module exceptions.

Token validation itself reports failure with a boolean; these exceptions
are raised by decode_token and by TTL parsing.
"""

from shared.exceptions import BadRequestError, ServerError


class TokenError(BadRequestError):
    """Base exception for token-related errors."""

    pass


class InvalidTokenError(TokenError):
    """Raised when a token is malformed or its signature does not match."""

    def __init__(self, message: str = "Token is invalid."):
        super().__init__(message, user_message="Token is invalid.", code="INVALID_TOKEN")


class ExpiredTokenError(TokenError):
    """Raised when a token has expired."""

    def __init__(self, message: str = "Token has expired."):
        super().__init__(message, user_message="Token is invalid.", code="TOKEN_EXPIRED")


class InvalidTtlError(ServerError):
    """Raised when a configured token lifetime cannot be parsed."""

    def __init__(self, expression: str):
        super().__init__(
            f"Invalid token lifetime expression: '{expression}'",
            code="INVALID_TTL",
            details={"expression": expression},
        )
