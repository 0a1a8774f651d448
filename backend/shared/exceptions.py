"""
Base exception classes for the Tach accounts backend.

Each module should define its own exceptions that inherit from these bases.
Every error carries an internal diagnostic message, a user-safe message and
an HTTP-style status code so the web layer can translate it directly.
"""

from typing import Optional, Any


class TachError(Exception):
    """
    Base exception for all Tach errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500
    default_user_message: str = "There is an issue with the server. Please try again later."

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or self.default_user_message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.user_message,
            "status_code": self.status_code,
            "details": self.details,
        }


class BadRequestError(TachError):
    """Caller-supplied input does not satisfy a precondition."""

    status_code = 400
    default_user_message = "Bad request."


class NotFoundError(TachError):
    """Referenced resource does not exist."""

    status_code = 404
    default_user_message = "Not found."


class ServerError(TachError):
    """Invariant violation or failure not attributable to caller input."""

    status_code = 500


class ExternalServiceError(ServerError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code=code, details=details)
        self.service = service
        self.details["service"] = service
