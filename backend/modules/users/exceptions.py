"""
Users module exceptions.

These exceptions are raised by the account lifecycle service and can be
caught by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import BadRequestError, NotFoundError, ServerError


class UserNotFoundError(NotFoundError):
    """Raised when no user exists with the requested ID."""

    def __init__(self, user_id: str):
        super().__init__(
            f"User with id '{user_id}' not found.",
            user_message="User not found.",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class UserCreationError(ServerError):
    """Raised when the store does not return an ID for a new user."""

    def __init__(self, message: str = "Unable to create user."):
        super().__init__(message, code="USER_CREATION_FAILED")


class AccountCreationError(ServerError):
    """Raised when the store does not return an ID for a new account."""

    def __init__(self, user_id: str):
        super().__init__(
            f"Unable to create user account with user id '{user_id}'.",
            code="ACCOUNT_CREATION_FAILED",
            details={"user_id": user_id},
        )


class AccountNotFoundError(ServerError):
    """Raised when a user has no account record. Every user must have one."""

    def __init__(self, user_id: str):
        super().__init__(
            f"The user account for user id '{user_id}' was not found.",
            user_message="There was an error on the server. Please try again later.",
            code="ACCOUNT_NOT_FOUND",
            details={"user_id": user_id},
        )


class TokenNotFoundError(BadRequestError):
    """Raised when no user holds the presented token."""

    def __init__(self, user_message: str = "Bad request."):
        super().__init__(
            "The provided token was not found.",
            user_message=user_message,
            code="TOKEN_NOT_FOUND",
        )


class EmailNotFoundError(BadRequestError):
    """Raised when no user is registered with the given email."""

    def __init__(self, email: str):
        super().__init__(
            "The provided email was not found.",
            code="EMAIL_NOT_FOUND",
            details={"email": email},
        )


class FederatedAccountError(BadRequestError):
    """Raised when a password operation targets an OAuth-managed account."""

    def __init__(self, provider: str):
        super().__init__(
            "The provided email is associated with an account managed with a "
            "third-party OAuth Provider; there is no password to reset.",
            code="FEDERATED_ACCOUNT",
            details={"provider": provider},
        )


class PasswordMismatchError(BadRequestError):
    """Raised when the password confirmation does not match."""

    def __init__(self):
        super().__init__(
            "Passwords do not match.",
            user_message="Passwords do not match.",
            code="PASSWORD_MISMATCH",
        )


class InvalidRoleError(BadRequestError):
    """Raised when an unknown role name is assigned."""

    def __init__(self, role: str):
        super().__init__(
            f"Unknown role: '{role}'.",
            code="INVALID_ROLE",
            details={"role": role},
        )


class InvalidEmailError(BadRequestError):
    """Raised when a registration carries a malformed email address."""

    def __init__(self, email: str):
        super().__init__(
            f"Invalid email address: '{email}'.",
            user_message="The provided email address is not valid.",
            code="INVALID_EMAIL",
            details={"email": email},
        )
