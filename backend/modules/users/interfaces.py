"""
Users module interface.

Callers (the web layer, admin tooling) should depend on IUserService,
not the concrete implementation.
"""

from typing import Protocol, Union, runtime_checkable

from .models import User, UserRole


@runtime_checkable
class IUserService(Protocol):
    """
    Interface for the account lifecycle.

    Covers registration, email verification, password reset, role
    assignment and user retrieval.
    """

    async def create_user(self, user: User, password: str) -> User:
        """
        Register a password-based user.

        Creates the user and its credentials account, stores a verification
        token and emails a verification link.

        Returns:
            The created user in its public representation. The record ID
            is not exposed.

        Raises:
            InvalidEmailError: If the email is not a valid address
            UserCreationError: If the store does not create the user
            AccountCreationError: If the store does not create the account
        """
        ...

    async def resend_email_address_verification(self, token: str) -> None:
        """
        Replace a user's verification token and email a fresh link.

        Raises:
            TokenNotFoundError: If no user holds the token
        """
        ...

    async def send_password_reset_request(self, email: str) -> None:
        """
        Store a password reset token and email a reset link.

        Raises:
            EmailNotFoundError: If no user has this email
            AccountNotFoundError: If the user has no account
            FederatedAccountError: If the account is managed by an OAuth provider
        """
        ...

    async def reset_password(
        self,
        email: str,
        token: str,
        password: str,
        confirm_password: str,
    ) -> None:
        """
        Set a new password using a reset token.

        Raises:
            EmailNotFoundError: If no user has this email
            AccountNotFoundError: If the user has no account
            FederatedAccountError: If the account is managed by an OAuth provider
            InvalidTokenError: If the token is invalid, expired or not the
                user's current reset token
            PasswordMismatchError: If the passwords differ
        """
        ...

    async def verify_email_address(self, token: str) -> None:
        """
        Mark the token holder's email as verified.

        Raises:
            TokenNotFoundError: If no user holds the token
            InvalidTokenError: If the token is invalid or expired
        """
        ...

    async def set_user_roles(
        self,
        user_id: str,
        roles: list[Union[UserRole, str]],
    ) -> User:
        """
        Replace a user's roles.

        Raises:
            UserNotFoundError: If the user doesn't exist
            InvalidRoleError: If a role name is unknown
        """
        ...

    async def get_user_by_id(self, user_id: str) -> User:
        """
        Get a user with their addresses.

        Raises:
            UserNotFoundError: If the user doesn't exist
        """
        ...

    async def get_all_users(self) -> list[User]:
        """Get every user with their addresses, in store listing order."""
        ...
