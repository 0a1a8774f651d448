"""
Users module.

Handles the account lifecycle: registration, email verification,
password reset, role assignment and user retrieval.

Public API:
- IUserService: Interface for account lifecycle operations
- User: Public user representation
- NewUser: Registration input with a validated email
- UserRecord, AccountRecord: Storage models
- UserRole: Assignable roles
- Users exceptions: UserNotFoundError, TokenNotFoundError, etc.
"""

from .interfaces import IUserService
from .models import (
    CREDENTIALS_PROVIDER,
    User,
    NewUser,
    UserRecord,
    AccountRecord,
    UserRole,
)
from .exceptions import (
    UserNotFoundError,
    UserCreationError,
    AccountCreationError,
    AccountNotFoundError,
    TokenNotFoundError,
    EmailNotFoundError,
    FederatedAccountError,
    PasswordMismatchError,
    InvalidEmailError,
    InvalidRoleError,
)

__all__ = [
    # Interface
    "IUserService",
    # Models
    "CREDENTIALS_PROVIDER",
    "User",
    "NewUser",
    "UserRecord",
    "AccountRecord",
    "UserRole",
    # Exceptions
    "UserNotFoundError",
    "UserCreationError",
    "AccountCreationError",
    "AccountNotFoundError",
    "TokenNotFoundError",
    "EmailNotFoundError",
    "FederatedAccountError",
    "PasswordMismatchError",
    "InvalidEmailError",
    "InvalidRoleError",
]
