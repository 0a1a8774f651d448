"""
Users module data models.

UserRecord and AccountRecord are the storage shapes. User is the public
representation returned to callers: it never carries the password hash
or any token.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, EmailStr

from modules.addresses.models import UserAddress


CREDENTIALS_PROVIDER = "credentials"


class UserRole(str, Enum):
    """Roles that can be assigned to a user."""

    ADMIN = "admin"
    USER = "user"


class UserRecord(BaseModel):
    """A user as stored in the users table."""

    id: str = Field(..., description="User ID")
    name: Optional[str] = Field(None, description="Display name")
    email: str = Field(..., description="Email address (unique)")
    password: Optional[str] = Field(None, description="Credential hash; null for OAuth-only users")
    token: Optional[str] = Field(None, description="Email verification token")
    password_reset_token: Optional[str] = Field(None, description="Password reset token")
    email_verified: Optional[datetime] = Field(None, description="When the email was verified")
    image: Optional[str] = Field(None, description="Avatar URL")
    roles: list[UserRole] = Field(default_factory=list, description="Assigned roles")
    created_at: Optional[datetime] = Field(None, description="Creation time")
    updated_at: Optional[datetime] = Field(None, description="Last update time")

    model_config = {"extra": "ignore"}


class AccountRecord(BaseModel):
    """
    A login method attached to a user.

    Password-based users have exactly one account with provider
    "credentials" whose provider_account_id is the user ID.
    """

    id: str = Field(..., description="Account ID")
    user_id: str = Field(..., description="Owning user ID")
    type: str = Field(default=CREDENTIALS_PROVIDER, description="Account type")
    provider: str = Field(..., description="'credentials' or an OAuth provider name")
    provider_account_id: str = Field(..., description="Provider-assigned account ID")
    created_at: Optional[datetime] = Field(None, description="Creation time")

    model_config = {"extra": "ignore"}

    @property
    def is_credentials(self) -> bool:
        return self.provider == CREDENTIALS_PROVIDER


class User(BaseModel):
    """
    Public representation of a user.

    The email is carried as stored. Records created through an OAuth
    provider may hold addresses that registration would reject.
    """

    id: Optional[str] = Field(None, description="User ID")
    name: Optional[str] = Field(None, description="Display name")
    email: str = Field(..., description="Email address")
    email_verified: Optional[datetime] = Field(None, description="When the email was verified")
    image: Optional[str] = Field(None, description="Avatar URL")
    roles: list[UserRole] = Field(
        default_factory=lambda: [UserRole.USER],
        description="Assigned roles",
    )
    user_addresses: list[UserAddress] = Field(
        default_factory=list,
        description="Shipping and billing addresses",
    )


class NewUser(User):
    """Registration input. The email must be a valid address."""

    email: EmailStr = Field(..., description="Email address")
