"""
Conversions between the stored user shape and the public user shape.
"""

from typing import Any, Optional

from modules.addresses.models import UserAddress

from .models import User, UserRecord


def to_user_record_data(user: User, password_hash: str) -> dict[str, Any]:
    """
    Build the storage row for a new user.

    The row has no id (the store assigns one), carries the password hash
    and starts unverified with no tokens.
    """
    return {
        "name": user.name,
        "email": str(user.email),
        "image": user.image,
        "roles": list(user.roles),
        "password": password_hash,
        "token": None,
        "password_reset_token": None,
        "email_verified": None,
    }


def to_public_user(
    record: UserRecord,
    user_addresses: Optional[list[UserAddress]] = None,
) -> User:
    """Build the public view of a stored user, merged with its addresses."""
    return User(
        id=record.id,
        name=record.name,
        email=record.email,
        email_verified=record.email_verified,
        image=record.image,
        roles=record.roles,
        user_addresses=user_addresses or [],
    )


def omit_id(data: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of a record without its identifier."""
    return {key: value for key, value in data.items() if key != "id"}


def to_registered_user(data: dict[str, Any]) -> User:
    """
    Build the public view of a just-registered user from its stored data.

    The data is the id-stripped row written at the end of registration, so
    the returned user carries no ID.
    """
    return User(
        name=data.get("name"),
        email=data["email"],
        email_verified=data.get("email_verified"),
        image=data.get("image"),
        roles=data.get("roles", []),
    )
