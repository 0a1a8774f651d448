"""
Account lifecycle service implementation.

Orchestrates registration, email verification, password reset and role
changes over the user/account stores, the token service, the password
hasher and the email sender.
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Optional, Union

from pydantic import ValidationError

from modules.addresses.interfaces import IUserAddressService
from modules.notifications.interfaces import IEmailService
from modules.tokens.exceptions import InvalidTokenError
from modules.tokens.interfaces import ITokenService, TokenLifetime
from modules.tokens.service import parse_ttl
from shared.repository import ICommandRepository, IQueryRepository
from shared.security import IPasswordHasher

from . import emails
from .interfaces import IUserService
from .mapping import omit_id, to_public_user, to_registered_user, to_user_record_data
from .models import CREDENTIALS_PROVIDER, AccountRecord, NewUser, User, UserRecord, UserRole
from .exceptions import (
    AccountCreationError,
    AccountNotFoundError,
    EmailNotFoundError,
    FederatedAccountError,
    InvalidEmailError,
    InvalidRoleError,
    PasswordMismatchError,
    TokenNotFoundError,
    UserCreationError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)


class UserService(IUserService):
    """
    Implementation of the account lifecycle service.

    All collaborators are injected. The service keeps no mutable state of
    its own, so one instance can serve concurrent requests.
    """

    def __init__(
        self,
        user_query_repository: IQueryRepository[UserRecord],
        user_command_repository: ICommandRepository,
        account_query_repository: IQueryRepository[AccountRecord],
        account_command_repository: ICommandRepository,
        address_service: IUserAddressService,
        email_service: IEmailService,
        token_service: ITokenService,
        password_hasher: IPasswordHasher,
        from_email: str,
        base_url: str,
        app_name: str = "Tach Color Store",
        verification_token_ttl: TokenLifetime = "14d",
        password_reset_token_ttl: TokenLifetime = "30m",
    ):
        self._user_query_repository = user_query_repository
        self._user_command_repository = user_command_repository
        self._account_query_repository = account_query_repository
        self._account_command_repository = account_command_repository
        self._address_service = address_service
        self._email_service = email_service
        self._token_service = token_service
        self._password_hasher = password_hasher
        self._from_email = from_email
        self._base_url = base_url.rstrip("/")
        self._app_name = app_name
        self._verification_lifetime = parse_ttl(verification_token_ttl)
        self._password_reset_lifetime = parse_ttl(password_reset_token_ttl)

    # -------------------------------------------------------------------------
    # Registration and verification
    # -------------------------------------------------------------------------

    async def create_user(self, user: User, password: str) -> User:
        new_user = self._validate_new_user(user)

        password_hash = await self._password_hasher.hash(password)

        created_user_id = await self._user_command_repository.create(
            to_user_record_data(new_user, password_hash)
        )

        if not created_user_id:
            raise UserCreationError()

        created_account_id: Optional[str] = None
        try:
            created_account_id = await self._account_command_repository.create({
                "user_id": created_user_id,
                "type": CREDENTIALS_PROVIDER,
                "provider": CREDENTIALS_PROVIDER,
                "provider_account_id": created_user_id,
            })

            if not created_account_id:
                raise AccountCreationError(created_user_id)

            token = await self._token_service.create_token(
                created_user_id,
                new_user.email,
                self._verification_lifetime,
            )

            created_user = await self._user_query_repository.get_by_id(created_user_id)
            if created_user is None:
                raise UserCreationError(
                    f"Unable to read back created user with id '{created_user_id}'."
                )

            created_user = created_user.model_copy(update={"token": token})
            registered = omit_id(created_user.model_dump())
            await self._user_command_repository.update(created_user_id, registered)
        except Exception:
            await self._discard_partial_registration(created_user_id, created_account_id)
            raise

        logger.info(f"Created user {created_user_id} with credentials account {created_account_id}")

        await self._send_verification_email(created_user.email, token)

        return to_registered_user(registered)

    async def resend_email_address_verification(self, token: str) -> None:
        user = await self._find_user_by_token(token, TokenNotFoundError())

        new_token = await self._token_service.create_token(
            user.id,
            user.email,
            self._verification_lifetime,
        )

        await self._user_command_repository.update(user.id, {"token": new_token})
        logger.debug(f"Replaced verification token for user {user.id}")

        await self._send_verification_email(user.email, new_token)

    async def verify_email_address(self, token: str) -> None:
        not_found = TokenNotFoundError(user_message="The provided token was not found.")
        user = await self._find_user_by_token(token, not_found)

        if not await self._token_service.validate_token(token, user.email):
            raise InvalidTokenError()

        await self._user_command_repository.update(
            user.id,
            {"email_verified": datetime.now(timezone.utc)},
        )
        logger.info(f"Verified email address for user {user.id}")

    # -------------------------------------------------------------------------
    # Password reset
    # -------------------------------------------------------------------------

    async def send_password_reset_request(self, email: str) -> None:
        user = await self._get_credentials_user(email)

        token = await self._token_service.create_token(
            user.id,
            user.email,
            self._password_reset_lifetime,
        )

        await self._user_command_repository.update(user.id, {"password_reset_token": token})
        logger.debug(f"Stored password reset token for user {user.id}")

        subject, body = emails.password_reset_request_email(
            self._app_name,
            self._base_url,
            token,
            email,
            self._password_reset_lifetime,
        )
        await self._email_service.send_email(self._from_email, user.email, subject, body)

    async def reset_password(
        self,
        email: str,
        token: str,
        password: str,
        confirm_password: str,
    ) -> None:
        user = await self._get_credentials_user(email)

        # Only the reset token currently stored on the user is accepted
        if not token or token != user.password_reset_token:
            raise InvalidTokenError()

        if not await self._token_service.validate_token(token, email):
            raise InvalidTokenError()

        if password != confirm_password:
            raise PasswordMismatchError()

        password_hash = await self._password_hasher.hash(password)

        await self._user_command_repository.update(
            user.id,
            {"password": password_hash, "password_reset_token": None},
        )
        logger.info(f"Reset password for user {user.id}")

        subject, body = emails.password_reset_success_email(self._app_name)
        await self._email_service.send_email(self._from_email, user.email, subject, body)

    # -------------------------------------------------------------------------
    # Roles and retrieval
    # -------------------------------------------------------------------------

    async def set_user_roles(
        self,
        user_id: str,
        roles: list[Union[UserRole, str]],
    ) -> User:
        user = await self._user_query_repository.get_by_id(user_id)

        if user is None:
            raise UserNotFoundError(user_id)

        new_roles = self._parse_roles(roles)

        await self._user_command_repository.update(user_id, {"roles": new_roles})
        logger.info(f"Set roles for user {user_id}: {[role.value for role in new_roles]}")

        return await self.get_user_by_id(user_id)

    async def get_user_by_id(self, user_id: str) -> User:
        user = await self._user_query_repository.get_by_id(user_id)

        if user is None:
            raise UserNotFoundError(user_id)

        user_addresses = await self._address_service.get_all_user_addresses(user_id)

        return to_public_user(user, user_addresses)

    async def get_all_users(self) -> list[User]:
        users = await self._user_query_repository.list_all()

        user_addresses = await asyncio.gather(
            *(self._address_service.get_all_user_addresses(user.id) for user in users)
        )

        return [
            to_public_user(user, addresses)
            for user, addresses in zip(users, user_addresses)
        ]

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _validate_new_user(user: User) -> NewUser:
        try:
            return NewUser.model_validate(user.model_dump())
        except ValidationError as e:
            raise InvalidEmailError(user.email) from e

    async def _find_user_by_token(
        self,
        token: str,
        not_found: TokenNotFoundError,
    ) -> UserRecord:
        users = await self._user_query_repository.find({"token": token}) if token else []

        if not users:
            raise not_found

        return users[0]

    async def _get_credentials_user(self, email: str) -> UserRecord:
        """Resolve a user by email and check it has a password-based account."""
        users = await self._user_query_repository.find({"email": email})

        if not users:
            raise EmailNotFoundError(email)

        user = users[0]

        accounts = await self._account_query_repository.find({"user_id": user.id})

        if not accounts:
            raise AccountNotFoundError(user.id)

        account = accounts[0]

        if not account.is_credentials:
            raise FederatedAccountError(account.provider)

        return user

    async def _send_verification_email(self, to_address: str, token: str) -> None:
        subject, body = emails.verification_email(self._app_name, self._base_url, token)
        await self._email_service.send_email(self._from_email, to_address, subject, body)

    async def _discard_partial_registration(
        self,
        user_id: str,
        account_id: Optional[str],
    ) -> None:
        """Delete the records of a registration that failed midway."""
        logger.warning(f"Registration of user {user_id} failed; removing partial records")
        try:
            if account_id:
                await self._account_command_repository.delete(account_id)
            await self._user_command_repository.delete(user_id)
        except Exception:
            logger.exception(f"Failed to remove partial registration of user {user_id}")

    @staticmethod
    def _parse_roles(roles: list[Union[UserRole, str]]) -> list[UserRole]:
        parsed: list[UserRole] = []
        for role in roles:
            try:
                value = UserRole(role)
            except ValueError:
                raise InvalidRoleError(str(role))
            if value not in parsed:
                parsed.append(value)
        return parsed
