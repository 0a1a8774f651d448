"""
Service wiring.

This module is the "container" that builds the concrete implementations
and passes them to each service through its constructor. Services never
look up their own collaborators.

To move a collaborator out of process (e.g. the address store), only the
corresponding property here needs to change.
"""

from typing import TYPE_CHECKING, Optional

from .config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from supabase import Client

    from modules.addresses.interfaces import IUserAddressService
    from modules.addresses.repository import UserAddressRepository
    from modules.notifications.interfaces import IEmailService
    from modules.tokens.interfaces import ITokenService
    from modules.users.interfaces import IUserService
    from modules.users.repository import AccountRepository, UserRepository
    from .security import IPasswordHasher


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as singletons
    within the container. Use reset() to clear them for testing.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        db: "Optional[Client]" = None,
    ) -> None:
        self._settings = settings
        self._db = db
        self._user_repository: "UserRepository | None" = None
        self._account_repository: "AccountRepository | None" = None
        self._user_address_repository: "UserAddressRepository | None" = None
        self._password_hasher: "IPasswordHasher | None" = None
        self._token_service: "ITokenService | None" = None
        self._email_service: "IEmailService | None" = None
        self._address_service: "IUserAddressService | None" = None
        self._user_service: "IUserService | None" = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def db(self) -> "Client":
        """Get the Supabase client."""
        if self._db is None:
            from .database import get_supabase_client
            self._db = get_supabase_client()
        return self._db

    @property
    def user_repository(self) -> "UserRepository":
        if self._user_repository is None:
            from modules.users.repository import UserRepository
            self._user_repository = UserRepository(self.db, self.settings.users_table)
        return self._user_repository

    @property
    def account_repository(self) -> "AccountRepository":
        if self._account_repository is None:
            from modules.users.repository import AccountRepository
            self._account_repository = AccountRepository(self.db, self.settings.accounts_table)
        return self._account_repository

    @property
    def user_address_repository(self) -> "UserAddressRepository":
        if self._user_address_repository is None:
            from modules.addresses.repository import UserAddressRepository
            self._user_address_repository = UserAddressRepository(
                self.db, self.settings.user_addresses_table
            )
        return self._user_address_repository

    @property
    def password_hasher(self) -> "IPasswordHasher":
        if self._password_hasher is None:
            from .security import BcryptPasswordHasher
            self._password_hasher = BcryptPasswordHasher(self.settings.password_hash_rounds)
        return self._password_hasher

    @property
    def tokens(self) -> "ITokenService":
        """Get the token service instance."""
        if self._token_service is None:
            from modules.tokens.service import TokenService
            self._token_service = TokenService(
                self.settings.token_secret,
                self.settings.token_algorithm,
            )
        return self._token_service

    @property
    def email(self) -> "IEmailService":
        """Get the email service instance (logging sender when SMTP is not configured)."""
        if self._email_service is None:
            from modules.notifications.service import LoggingEmailService, SmtpEmailService
            settings = self.settings
            if settings.smtp_host:
                self._email_service = SmtpEmailService(
                    host=settings.smtp_host,
                    port=settings.smtp_port,
                    username=settings.smtp_user,
                    password=settings.smtp_password,
                )
            else:
                self._email_service = LoggingEmailService()
        return self._email_service

    @property
    def addresses(self) -> "IUserAddressService":
        """Get the user address service instance."""
        if self._address_service is None:
            from modules.addresses.service import UserAddressService
            self._address_service = UserAddressService(self.user_address_repository)
        return self._address_service

    @property
    def users(self) -> "IUserService":
        """Get the account lifecycle service instance."""
        if self._user_service is None:
            from modules.users.service import UserService
            settings = self.settings
            self._user_service = UserService(
                user_query_repository=self.user_repository,
                user_command_repository=self.user_repository,
                account_query_repository=self.account_repository,
                account_command_repository=self.account_repository,
                address_service=self.addresses,
                email_service=self.email,
                token_service=self.tokens,
                password_hasher=self.password_hasher,
                from_email=settings.tach_email_source,
                base_url=settings.next_public_base_url,
                app_name=settings.app_name,
                verification_token_ttl=settings.verification_token_ttl,
                password_reset_token_ttl=settings.password_reset_token_ttl,
            )
        return self._user_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._user_repository = None
        self._account_repository = None
        self._user_address_repository = None
        self._password_hasher = None
        self._token_service = None
        self._email_service = None
        self._address_service = None
        self._user_service = None


# Module-level container singleton
_container: Optional[ServiceContainer] = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container with new
    service instances. Primarily used for testing.
    """
    global _container
    _container = None
