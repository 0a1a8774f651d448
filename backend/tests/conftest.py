"""
Shared test fixtures and utilities.

Provides in-memory stores that behave like the Supabase repositories and
a fully wired UserService built on them.
"""

import uuid
from datetime import datetime, timezone, timedelta
from typing import Any, Optional

import jwt  # PyJWT
import pytest
from pydantic_core import to_jsonable_python

from modules.addresses.models import UserAddress
from modules.addresses.service import UserAddressService
from modules.notifications.service import LoggingEmailService
from modules.tokens.service import TokenService
from modules.users.models import AccountRecord, UserRecord
from modules.users.service import UserService
from shared.container import reset_container
from shared.security import BcryptPasswordHasher


TEST_TOKEN_SECRET = "test-secret-key-for-testing-only"
TEST_FROM_EMAIL = "no-reply@tach.example"
TEST_BASE_URL = "https://store.tach.example"


class InMemoryRepository:
    """
    Query and command repository backed by a dict.

    Rows are stored as JSON values, as Supabase would store them, and are
    listed in insertion order. Set ``create_returns_none`` to simulate a
    store that fails to assign an ID.
    """

    def __init__(self, model):
        self.model = model
        self.rows: dict[str, dict[str, Any]] = {}
        self.create_returns_none = False
        self.update_calls: list[tuple[str, dict[str, Any]]] = []
        self.deleted: list[str] = []

    async def get_by_id(self, record_id: str):
        row = self.rows.get(record_id)
        return self.model.model_validate(row) if row is not None else None

    async def find(self, criteria: dict[str, Any]) -> list:
        wanted = to_jsonable_python(criteria)
        return [
            self.model.model_validate(row)
            for row in self.rows.values()
            if all(row.get(key) == value for key, value in wanted.items())
        ]

    async def list_all(self) -> list:
        return [self.model.model_validate(row) for row in self.rows.values()]

    async def create(self, data: dict[str, Any]) -> Optional[str]:
        if self.create_returns_none:
            return None
        record_id = str(uuid.uuid4())
        self.rows[record_id] = {
            **to_jsonable_python(data),
            "id": record_id,
            "created_at": datetime.now(timezone.utc).isoformat(),
        }
        return record_id

    async def update(self, record_id: str, data: dict[str, Any]) -> None:
        self.update_calls.append((record_id, data))
        self.rows[record_id].update(to_jsonable_python(data))

    async def delete(self, record_id: str) -> None:
        self.deleted.append(record_id)
        self.rows.pop(record_id, None)

    def seed(self, **row: Any) -> str:
        """Insert a row directly and return its ID."""
        record_id = row.pop("id", None) or str(uuid.uuid4())
        self.rows[record_id] = {**to_jsonable_python(row), "id": record_id}
        return record_id


@pytest.fixture(autouse=True)
def reset_container_singleton():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def user_repository() -> InMemoryRepository:
    return InMemoryRepository(UserRecord)


@pytest.fixture
def account_repository() -> InMemoryRepository:
    return InMemoryRepository(AccountRecord)


@pytest.fixture
def address_repository() -> InMemoryRepository:
    return InMemoryRepository(UserAddress)


@pytest.fixture
def email_service() -> LoggingEmailService:
    return LoggingEmailService()


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(TEST_TOKEN_SECRET)


@pytest.fixture
def password_hasher() -> BcryptPasswordHasher:
    """Low-cost hasher to keep tests fast."""
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def user_service(
    user_repository,
    account_repository,
    address_repository,
    email_service,
    token_service,
    password_hasher,
) -> UserService:
    """UserService wired to in-memory collaborators."""
    return UserService(
        user_query_repository=user_repository,
        user_command_repository=user_repository,
        account_query_repository=account_repository,
        account_command_repository=account_repository,
        address_service=UserAddressService(address_repository),
        email_service=email_service,
        token_service=token_service,
        password_hasher=password_hasher,
        from_email=TEST_FROM_EMAIL,
        base_url=TEST_BASE_URL,
    )


@pytest.fixture
def make_token():
    """
    Factory for tokens signed with the test secret.

    Lets tests build expired tokens or tokens for another email.
    """

    def _make_token(
        user_id: str = "test-user-123",
        email: str = "test@example.com",
        expired: bool = False,
        secret: str = TEST_TOKEN_SECRET,
    ) -> str:
        now = datetime.now(timezone.utc)
        exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)
        payload = {
            "sub": user_id,
            "email": email,
            "iat": int(now.timestamp()),
            "exp": int(exp.timestamp()),
            "jti": uuid.uuid4().hex,
        }
        return jwt.encode(payload, secret, algorithm="HS256")

    return _make_token
