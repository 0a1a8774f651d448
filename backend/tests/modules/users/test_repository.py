"""Tests for user and account repositories."""

import pytest
from unittest.mock import MagicMock

from modules.users.models import AccountRecord, UserRecord, UserRole
from modules.users.repository import AccountRepository, UserRepository


@pytest.fixture
def db():
    return MagicMock()


class TestUserRepository:
    @pytest.mark.asyncio
    async def test_find_by_token(self, db):
        select = db.table.return_value.select.return_value
        select.eq.return_value.order.return_value.execute.return_value.data = [
            {"id": "user-1", "email": "ada@x.com", "token": "tok", "roles": ["admin"]}
        ]
        repo = UserRepository(db)

        users = await repo.find({"token": "tok"})

        db.table.assert_called_with("users")
        select.eq.assert_called_once_with("token", "tok")
        assert users == [UserRecord(id="user-1", email="ada@x.com", token="tok", roles=[UserRole.ADMIN])]

    @pytest.mark.asyncio
    async def test_update_serializes_roles(self, db):
        repo = UserRepository(db, "tach_users")

        await repo.update("user-1", {"roles": [UserRole.ADMIN, UserRole.USER]})

        db.table.assert_called_with("tach_users")
        db.table.return_value.update.assert_called_once_with({"roles": ["admin", "user"]})


class TestAccountRepository:
    @pytest.mark.asyncio
    async def test_find_by_user(self, db):
        select = db.table.return_value.select.return_value
        select.eq.return_value.order.return_value.execute.return_value.data = [
            {
                "id": "acc-1",
                "user_id": "user-1",
                "type": "credentials",
                "provider": "credentials",
                "provider_account_id": "user-1",
            }
        ]
        repo = AccountRepository(db)

        accounts = await repo.find({"user_id": "user-1"})

        db.table.assert_called_with("accounts")
        assert isinstance(accounts[0], AccountRecord)
        assert accounts[0].is_credentials
