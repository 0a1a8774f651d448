"""Tests for users module exceptions."""

from modules.users.exceptions import (
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
from shared.exceptions import BadRequestError, NotFoundError, ServerError


class TestUserNotFoundError:
    def test_user_not_found(self):
        error = UserNotFoundError("user-123")

        assert isinstance(error, NotFoundError)
        assert "user-123" in str(error)
        assert error.code == "USER_NOT_FOUND"
        assert error.details["user_id"] == "user-123"

    def test_to_dict_uses_user_message(self):
        result = UserNotFoundError("user-123").to_dict()

        assert result == {
            "error": "USER_NOT_FOUND",
            "message": "User not found.",
            "status_code": 404,
            "details": {"user_id": "user-123"},
        }


class TestServerErrors:
    def test_creation_errors_hide_details_from_users(self):
        for error in (UserCreationError(), AccountCreationError("user-123")):
            assert isinstance(error, ServerError)
            assert error.status_code == 500
            assert error.user_message == (
                "There is an issue with the server. Please try again later."
            )

    def test_account_not_found(self):
        error = AccountNotFoundError("user-123")

        assert error.status_code == 500
        assert "user-123" in error.message
        assert error.user_message == "There was an error on the server. Please try again later."


class TestBadRequestErrors:
    def test_token_not_found_default_message(self):
        error = TokenNotFoundError()

        assert isinstance(error, BadRequestError)
        assert error.user_message == "Bad request."
        assert error.message == "The provided token was not found."

    def test_token_not_found_custom_message(self):
        error = TokenNotFoundError(user_message="The provided token was not found.")

        assert error.user_message == "The provided token was not found."

    def test_email_not_found(self):
        error = EmailNotFoundError("ada@x.com")

        assert error.status_code == 400
        assert error.details == {"email": "ada@x.com"}

    def test_federated_account(self):
        error = FederatedAccountError("github")

        assert error.status_code == 400
        assert "OAuth" in error.message
        assert error.details == {"provider": "github"}

    def test_password_mismatch(self):
        error = PasswordMismatchError()

        assert error.user_message == "Passwords do not match."
        assert error.code == "PASSWORD_MISMATCH"

    def test_invalid_role(self):
        error = InvalidRoleError("superuser")

        assert error.status_code == 400
        assert "superuser" in str(error)

    def test_invalid_email(self):
        error = InvalidEmailError("not-an-email")

        assert error.status_code == 400
        assert error.code == "INVALID_EMAIL"
        assert error.details == {"email": "not-an-email"}
