"""
Unit tests for UserSignupRequest.try_create.

Validation order is username -> password -> email and only the first
failure is reported.
"""

from src.domain.result import Err
from src.domain.signup import UserSignupRequest
from src.domain.values import EmailAddress, Password, Username


class TestUserSignupRequestAssembly:
    """Tests for assembling a signup request from raw input."""

    def test_valid_input_assembles_request(self) -> None:
        """All three fields valid -> normalized request."""
        request = UserSignupRequest.try_create(" Bob ", "Pa55 wd", "BOB@example.org").unwrap()

        assert request.username == Username("bob")
        assert request.password == Password("Pa55 wd")
        assert request.email == EmailAddress("bob@example.org")

    def test_username_failure_reported_first(self) -> None:
        """All three invalid -> only the username message comes back."""
        result = UserSignupRequest.try_create("", "x", "not-an-email")

        assert isinstance(result, Err)
        assert result.error.startswith("Username")

    def test_password_failure_reported_before_email(self) -> None:
        """Username valid, password and email invalid -> password message."""
        result = UserSignupRequest.try_create("bob", "x", "not-an-email")

        assert isinstance(result, Err)
        assert result.error.startswith("Password")

    def test_email_failure_reported_last(self) -> None:
        """Only the email is invalid -> email message."""
        result = UserSignupRequest.try_create("bob", "pass1", "not-an-email")

        assert isinstance(result, Err)
        assert "invalid format" in result.error

    def test_failure_is_a_single_message(self) -> None:
        """Errors are not accumulated."""
        result = UserSignupRequest.try_create("abcdefghijklmnop", "", "")

        assert isinstance(result.error, str)
        assert "Password" not in result.error
        assert "Email" not in result.error
