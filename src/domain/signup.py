"""
Signup requests - Validated intent and the payloads handed to capabilities.

UserSignupRequest is assembled only through try_create, which validates
username, password and email in that order and stops at the first failure.
"""

from dataclasses import dataclass

from .result import Ok, Result
from .values import EmailAddress, Password, PasswordHash, Username, VerificationCode


@dataclass(frozen=True)
class UserSignupRequest:
    """Signup intent whose three fields are individually valid."""

    username: Username
    password: Password
    email: EmailAddress

    @classmethod
    def try_create(
        cls, username: str | None, password: str | None, email: str | None
    ) -> Result["UserSignupRequest", str]:
        """
        Validate raw form input.

        Fail-fast: only the first failing field is reported.

        Returns:
            Ok(UserSignupRequest) or Err(message of the first failure)
        """
        username_result = Username.try_create(username)
        if username_result.is_err():
            return username_result
        password_result = Password.try_create(password)
        if password_result.is_err():
            return password_result
        email_result = EmailAddress.try_create(email)
        if email_result.is_err():
            return email_result

        return Ok(
            cls(
                username=username_result.value,
                password=password_result.value,
                email=email_result.value,
            )
        )


@dataclass(frozen=True)
class CreateUserRequest:
    """Input to the create-user capability. Carries no plaintext password."""

    username: Username
    password_hash: PasswordHash
    email: EmailAddress
    verification_code: VerificationCode


@dataclass(frozen=True)
class SignupEmailRequest:
    """Input to the send-signup-email capability."""

    username: Username
    email: EmailAddress
    verification_code: VerificationCode
