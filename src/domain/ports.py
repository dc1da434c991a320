"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols structurally.

Two levels are exposed:
- Capabilities (CreateUser, SendSignupEmail, ConsumeVerificationCode):
  single async callables injected into the workflow functions.
- Adapters (UserRepository, EmailSender): objects whose bound methods
  provide those capabilities.
"""

from typing import Protocol

from .exceptions import CreateUserError, SendEmailError
from .result import Result
from .signup import CreateUserRequest, SignupEmailRequest
from .values import UserId


class CreateUser(Protocol):
    """Persist a new account. Must be awaited."""

    async def __call__(self, request: CreateUserRequest) -> Result[UserId, CreateUserError]: ...


class SendSignupEmail(Protocol):
    """Deliver the verification email. Must be awaited."""

    async def __call__(self, request: SignupEmailRequest) -> Result[None, SendEmailError]: ...


class ConsumeVerificationCode(Protocol):
    """
    Atomically redeem a stored verification code.

    Returns the owning username as stored, or None when no account holds
    the code. Infrastructure failures come back as Err(cause).
    """

    async def __call__(self, code: str) -> Result[str | None, Exception]: ...


class UserRepository(Protocol):
    """Port interface for account persistence."""

    async def create_user(self, request: CreateUserRequest) -> Result[UserId, CreateUserError]:
        """
        Insert a new, unverified account holding the verification code.

        Uniqueness violations on email or username must come back as
        EmailAlreadyExists / UsernameAlreadyExists; anything else as
        CreateUserFailure(cause).
        """
        ...

    async def consume_verification_code(self, code: str) -> Result[str | None, Exception]:
        """
        Clear the matching code and mark the account verified in one step.

        Once cleared, the same code never matches again.
        """
        ...

    async def ping(self) -> None:
        """Raise if the storage backend is unreachable."""
        ...


class EmailSender(Protocol):
    """Port interface for email delivery."""

    async def send_signup_email(self, request: SignupEmailRequest) -> Result[None, SendEmailError]:
        """
        Send the verification email.

        Transport failures are returned as SendEmailError(cause), never raised.
        """
        ...
