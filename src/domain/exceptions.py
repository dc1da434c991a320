"""
Domain errors - Typed failure values for the signup workflow.

Workflow failures are not raised: they are returned inside ``Err`` so the
HTTP layer can branch on the concrete type to pick a user-facing message.

Taxonomy:
- CreateUserError: EmailAlreadyExists | UsernameAlreadyExists | CreateUserFailure
- SendEmailError: delivery failure wrapping its cause

The only exception raised by the domain is InvalidValue, which signals a
programming error (building a value type around content that never passed
its smart constructor).
"""

from dataclasses import dataclass
from typing import Union


class InvalidValue(ValueError):
    """A value type was constructed directly with content that violates its rules."""

    pass


class CreateUserError:
    """Base class for failures reported by the create-user capability."""


@dataclass(frozen=True)
class EmailAlreadyExists(CreateUserError):
    """Another account already uses this email address."""


@dataclass(frozen=True)
class UsernameAlreadyExists(CreateUserError):
    """Another account already uses this username."""


@dataclass(frozen=True)
class CreateUserFailure(CreateUserError):
    """Any other persistence failure, carrying the underlying cause."""

    cause: Exception


@dataclass(frozen=True)
class SendEmailError:
    """The signup email could not be delivered."""

    cause: Exception


UserSignupError = Union[CreateUserError, SendEmailError]
