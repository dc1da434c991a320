"""
Storage-conflict translation - Unique index name to domain error.

Both repository adapters report uniqueness conflicts by index name and
route them through map_unique_violation, so the mapping lives in one place.
"""

from src.domain.exceptions import (
    CreateUserError,
    CreateUserFailure,
    EmailAlreadyExists,
    UsernameAlreadyExists,
)

EMAIL_UNIQUE_INDEX = "ix_users_email"
USERNAME_UNIQUE_INDEX = "ix_users_username"


def map_unique_violation(constraint_name: str | None, cause: Exception) -> CreateUserError:
    """
    Translate a unique-index violation into a CreateUserError.

    Args:
        constraint_name: Name of the violated index, as reported by storage
        cause: Original storage exception, kept for unknown indexes

    Returns:
        EmailAlreadyExists, UsernameAlreadyExists, or CreateUserFailure(cause)
    """
    if constraint_name == EMAIL_UNIQUE_INDEX:
        return EmailAlreadyExists()
    if constraint_name == USERNAME_UNIQUE_INDEX:
        return UsernameAlreadyExists()
    return CreateUserFailure(cause)
