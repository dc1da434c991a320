"""
Validated value types - Smart constructors for signup input.

Each type wraps one normalized string and enforces one invariant class.
The public way in is ``try_create``, which returns ``Ok(instance)`` or
``Err(reason)``. Building an instance directly re-checks the same rules
and raises InvalidValue, so an invalid instance can never exist.

Rules:
- Username: non-empty, at most 12 characters, stored trimmed + lowercased
- EmailAddress: RFC-valid address, stored trimmed + lowercased
- Password: 4-8 characters, stored exactly as typed (never persisted)
- PasswordHash: bcrypt output, salt embedded, never decoded
- VerificationCode: 15 CSPRNG bytes, base64url without padding
"""

import base64
import re
import secrets
from dataclasses import dataclass

import bcrypt
import email_validator
from email_validator import EmailNotValidError, validate_email

from .exceptions import InvalidValue
from .result import Err, Ok, Result

USERNAME_MAX_LENGTH = 12
PASSWORD_MIN_LENGTH = 4
PASSWORD_MAX_LENGTH = 8
VERIFICATION_CODE_BYTES = 15
DEFAULT_BCRYPT_ROUNDS = 10
BCRYPT_MAX_PASSWORD_BYTES = 72

_URL_SAFE_TOKEN = re.compile(r"[A-Za-z0-9_-]+")

# Accept @localhost for local installs; other special-use names stay rejected
if "localhost" in email_validator.SPECIAL_USE_DOMAIN_NAMES:
    email_validator.SPECIAL_USE_DOMAIN_NAMES.remove("localhost")


def _username_problem(value: str | None) -> str | None:
    if not value:
        return "Username is empty"
    if len(value) > USERNAME_MAX_LENGTH:
        return f"Username is too long (max {USERNAME_MAX_LENGTH} characters)"
    if not value.strip():
        return "Username is empty"
    return None


def _email_problem(value: str | None) -> str | None:
    if not value:
        return "Email address has an invalid format"
    try:
        validate_email(
            value,
            check_deliverability=False,
            globally_deliverable=False,
            allow_domain_literal=True,
        )
    except EmailNotValidError:
        return "Email address has an invalid format"
    return None


def _password_problem(value: str | None) -> str | None:
    if not value:
        return "Password is empty"
    if not PASSWORD_MIN_LENGTH <= len(value) <= PASSWORD_MAX_LENGTH:
        return (
            f"Password length out of range "
            f"({PASSWORD_MIN_LENGTH}-{PASSWORD_MAX_LENGTH} characters)"
        )
    return None


@dataclass(frozen=True)
class Username:
    """Normalized account handle."""

    value: str

    def __post_init__(self) -> None:
        # Lowercasing may lengthen a name ("\u0130" -> "i\u0307"), so the
        # length limit belongs to try_create, not to the stored form.
        if not self.value:
            raise InvalidValue("Username is empty")
        if self.value != self.value.strip().lower():
            raise InvalidValue("Username is not normalized")

    @classmethod
    def try_create(cls, username: str | None) -> Result["Username", str]:
        """
        Validate and normalize a raw username.

        The length limit applies to the raw input, so padding a long name
        with whitespace does not sneak it under the limit.
        """
        problem = _username_problem(username)
        if problem is not None:
            return Err(problem)
        return Ok(cls(username.strip().lower()))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class EmailAddress:
    """Syntactically valid, normalized contact address."""

    value: str

    def __post_init__(self) -> None:
        problem = _email_problem(self.value)
        if problem is None and self.value != self.value.strip().lower():
            problem = "Email address is not normalized"
        if problem is not None:
            raise InvalidValue(problem)

    @classmethod
    def try_create(cls, email: str | None) -> Result["EmailAddress", str]:
        if email is None:
            return Err("Email address has an invalid format")
        normalized = email.strip().lower()
        problem = _email_problem(normalized)
        if problem is not None:
            return Err(problem)
        return Ok(cls(normalized))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Password:
    """Plaintext credential. Case and whitespace are significant."""

    value: str

    def __post_init__(self) -> None:
        problem = _password_problem(self.value)
        if problem is not None:
            raise InvalidValue(problem)

    @classmethod
    def try_create(cls, password: str | None) -> Result["Password", str]:
        problem = _password_problem(password)
        if problem is not None:
            return Err(problem)
        return Ok(cls(password))

    def __repr__(self) -> str:
        return "Password(value='********')"


@dataclass(frozen=True)
class PasswordHash:
    """One-way bcrypt hash of a Password, as persisted."""

    value: str

    @classmethod
    def create(cls, password: Password, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> "PasswordHash":
        """Hash a validated password with a fresh salt embedded in the output."""
        hashed = bcrypt.hashpw(password.value.encode(), bcrypt.gensalt(rounds=rounds))
        return cls(hashed.decode())

    @staticmethod
    def match(password_hash: "PasswordHash", candidate: str) -> bool:
        """
        Check a plaintext candidate against a stored hash.

        Returns False on mismatch, including candidates longer than the
        72 bytes bcrypt accepts. Raises ValueError only when the stored
        hash is not a bcrypt hash.
        """
        candidate_bytes = candidate.encode()
        if len(candidate_bytes) > BCRYPT_MAX_PASSWORD_BYTES:
            return False
        return bcrypt.checkpw(candidate_bytes, password_hash.value.encode())


@dataclass(frozen=True)
class VerificationCode:
    """Single-use, URL-safe proof of email ownership."""

    value: str

    def __post_init__(self) -> None:
        if not self.is_well_formed(self.value):
            raise InvalidValue("Verification code must be a non-empty base64url token")

    @classmethod
    def create(cls) -> "VerificationCode":
        raw = secrets.token_bytes(VERIFICATION_CODE_BYTES)
        return cls(base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii"))

    @staticmethod
    def is_well_formed(value: str | None) -> bool:
        return bool(value) and _URL_SAFE_TOKEN.fullmatch(value) is not None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class UserId:
    """Account identity assigned by persistence."""

    value: int
