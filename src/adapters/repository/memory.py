"""
In-memory repository adapter - Implements UserRepository protocol.

Process-local storage for demo runs (STORAGE_BACKEND=memory) and tests.
Mirrors the PostgreSQL adapter's rules: unique email and username
(reported through map_unique_violation), and atomic code redemption
under a single asyncio.Lock.
"""

import asyncio
import logging
from dataclasses import dataclass

from src.domain.exceptions import CreateUserError
from src.domain.result import Err, Ok, Result
from src.domain.signup import CreateUserRequest
from src.domain.values import UserId

from .errors import EMAIL_UNIQUE_INDEX, USERNAME_UNIQUE_INDEX, map_unique_violation

logger = logging.getLogger(__name__)


class UniqueViolation(Exception):
    """Raised internally when a unique index would be violated."""

    def __init__(self, index_name: str) -> None:
        super().__init__(f"duplicate key value violates unique index {index_name!r}")
        self.index_name = index_name


@dataclass
class StoredUser:
    """One row of the in-memory users table."""

    id: int
    username: str
    email: str
    password_hash: str
    email_verification_code: str | None
    is_email_verified: bool = False


class InMemoryUserRepository:
    """
    Implements UserRepository protocol over a dict.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self) -> None:
        self._users: dict[int, StoredUser] = {}
        self._next_id = 1
        self._lock = asyncio.Lock()

    async def create_user(self, request: CreateUserRequest) -> Result[UserId, CreateUserError]:
        async with self._lock:
            try:
                self._check_unique(request.email.value, request.username.value)
            except UniqueViolation as e:
                return Err(map_unique_violation(e.index_name, e))

            user = StoredUser(
                id=self._next_id,
                username=request.username.value,
                email=request.email.value,
                password_hash=request.password_hash.value,
                email_verification_code=request.verification_code.value,
            )
            self._users[user.id] = user
            self._next_id += 1

        logger.info("User created: id=%s", user.id)
        return Ok(UserId(user.id))

    async def consume_verification_code(self, code: str) -> Result[str | None, Exception]:
        async with self._lock:
            for user in self._users.values():
                if user.email_verification_code == code:
                    user.email_verification_code = None
                    user.is_email_verified = True
                    return Ok(user.username)
        return Ok(None)

    async def ping(self) -> None:
        return None

    def get(self, user_id: int) -> StoredUser | None:
        """Return the stored row for an id, if any."""
        return self._users.get(user_id)

    def _check_unique(self, email: str, username: str) -> None:
        for user in self._users.values():
            if user.email == email:
                raise UniqueViolation(EMAIL_UNIQUE_INDEX)
            if user.username == username:
                raise UniqueViolation(USERNAME_UNIQUE_INDEX)
