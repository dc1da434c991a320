"""Repository adapters - Database implementations."""

from .errors import EMAIL_UNIQUE_INDEX, USERNAME_UNIQUE_INDEX, map_unique_violation
from .memory import InMemoryUserRepository
from .postgres import PostgresUserRepository, run_migrations

__all__ = [
    "EMAIL_UNIQUE_INDEX",
    "InMemoryUserRepository",
    "PostgresUserRepository",
    "USERNAME_UNIQUE_INDEX",
    "map_unique_violation",
    "run_migrations",
]
