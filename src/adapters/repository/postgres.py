"""
PostgreSQL repository adapter - Implements UserRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3's async connection pool with raw SQL.

Uniqueness:
-----------
The users table carries two unique indexes, ix_users_email and
ix_users_username. A concurrent signup racing for the same email or
username is arbitrated by these indexes alone; the loser's UniqueViolation
is translated by map_unique_violation.

Redemption:
-----------
consume_verification_code is a single UPDATE ... RETURNING statement, so
clearing the code and setting is_email_verified happen atomically. A
consumed code is stored as NULL, which never equals a presented code.
"""

import logging
from pathlib import Path

import psycopg
from psycopg import errors
from psycopg_pool import AsyncConnectionPool

from src.domain.exceptions import CreateUserError, CreateUserFailure
from src.domain.result import Err, Ok, Result
from src.domain.signup import CreateUserRequest
from src.domain.values import UserId

from .errors import map_unique_violation

logger = logging.getLogger(__name__)


class PostgresUserRepository:
    """
    Implements UserRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries.
    """

    def __init__(self, pool: AsyncConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 AsyncConnectionPool for database connections
        """
        self._pool = pool

    async def create_user(self, request: CreateUserRequest) -> Result[UserId, CreateUserError]:
        """
        Insert a new unverified user holding its verification code.

        Args:
            request: Validated username/email, password hash and code

        Returns:
            Ok(UserId) on insert, Err(EmailAlreadyExists | UsernameAlreadyExists)
            on a unique index violation, Err(CreateUserFailure) otherwise
        """
        sql = """
            INSERT INTO users (username, email, password_hash, email_verification_code, is_email_verified)
            VALUES (%s, %s, %s, %s, FALSE)
            RETURNING id
        """

        try:
            async with self._pool.connection() as conn, conn.cursor() as cursor:
                await cursor.execute(
                    sql,
                    (
                        request.username.value,
                        request.email.value,
                        request.password_hash.value,
                        request.verification_code.value,
                    ),
                )
                row = await cursor.fetchone()
                await conn.commit()
        except errors.UniqueViolation as e:
            return Err(map_unique_violation(e.diag.constraint_name, e))
        except psycopg.Error as e:
            logger.error(f"User insert failed: {e}")
            return Err(CreateUserFailure(e))

        logger.info(f"User created: id={row[0]}")
        return Ok(UserId(row[0]))

    async def consume_verification_code(self, code: str) -> Result[str | None, Exception]:
        """
        Clear a live verification code and mark its owner verified.

        Args:
            code: Code exactly as presented

        Returns:
            Ok(username) when a row matched, Ok(None) when none did,
            Err(psycopg.Error) on database failure
        """
        sql = """
            UPDATE users
            SET email_verification_code = NULL, is_email_verified = TRUE
            WHERE email_verification_code = %s
            RETURNING username
        """

        try:
            async with self._pool.connection() as conn, conn.cursor() as cursor:
                await cursor.execute(sql, (code,))
                row = await cursor.fetchone()
                await conn.commit()
        except psycopg.Error as e:
            return Err(e)

        if row is None:
            return Ok(None)
        return Ok(row[0])

    async def ping(self) -> None:
        async with self._pool.connection() as conn:
            await conn.execute("SELECT 1")


async def run_migrations(pool: AsyncConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 AsyncConnectionPool instance
    """
    # Structure: src/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning(f"Migrations directory not found: {migrations_dir}")
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info(f"Running {len(sql_files)} migration(s)")

    for sql_file in sql_files:
        logger.info(f"Executing migration: {sql_file.name}")
        try:
            sql_content = sql_file.read_text()

            async with pool.connection() as conn:
                await conn.execute(sql_content)

            logger.info(f"Migration complete: {sql_file.name}")
        except Exception as e:
            logger.error(f"Migration failed: {sql_file.name} - {e}")
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
