"""
PostgreSQL repository adapter - Implements UserAccountRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 with raw SQL.
"""

import logging
from pathlib import Path

from psycopg_pool import ConnectionPool

from src.domain.models import UserAccount

logger = logging.getLogger(__name__)


class PostgresUserAccountRepository:
    """
    Implements UserAccountRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def add(self, name: str, email: str, password_hash: str) -> UserAccount:
        """
        Insert a user account and return it with its generated id.

        The email column is UNIQUE; inserting a duplicate raises
        psycopg.errors.UniqueViolation, which is left to the caller.

        Args:
            name: Display name
            email: Email address
            password_hash: bcrypt-hashed password from the domain layer

        Returns:
            The stored UserAccount (password holds the hash)
        """
        sql = """
            INSERT INTO user_accounts (name, email, password_hash)
            VALUES (%s, %s, %s)
            RETURNING id::text, name, email, password_hash
        """

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (name, email, password_hash))
            row = cursor.fetchone()
            conn.commit()

        return UserAccount(id=row[0], name=row[1], email=row[2], password=row[3])


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: src/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning("Migrations directory not found: %s", migrations_dir)
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info("Running %d migration(s)", len(sql_files))

    for sql_file in sql_files:
        logger.info("Executing migration: %s", sql_file.name)
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info("Migration complete: %s", sql_file.name)
        except Exception as e:
            logger.error("Migration failed: %s - %s", sql_file.name, e)
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
