"""
Shared fixtures for integration tests that need PostgreSQL.

Database-backed tests are skipped when the configured database
cannot be reached.
"""

from collections.abc import Generator

import psycopg
import pytest
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import run_migrations
from src.config.settings import get_settings


@pytest.fixture(scope="module")
def pool() -> Generator[ConnectionPool, None, None]:
    """Create connection pool for integration tests, with migrations applied."""
    settings = get_settings()
    try:
        psycopg.connect(settings.database_url, connect_timeout=2).close()
    except psycopg.OperationalError:
        pytest.skip("PostgreSQL not available")

    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=1,
        max_size=4,
        open=True,
    )
    run_migrations(pool)
    yield pool
    pool.close()


@pytest.fixture
def clean_database(pool: ConnectionPool) -> Generator[None, None, None]:
    """Clean user_accounts table before each test."""
    with pool.connection() as conn:
        conn.execute("DELETE FROM user_accounts")
        conn.commit()
    yield
