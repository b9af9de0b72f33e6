"""Repository adapters - Database implementations."""

from .postgres import PostgresUserAccountRepository, run_migrations

__all__ = ["PostgresUserAccountRepository", "run_migrations"]
