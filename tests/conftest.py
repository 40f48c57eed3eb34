"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- A fast Argon2id hasher (low cost parameters, same hash format)
- An in-memory identity repository that enforces both unique keys
- A PostgreSQL connection pool, skipping when no database is reachable
"""

from collections.abc import Generator

import pytest
from argon2 import PasswordHasher, Type
from psycopg_pool import ConnectionPool, PoolTimeout

from src.adapters.repository.postgres import run_migrations
from src.config.settings import get_settings
from src.domain.exceptions import DuplicateIdentity
from src.domain.passwords import Argon2SecretHasher
from src.domain.ports import DuplicateField, IdentityRecord


class InMemoryIdentityRepository:
    """IdentityRepository fake with the same unique keys as the users table."""

    def __init__(self, records: list[IdentityRecord] | None = None) -> None:
        self.records: list[IdentityRecord] = list(records or [])

    def find_by_email_or_user_name(self, email: str, user_name: str) -> IdentityRecord | None:
        by_email = [r for r in self.records if r.email == email]
        by_user_name = [r for r in self.records if r.user_name == user_name]
        matches = by_email + by_user_name
        return matches[0] if matches else None

    def find_by_email(self, email: str) -> IdentityRecord | None:
        return next((r for r in self.records if r.email == email), None)

    def insert(self, record: IdentityRecord) -> None:
        if any(r.email == record.email for r in self.records):
            raise DuplicateIdentity(DuplicateField.EMAIL)
        if any(r.user_name == record.user_name for r in self.records):
            raise DuplicateIdentity(DuplicateField.USER_NAME)
        self.records.append(record)


@pytest.fixture
def hasher() -> Argon2SecretHasher:
    """Argon2id hasher with minimal cost so tests stay fast."""
    return Argon2SecretHasher(
        PasswordHasher(time_cost=1, memory_cost=8, parallelism=1, hash_len=16, salt_len=8, type=Type.ID)
    )


@pytest.fixture
def memory_repository() -> InMemoryIdentityRepository:
    return InMemoryIdentityRepository()


@pytest.fixture(scope="session")
def pool() -> Generator[ConnectionPool, None, None]:
    """Connection pool against the configured database, with migrations applied."""
    settings = get_settings()
    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=1,
        max_size=10,
        open=True,
    )
    try:
        pool.wait(timeout=5)
    except PoolTimeout:
        pool.close()
        pytest.skip(f"PostgreSQL not reachable at {settings.database_url}")
    run_migrations(pool)
    yield pool
    pool.close()


@pytest.fixture
def clean_database(pool: ConnectionPool) -> Generator[None, None, None]:
    """Empty the users table before each test that asks for it."""
    with pool.connection() as conn:
        conn.execute("DELETE FROM users")
        conn.commit()
    yield
