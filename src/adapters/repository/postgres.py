"""
PostgreSQL repository adapter - Implements IdentityRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 with raw SQL.

Uniqueness Enforcement
----------------------
The domain's duplicate check runs before the insert and is not atomic
with it. The UNIQUE constraints on users.email and users.user_name are
the real guard: a losing concurrent insert fails with UniqueViolation,
which is translated here into the domain's DuplicateIdentity naming the
violated column. Violations of any other constraint propagate unchanged.
"""

import logging
from pathlib import Path

from psycopg.errors import UniqueViolation
from psycopg_pool import ConnectionPool

from src.domain.exceptions import DuplicateIdentity
from src.domain.ports import DuplicateField, IdentityRecord, Role

logger = logging.getLogger(__name__)

# Constraint names declared in migrations/001_create_users.sql
_UNIQUE_CONSTRAINTS = {
    "users_email_key": DuplicateField.EMAIL,
    "users_user_name_key": DuplicateField.USER_NAME,
}

_COLUMNS = "name, user_name, email, password_hash, role"


def _to_record(row: tuple) -> IdentityRecord:
    return IdentityRecord(
        name=row[0],
        user_name=row[1],
        email=row[2],
        password_hash=row[3],
        role=Role(row[4]),
    )


class PostgresIdentityRepository:
    """
    Implements IdentityRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def find_by_email_or_user_name(self, email: str, user_name: str) -> IdentityRecord | None:
        """
        Find the first user matching the email or the user name.

        Email matches sort first so that when one record holds the email
        and another holds the user name, the email collision is reported.
        """
        sql = f"""
            SELECT {_COLUMNS}
            FROM users
            WHERE email = %s OR user_name = %s
            ORDER BY (email = %s) DESC, id
            LIMIT 1
        """

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (email, user_name, email))
            row = cursor.fetchone()

        return _to_record(row) if row is not None else None

    def find_by_email(self, email: str) -> IdentityRecord | None:
        """Find the user registered under a normalized email."""
        sql = f"""
            SELECT {_COLUMNS}
            FROM users
            WHERE email = %s
        """

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (email,))
            row = cursor.fetchone()

        return _to_record(row) if row is not None else None

    def insert(self, record: IdentityRecord) -> None:
        """
        Insert a new user.

        Raises:
            DuplicateIdentity: If the email or user_name unique constraint
                rejects the row
        """
        sql = f"""
            INSERT INTO users ({_COLUMNS})
            VALUES (%s, %s, %s, %s, %s)
        """

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(
                    sql,
                    (
                        record.name,
                        record.user_name,
                        record.email,
                        record.password_hash,
                        record.role.value,
                    ),
                )
                conn.commit()
        except UniqueViolation as e:
            field = _UNIQUE_CONSTRAINTS.get(e.diag.constraint_name or "")
            if field is None:
                raise
            logger.info("Insert rejected by unique constraint %s", e.diag.constraint_name)
            raise DuplicateIdentity(field) from e


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

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info(f"Migration complete: {sql_file.name}")
        except Exception as e:
            logger.error(f"Migration failed: {sql_file.name} - {e}")
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
