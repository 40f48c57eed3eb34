"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Request
from psycopg_pool import ConnectionPool

from src.adapters.oplog.console import ConsoleOperationalLog
from src.adapters.repository.postgres import PostgresIdentityRepository
from src.domain.auth import AuthService
from src.domain.passwords import Argon2SecretHasher

# Module-level singletons - both are stateless apart from the cached dummy hash
_operational_log = ConsoleOperationalLog()
_secret_hasher = Argon2SecretHasher()


def get_pool(request: Request) -> ConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_repository(request: Request) -> PostgresIdentityRepository:
    """Create repository with connection pool from app state."""
    pool = get_pool(request)
    return PostgresIdentityRepository(pool)


def get_operational_log() -> ConsoleOperationalLog:
    """Get console operational log (singleton)."""
    return _operational_log


def get_secret_hasher() -> Argon2SecretHasher:
    """Get Argon2id secret hasher (singleton)."""
    return _secret_hasher


def get_auth_service(request: Request) -> AuthService:
    """
    Create auth service with injected dependencies.

    Wires together the repository, hasher and operational log for the
    domain service.
    """
    return AuthService(
        repository=get_repository(request),
        hasher=get_secret_hasher(),
        log=get_operational_log(),
    )
