"""
Shared fixtures for adversarial tests.

Provides common test infrastructure for race condition and enumeration tests.
"""

from unittest.mock import Mock

import pytest

from src.domain.auth import AuthService


@pytest.fixture
def operational_log() -> Mock:
    return Mock()


@pytest.fixture
def memory_service(memory_repository, hasher, operational_log) -> AuthService:
    """Auth service over the in-memory repository."""
    return AuthService(repository=memory_repository, hasher=hasher, log=operational_log)
