"""
Unit tests for duplicate identity resolution.
"""

from unittest.mock import Mock

from src.domain.identity import resolve_duplicate
from src.domain.ports import DuplicateField, IdentityRecord, Role
from src.domain.rules import RegistrationData

IDENTITY = RegistrationData(
    name="Jo",
    user_name="jo_1",
    email="jo@example.com",
    password="Abcdefg1",
    role=Role.APPLICANT,
)


def stored(email: str, user_name: str) -> IdentityRecord:
    return IdentityRecord(
        name="Existing",
        user_name=user_name,
        email=email,
        password_hash="$argon2id$v=19$m=8,t=1,p=1$c2FsdA$aGFzaA",
        role=Role.EMPLOYER,
    )


class TestResolveDuplicate:
    """Tests for resolve_duplicate."""

    def test_issues_single_or_query(self) -> None:
        repo = Mock()
        repo.find_by_email_or_user_name.return_value = None

        resolve_duplicate(IDENTITY, repo)

        repo.find_by_email_or_user_name.assert_called_once_with("jo@example.com", "jo_1")

    def test_no_match_returns_none(self) -> None:
        repo = Mock()
        repo.find_by_email_or_user_name.return_value = None
        assert resolve_duplicate(IDENTITY, repo) is None

    def test_email_collision(self) -> None:
        repo = Mock()
        repo.find_by_email_or_user_name.return_value = stored("jo@example.com", "someone_else")
        assert resolve_duplicate(IDENTITY, repo) is DuplicateField.EMAIL

    def test_user_name_collision(self) -> None:
        repo = Mock()
        repo.find_by_email_or_user_name.return_value = stored("other@example.com", "jo_1")
        assert resolve_duplicate(IDENTITY, repo) is DuplicateField.USER_NAME

    def test_email_takes_precedence_when_both_match(self) -> None:
        repo = Mock()
        repo.find_by_email_or_user_name.return_value = stored("jo@example.com", "jo_1")
        assert resolve_duplicate(IDENTITY, repo) is DuplicateField.EMAIL

    def test_email_precedence_across_records(self, memory_repository) -> None:
        """With one record per field, the email collision is reported."""
        memory_repository.records = [
            stored("other@example.com", "jo_1"),
            stored("jo@example.com", "different"),
        ]
        assert resolve_duplicate(IDENTITY, memory_repository) is DuplicateField.EMAIL
