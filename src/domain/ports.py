"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure, together with the value types that cross them.
Adapters implement these protocols.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class Role(str, Enum):
    """Account roles accepted at registration."""

    APPLICANT = "applicant"
    EMPLOYER = "employer"


class DuplicateField(Enum):
    """
    Unique attribute a registration collided on.

    Only one field is ever reported per collision; EMAIL takes
    precedence when the colliding record matches on email.
    """

    EMAIL = "email"
    USER_NAME = "userName"


@dataclass(frozen=True)
class IdentityRecord:
    """
    Stored identity as owned by the storage collaborator.

    Keyed uniquely by email and independently by user_name.
    password_hash never holds a plaintext secret.
    """

    name: str
    user_name: str
    email: str
    password_hash: str
    role: Role


class IdentityRepository(Protocol):
    """Port interface for identity persistence."""

    def find_by_email_or_user_name(self, email: str, user_name: str) -> IdentityRecord | None:
        """
        Find any record matching the email OR the user name.

        Records matching on email must be returned ahead of records
        matching only on user name.

        Args:
            email: Normalized email address
            user_name: Sanitized user name

        Returns:
            First matching record, or None
        """
        ...

    def find_by_email(self, email: str) -> IdentityRecord | None:
        """
        Find the record registered under an email address.

        Args:
            email: Normalized email address

        Returns:
            Matching record, or None
        """
        ...

    def insert(self, record: IdentityRecord) -> None:
        """
        Persist a new identity.

        Args:
            record: Identity with an already-hashed secret

        Raises:
            DuplicateIdentity: If a unique constraint on email or
                user name rejects the insert
        """
        ...


class SecretHasher(Protocol):
    """Port interface for one-way secret hashing."""

    @property
    def dummy_hash(self) -> str:
        """A valid hash of a throwaway secret, verified against when no account exists."""
        ...

    def hash(self, plaintext: str) -> str:
        """Hash a plaintext secret with a fresh random salt."""
        ...

    def is_well_formed(self, stored: object) -> bool:
        """Return True if a stored value looks like a hash this hasher produced."""
        ...

    def verify(self, stored: object, plaintext: str) -> bool:
        """Check a plaintext secret against a stored hash. Never raises."""
        ...


class OperationalLog(Protocol):
    """Port interface for operational event recording."""

    def record(self, event: str, detail: str) -> None:
        """
        Record an operational event.

        Args:
            event: Short event name (e.g. "unexpected_failure")
            detail: Human-readable detail, never containing secrets
        """
        ...
