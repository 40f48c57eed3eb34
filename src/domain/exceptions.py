"""
Domain exceptions - Semantic error types for credential admission.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
Every flow catches AuthError at its boundary and turns it into an
Outcome; nothing here ever reaches the caller as an exception.
"""

from dataclasses import dataclass

from .ports import DuplicateField


@dataclass(frozen=True)
class FieldError:
    """A single rule violation addressed to one submission field."""

    field: str
    message: str


class AuthError(Exception):
    """Base class for credential admission domain errors."""

    pass


class InvalidSubmission(AuthError):
    """Submission failed a field or cross-field rule."""

    def __init__(self, error: FieldError) -> None:
        super().__init__(f"{error.field}: {error.message}")
        self.error = error


class DuplicateIdentity(AuthError):
    """Email or user name already belongs to a stored identity."""

    def __init__(self, field: DuplicateField) -> None:
        super().__init__(field.value)
        self.field = field


class MalformedSecret(AuthError):
    """Stored secret is not a hash this system produced."""

    pass


class InvalidCredentials(AuthError):
    """Wrong email or password. Deliberately says nothing about which."""

    pass


class UnexpectedFailure(AuthError):
    """A collaborator failed. The cause is chained, never shown to callers."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation} failed")
        self.operation = operation
