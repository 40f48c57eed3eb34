"""
Domain layer - Pure business logic with zero framework imports.

This package contains the credential admission core: declarative
submission validation, duplicate identity resolution, secret hashing
and the uniform outcome envelope. It defines its own port interfaces
for infrastructure abstraction.
"""

from .auth import AuthService
from .exceptions import (
    AuthError,
    DuplicateIdentity,
    FieldError,
    InvalidCredentials,
    InvalidSubmission,
    MalformedSecret,
    UnexpectedFailure,
)
from .outcomes import Outcome, OutcomeKind, Status
from .passwords import Argon2SecretHasher
from .ports import (
    DuplicateField,
    IdentityRecord,
    IdentityRepository,
    OperationalLog,
    Role,
    SecretHasher,
)

__all__ = [
    "Argon2SecretHasher",
    "AuthError",
    "AuthService",
    "DuplicateField",
    "DuplicateIdentity",
    "FieldError",
    "IdentityRecord",
    "IdentityRepository",
    "InvalidCredentials",
    "InvalidSubmission",
    "MalformedSecret",
    "OperationalLog",
    "Outcome",
    "OutcomeKind",
    "Role",
    "SecretHasher",
    "Status",
    "UnexpectedFailure",
]
