"""
Outcome composer - the uniform result envelope for both flows.

Every path through registration and login ends in exactly one Outcome.
Only status and message are ever shown to the caller; kind lets the
transport choose a status code without parsing messages.
"""

from dataclasses import dataclass
from enum import Enum

from .exceptions import (
    AuthError,
    DuplicateIdentity,
    FieldError,
    InvalidCredentials,
    InvalidSubmission,
    MalformedSecret,
)
from .ports import DuplicateField

REGISTRATION_SUCCESS_MESSAGE = "Registration Completed Successfully"
LOGIN_SUCCESS_MESSAGE = "Login Successful"
INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"
UNEXPECTED_FAILURE_MESSAGE = "Unknown Error Occured! Please Try Again Later"

DUPLICATE_MESSAGES = {
    DuplicateField.EMAIL: "Email Already Exists",
    DuplicateField.USER_NAME: "Username Already Exists",
}


class Status(str, Enum):
    """Envelope status."""

    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


class OutcomeKind(Enum):
    """Which branch produced an outcome."""

    REGISTERED = "registered"
    LOGGED_IN = "logged_in"
    INVALID_SUBMISSION = "invalid_submission"
    DUPLICATE_IDENTITY = "duplicate_identity"
    INVALID_CREDENTIALS = "invalid_credentials"
    UNEXPECTED_FAILURE = "unexpected_failure"


@dataclass(frozen=True)
class Outcome:
    status: Status
    message: str
    kind: OutcomeKind

    def to_envelope(self) -> dict[str, str]:
        return {"status": self.status.value, "message": self.message}


def invalid_submission(error: FieldError) -> Outcome:
    return Outcome(Status.ERROR, error.message, OutcomeKind.INVALID_SUBMISSION)


def duplicate_identity(field: DuplicateField) -> Outcome:
    return Outcome(Status.ERROR, DUPLICATE_MESSAGES[field], OutcomeKind.DUPLICATE_IDENTITY)


def registered() -> Outcome:
    return Outcome(Status.SUCCESS, REGISTRATION_SUCCESS_MESSAGE, OutcomeKind.REGISTERED)


def invalid_credentials() -> Outcome:
    return Outcome(Status.ERROR, INVALID_CREDENTIALS_MESSAGE, OutcomeKind.INVALID_CREDENTIALS)


def logged_in() -> Outcome:
    return Outcome(Status.SUCCESS, LOGIN_SUCCESS_MESSAGE, OutcomeKind.LOGGED_IN)


def unexpected_failure() -> Outcome:
    return Outcome(Status.ERROR, UNEXPECTED_FAILURE_MESSAGE, OutcomeKind.UNEXPECTED_FAILURE)


def outcome_for(error: AuthError) -> Outcome:
    """
    Map a domain error to its outcome.

    MalformedSecret and InvalidCredentials share one message so login
    failures never reveal whether the account exists. Anything not
    specifically recognized falls through to the generic failure.
    """
    if isinstance(error, InvalidSubmission):
        return invalid_submission(error.error)
    if isinstance(error, DuplicateIdentity):
        return duplicate_identity(error.field)
    if isinstance(error, (InvalidCredentials, MalformedSecret)):
        return invalid_credentials()
    return unexpected_failure()
