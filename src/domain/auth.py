"""
Authentication domain service - registration and login flows.

Registration
============

    submission -> validate -> duplicate check -> hash -> insert -> REGISTERED

Login
=====

    submission -> validate -> lookup by email -> guard -> verify -> LOGGED_IN

Every failure is raised as an AuthError inside the flow and turned into
an Outcome at the flow boundary; no exception leaves register() or
login(). Collaborator failures are wrapped as UnexpectedFailure with the
real cause chained, so the operational log sees the cause and the caller
sees one generic message.

The duplicate check and the insert are not atomic. Two concurrent
registrations can both pass the check; the loser is rejected by the
storage unique constraints, which the repository reports as
DuplicateIdentity, so both paths yield the same outcome.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

from . import outcomes
from .exceptions import (
    AuthError,
    DuplicateIdentity,
    InvalidCredentials,
    InvalidSubmission,
    MalformedSecret,
    UnexpectedFailure,
)
from .identity import resolve_duplicate
from .outcomes import Outcome
from .ports import IdentityRecord, IdentityRepository, OperationalLog, SecretHasher
from .rules import REGISTRATION_RULES, parse_login, parse_registration
from .validation import RuleSet

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class AuthService:
    """
    Domain service for credential admission.

    Holds no per-request state; one instance may serve concurrent calls.
    """

    repository: IdentityRepository
    hasher: SecretHasher
    log: OperationalLog

    def register(self, submission: Mapping[str, Any], rules: RuleSet = REGISTRATION_RULES) -> Outcome:
        """
        Register a new account.

        Args:
            submission: Raw field mapping (name, userName, email, password, role)
            rules: Registration rule set; pass the confirmation variant
                when the submission carries confirmPassword

        Returns:
            REGISTERED on success, otherwise the matching error outcome
        """
        try:
            identity = parse_registration(submission, rules)

            duplicate = self._call("storage lookup", resolve_duplicate, identity, self.repository)
            if duplicate is not None:
                raise DuplicateIdentity(duplicate)

            password_hash = self._call("secret hashing", self.hasher.hash, identity.password)
            record = IdentityRecord(
                name=identity.name,
                user_name=identity.user_name,
                email=identity.email,
                password_hash=password_hash,
                role=identity.role,
            )
            self._call("storage insert", self.repository.insert, record)
        except AuthError as exc:
            return self._fail(exc)

        return outcomes.registered()

    def login(self, submission: Mapping[str, Any]) -> Outcome:
        """
        Check an email and password against the stored account.

        Unknown email, malformed stored hash and wrong password all
        produce the same INVALID_CREDENTIALS outcome.

        Args:
            submission: Raw field mapping (email, password)

        Returns:
            LOGGED_IN on success, otherwise the matching error outcome
        """
        try:
            credentials = parse_login(submission)

            record = self._call("storage lookup", self.repository.find_by_email, credentials.email)
            if record is None:
                self._verify_dummy(credentials.password)
                raise InvalidCredentials(credentials.email)

            if not self.hasher.is_well_formed(record.password_hash):
                self._verify_dummy(credentials.password)
                raise MalformedSecret(credentials.email)

            matched = self._call(
                "secret verification", self.hasher.verify, record.password_hash, credentials.password
            )
            if not matched:
                raise InvalidCredentials(credentials.email)
        except AuthError as exc:
            return self._fail(exc)

        return outcomes.logged_in()

    def _call(self, operation: str, func: Callable[..., T], *args: Any) -> T:
        """Invoke a collaborator, wrapping unrecognized failures as UnexpectedFailure."""
        try:
            return func(*args)
        except AuthError:
            raise
        except Exception as exc:
            raise UnexpectedFailure(operation) from exc

    def _verify_dummy(self, password: str) -> None:
        """Burn one verification so rejected logins cost the same time as real ones."""
        self._call("secret verification", lambda: self.hasher.verify(self.hasher.dummy_hash, password))

    def _fail(self, error: AuthError) -> Outcome:
        """Record the real cause operationally and compose the caller's outcome."""
        if isinstance(error, InvalidSubmission):
            self._record("validation_failed", error.error.field)
        elif isinstance(error, DuplicateIdentity):
            self._record("duplicate_identity", error.field.value)
        elif isinstance(error, MalformedSecret):
            self._record("malformed_secret", f"Invalid password hash stored for user: {error}")
        elif isinstance(error, InvalidCredentials):
            self._record("invalid_credentials", str(error))
        else:
            cause = error.__cause__
            detail = str(error) if cause is None else f"{error}: {type(cause).__name__}: {cause}"
            self._record("unexpected_failure", detail)
        return outcomes.outcome_for(error)

    def _record(self, event: str, detail: str) -> None:
        """Fire-and-forget write to the operational log."""
        try:
            self.log.record(event, detail)
        except Exception:
            logger.warning("Operational log unavailable, dropped event %s", event, exc_info=True)
