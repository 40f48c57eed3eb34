"""
Unit tests for the outcome composer.
"""

import pytest

from src.domain import outcomes
from src.domain.exceptions import (
    AuthError,
    DuplicateIdentity,
    FieldError,
    InvalidCredentials,
    InvalidSubmission,
    MalformedSecret,
    UnexpectedFailure,
)
from src.domain.outcomes import OutcomeKind, Status
from src.domain.ports import DuplicateField


class TestEnvelope:
    """Tests for Outcome.to_envelope()."""

    def test_envelope_has_only_status_and_message(self) -> None:
        assert outcomes.registered().to_envelope() == {
            "status": "SUCCESS",
            "message": "Registration Completed Successfully",
        }

    def test_login_success(self) -> None:
        outcome = outcomes.logged_in()
        assert outcome.status is Status.SUCCESS
        assert outcome.message == "Login Successful"


class TestOutcomeFor:
    """Tests for outcome_for() mapping."""

    def test_invalid_submission_uses_field_message(self) -> None:
        outcome = outcomes.outcome_for(InvalidSubmission(FieldError("email", "Please enter a valid email address")))
        assert outcome.to_envelope() == {"status": "ERROR", "message": "Please enter a valid email address"}
        assert outcome.kind is OutcomeKind.INVALID_SUBMISSION

    @pytest.mark.parametrize(
        ("field", "message"),
        [
            (DuplicateField.EMAIL, "Email Already Exists"),
            (DuplicateField.USER_NAME, "Username Already Exists"),
        ],
    )
    def test_duplicate_messages(self, field: DuplicateField, message: str) -> None:
        outcome = outcomes.outcome_for(DuplicateIdentity(field))
        assert outcome.status is Status.ERROR
        assert outcome.message == message
        assert outcome.kind is OutcomeKind.DUPLICATE_IDENTITY

    def test_malformed_secret_indistinguishable_from_invalid_credentials(self) -> None:
        malformed = outcomes.outcome_for(MalformedSecret("jo@example.com"))
        invalid = outcomes.outcome_for(InvalidCredentials("jo@example.com"))
        assert malformed == invalid
        assert invalid.to_envelope() == {"status": "ERROR", "message": "Invalid email or password"}

    @pytest.mark.parametrize("error", [UnexpectedFailure("storage insert"), AuthError("anything")])
    def test_unrecognized_errors_are_generic(self, error: AuthError) -> None:
        outcome = outcomes.outcome_for(error)
        assert outcome.to_envelope() == {
            "status": "ERROR",
            "message": "Unknown Error Occured! Please Try Again Later",
        }
        assert outcome.kind is OutcomeKind.UNEXPECTED_FAILURE
