"""
Rule sets for registration and login submissions.

Field names match the submission keys (name, userName, email, password,
role, confirmPassword). Parsed results are immutable sanitized identities.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .ports import Role
from .validation import (
    CrossFieldRule,
    FieldRule,
    RuleSet,
    email_format,
    lowercase,
    matches,
    max_length,
    min_length,
    one_of,
    password_complexity,
    trim,
    validate,
)

PASSWORD_COMPLEXITY_MESSAGE = (
    "Password must be at least 8 characters long and contain at least one "
    "lowercase letter, one uppercase letter and one number"
)
PASSWORD_MISMATCH_MESSAGE = "Passwords don't match"

_EMAIL = FieldRule(
    name="email",
    required_message="Email is required",
    type_message="Email must be a string",
    transforms=(trim, lowercase),
    constraints=(
        email_format("Please enter a valid email address"),
        max_length(255, "Email must not exceed 255 characters"),
    ),
)

REGISTRATION_RULES = RuleSet(
    fields=(
        FieldRule(
            name="name",
            required_message="Name is required",
            type_message="Name must be a string",
            transforms=(trim,),
            constraints=(
                min_length(2, "Name must be at least 2 characters long"),
                max_length(255, "Name must not exceed 255 characters"),
            ),
        ),
        FieldRule(
            name="userName",
            required_message="Username is required",
            type_message="Username must be a string",
            transforms=(trim,),
            constraints=(
                min_length(3, "Username must be at least 3 characters long"),
                max_length(255, "Username must not exceed 255 characters"),
                matches(
                    r"[a-zA-Z0-9_-]+",
                    "Username can only contain letters, numbers, underscores, and hyphens",
                ),
            ),
        ),
        _EMAIL,
        FieldRule(
            name="password",
            required_message="Password is required",
            type_message="Password must be a string",
            transforms=(trim,),
            constraints=(password_complexity(8, PASSWORD_COMPLEXITY_MESSAGE),),
        ),
        FieldRule(
            name="role",
            required_message="Role is required",
            type_message="Role must be either an applicant or employer",
            constraints=(
                one_of(
                    (role.value for role in Role),
                    "Role must be either an applicant or employer",
                ),
            ),
            default=Role.APPLICANT.value,
        ),
    ),
)

REGISTRATION_WITH_CONFIRMATION_RULES = REGISTRATION_RULES.extend(
    FieldRule(
        name="confirmPassword",
        required_message="Please confirm your password",
        type_message="Password confirmation must be a string",
        transforms=(trim,),
    ),
    cross_field=(
        CrossFieldRule(
            fields=("password", "confirmPassword"),
            predicate=lambda data: data["password"] == data["confirmPassword"],
            message=PASSWORD_MISMATCH_MESSAGE,
            path="confirmPassword",
        ),
    ),
)

LOGIN_RULES = RuleSet(
    fields=(
        _EMAIL,
        FieldRule(
            name="password",
            required_message="Password is required",
            type_message="Password must be a string",
            transforms=(trim,),
            constraints=(min_length(8, "Password must be at least 8 characters long"),),
        ),
    ),
)


@dataclass(frozen=True)
class RegistrationData:
    """Sanitized registration submission."""

    name: str
    user_name: str
    email: str
    password: str
    role: Role


@dataclass(frozen=True)
class LoginData:
    """Sanitized login submission."""

    email: str
    password: str


def parse_registration(
    raw: Mapping[str, Any], rules: RuleSet = REGISTRATION_RULES
) -> RegistrationData:
    """
    Validate a registration submission.

    Raises:
        InvalidSubmission: On the first rule violation
    """
    fields = validate(raw, rules)
    return RegistrationData(
        name=fields["name"],
        user_name=fields["userName"],
        email=fields["email"],
        password=fields["password"],
        role=Role(fields["role"]),
    )


def parse_login(raw: Mapping[str, Any]) -> LoginData:
    """
    Validate a login submission.

    Raises:
        InvalidSubmission: On the first rule violation
    """
    fields = validate(raw, LOGIN_RULES)
    return LoginData(email=fields["email"], password=fields["password"])
