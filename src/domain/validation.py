"""
Declarative field validation - rules, constraints and the validator.

A RuleSet is an ordered list of FieldRules plus optional CrossFieldRules.
Validation is a pure function from a raw submission (any mapping of
field name to value) to a sanitized mapping, or the first violation.

Evaluation Order
================

For each field, in declaration order:
1. Missing field -> declared default, or the field's required message
2. Type check    -> the field's type message
3. Transforms    -> applied in order (e.g. trim, then lowercase)
4. Constraints   -> checked in order against the transformed value;
                    the first failing constraint ends the field

Cross-field rules run only after every field they reference has
passed its own rules, and attach their error to their own path.
"""

import re
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from email_validator import EmailNotValidError, validate_email

from .exceptions import FieldError, InvalidSubmission

MISSING: Any = object()

trim: Callable[[str], str] = str.strip
lowercase: Callable[[str], str] = str.lower


@dataclass(frozen=True)
class Constraint:
    """A predicate over a transformed value and the message it fails with."""

    check: Callable[[Any], bool]
    message: str


@dataclass(frozen=True)
class FieldRule:
    """Validation and transformation rule for one submission field."""

    name: str
    required_message: str
    type_message: str
    transforms: tuple[Callable[[Any], Any], ...] = ()
    constraints: tuple[Constraint, ...] = ()
    default: Any = MISSING
    value_type: type = str


@dataclass(frozen=True)
class CrossFieldRule:
    """Rule over several already-validated fields, reported on one path."""

    fields: tuple[str, ...]
    predicate: Callable[[Mapping[str, Any]], bool]
    message: str
    path: str


@dataclass(frozen=True)
class RuleSet:
    """Ordered field rules followed by cross-field rules."""

    fields: tuple[FieldRule, ...]
    cross_field: tuple[CrossFieldRule, ...] = ()

    def extend(
        self, *fields: FieldRule, cross_field: Iterable[CrossFieldRule] = ()
    ) -> "RuleSet":
        """Return a new RuleSet with extra fields and cross-field rules appended."""
        return RuleSet(
            fields=self.fields + fields,
            cross_field=self.cross_field + tuple(cross_field),
        )


def min_length(limit: int, message: str) -> Constraint:
    return Constraint(lambda value: len(value) >= limit, message)


def max_length(limit: int, message: str) -> Constraint:
    return Constraint(lambda value: len(value) <= limit, message)


def matches(pattern: str, message: str) -> Constraint:
    """Whole-string regular expression constraint."""
    compiled = re.compile(pattern)
    return Constraint(lambda value: compiled.fullmatch(value) is not None, message)


def one_of(allowed: Iterable[str], message: str) -> Constraint:
    choices = frozenset(allowed)
    return Constraint(lambda value: value in choices, message)


def _is_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def email_format(message: str) -> Constraint:
    return Constraint(_is_email, message)


def password_complexity(minimum: int, message: str) -> Constraint:
    """
    Length plus lowercase, uppercase and digit lookaheads as one constraint.

    Any missing condition yields the same single message.
    """
    compiled = re.compile(rf"(?=.*[a-z])(?=.*[A-Z])(?=.*\d).{{{minimum},}}", re.DOTALL)
    return Constraint(lambda value: compiled.fullmatch(value) is not None, message)


def _check_field(rule: FieldRule, raw: Mapping[str, Any]) -> tuple[Any, FieldError | None]:
    """Run one field rule. Returns (sanitized value, None) or (None, error)."""
    if rule.name not in raw:
        if rule.default is not MISSING:
            return rule.default, None
        return None, FieldError(rule.name, rule.required_message)

    value = raw[rule.name]
    if not isinstance(value, rule.value_type):
        return None, FieldError(rule.name, rule.type_message)

    for transform in rule.transforms:
        value = transform(value)

    for constraint in rule.constraints:
        if not constraint.check(value):
            return None, FieldError(rule.name, constraint.message)

    return value, None


def _evaluate(raw: Mapping[str, Any], rules: RuleSet, fail_fast: bool) -> tuple[dict[str, Any], list[FieldError]]:
    sanitized: dict[str, Any] = {}
    errors: list[FieldError] = []

    for rule in rules.fields:
        value, error = _check_field(rule, raw)
        if error is not None:
            errors.append(error)
            if fail_fast:
                return sanitized, errors
        else:
            sanitized[rule.name] = value

    for cross in rules.cross_field:
        if not all(name in sanitized for name in cross.fields):
            continue
        if not cross.predicate(sanitized):
            errors.append(FieldError(cross.path, cross.message))
            if fail_fast:
                return sanitized, errors

    return sanitized, errors


def validate(raw: Mapping[str, Any], rules: RuleSet) -> dict[str, Any]:
    """
    Validate a raw submission, failing fast on the first violation.

    Fields not named by the rule set are dropped from the result.

    Args:
        raw: Field name to value mapping, as received
        rules: Rule set to apply

    Returns:
        Sanitized field values keyed by field name

    Raises:
        InvalidSubmission: Carrying the first field error encountered
    """
    sanitized, errors = _evaluate(raw, rules, fail_fast=True)
    if errors:
        raise InvalidSubmission(errors[0])
    return sanitized


def collect_errors(raw: Mapping[str, Any], rules: RuleSet) -> list[FieldError]:
    """Return the first violation of every failing field, then cross-field violations."""
    _, errors = _evaluate(raw, rules, fail_fast=False)
    return errors
