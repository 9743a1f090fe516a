# This file declares the field rules applied to create requests.
# Each entity owns a tuple of `FieldRule` entries: field name, required flag, predicate, and message.
# `validate_payload` collects every violation so clients see all problems in one response.
# Fields not named by a rule (including `id`) are dropped and never reach the store.

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import EmailStr, TypeAdapter, ValidationError

_EMAIL_ADAPTER = TypeAdapter(EmailStr)


@dataclass(frozen=True)
class FieldRule:
    name: str
    required: bool
    predicate: Callable[[Any], bool]
    message: str


def _non_empty_string(max_length: int) -> Callable[[Any], bool]:
    def check(value: Any) -> bool:
        return isinstance(value, str) and 0 < len(value.strip()) <= max_length

    return check


def _email(value: Any) -> bool:
    if not isinstance(value, str) or len(value) > 255:
        return False
    try:
        _EMAIL_ADAPTER.validate_python(value.strip())
    except ValidationError:
        return False
    return True


CUSTOMER_RULES: tuple[FieldRule, ...] = (
    FieldRule("firstname", True, _non_empty_string(255), "This value should be a non-empty string."),
    FieldRule("lastname", True, _non_empty_string(255), "This value should be a non-empty string."),
    FieldRule("email", True, _email, "This value is not a valid email address."),
)

USER_RULES: tuple[FieldRule, ...] = (
    FieldRule("username", True, _non_empty_string(180), "This value should be a non-empty string."),
    FieldRule("email", True, _email, "This value is not a valid email address."),
    FieldRule("firstname", False, _non_empty_string(255), "This value should be a non-empty string."),
    FieldRule("lastname", False, _non_empty_string(255), "This value should be a non-empty string."),
)


def validate_payload(
    payload: Mapping[str, Any], rules: tuple[FieldRule, ...]
) -> tuple[dict[str, Any], list[dict[str, str]]]:
    """Return (cleaned values, violations) for a request body."""

    values: dict[str, Any] = {}
    violations: list[dict[str, str]] = []

    for rule in rules:
        raw = payload.get(rule.name)
        if raw is None:
            if rule.required:
                violations.append({"property_path": rule.name, "message": "This value should not be blank."})
            else:
                values[rule.name] = None
            continue
        if not rule.predicate(raw):
            violations.append({"property_path": rule.name, "message": rule.message})
            continue
        values[rule.name] = raw.strip() if isinstance(raw, str) else raw

    return values, violations
