"""Client registration contract and entity."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, Self
from uuid import uuid4

from email_validator import EmailNotValidError, validate_email

from .constants import (
    FIELD_INVALID_FORMAT,
    FIELD_INVALID_TYPE,
    FIELD_REQUIRED,
    FIELD_TOO_LONG,
    MAX_CLIENT_EMAIL_LENGTH,
    MAX_CLIENT_NAME_LENGTH,
)
from .exceptions import FieldViolation, ValidationError


def _check_text(
    payload: Mapping[str, Any], field_name: str, max_length: int
) -> list[FieldViolation]:
    value = payload.get(field_name)

    if value is None:
        return [
            FieldViolation(field_name, FIELD_REQUIRED, f"{field_name} is required")
        ]

    if not isinstance(value, str):
        return [
            FieldViolation(
                field_name, FIELD_INVALID_TYPE, f"{field_name} must be a string"
            )
        ]

    if not value.strip():
        return [
            FieldViolation(field_name, FIELD_REQUIRED, f"{field_name} cannot be empty")
        ]

    if len(value) > max_length:
        return [
            FieldViolation(
                field_name,
                FIELD_TOO_LONG,
                f"{field_name} cannot be longer than {max_length} characters",
            )
        ]

    return []


def is_valid_email(value: str) -> bool:
    """Check email address syntax (no DNS lookup)."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def validate_create_client(payload: Mapping[str, Any]) -> list[FieldViolation]:
    """Validate a client creation payload.

    Pure domain validation without logging.

    Args:
        payload: Mapping with ``name`` and ``email`` entries

    Returns:
        Every violated constraint, empty when the payload is valid
    """
    violations = _check_text(payload, "name", MAX_CLIENT_NAME_LENGTH)

    email_violations = _check_text(payload, "email", MAX_CLIENT_EMAIL_LENGTH)
    violations.extend(email_violations)

    email = payload.get("email")
    if isinstance(email, str) and email.strip() and not is_valid_email(email):
        violations.append(
            FieldViolation(
                "email", FIELD_INVALID_FORMAT, "email must be a valid email address"
            )
        )

    return violations


@dataclass(frozen=True)
class CreateClient:
    """Validated input for registering a client."""

    name: str
    email: str

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> Self:
        """Build from raw input, raising one ValidationError for all violations."""
        violations = validate_create_client(payload)
        if violations:
            raise ValidationError(violations)
        return cls(name=payload["name"], email=payload["email"])


@dataclass
class Client:
    """A registered API client."""

    name: str
    email: str
    id: str = field(default_factory=lambda: uuid4().hex)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
