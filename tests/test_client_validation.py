"""Tests for the client creation contract."""

import pytest

from diveseeks.domain.clients import (
    CreateClient,
    is_valid_email,
    validate_create_client,
)
from diveseeks.domain.constants import (
    FIELD_INVALID_FORMAT,
    FIELD_INVALID_TYPE,
    FIELD_REQUIRED,
    FIELD_TOO_LONG,
)
from diveseeks.domain.exceptions import ValidationError


def _codes(violations) -> set[tuple[str, str]]:
    return {(v.field, v.code) for v in violations}


def test_valid_payload_has_no_violations():
    payload = {"name": "Acme Corporation", "email": "contact@acme.com"}

    assert validate_create_client(payload) == []


def test_empty_name_is_rejected():
    violations = validate_create_client({"name": "", "email": "a@b.com"})

    assert _codes(violations) == {("name", FIELD_REQUIRED)}


def test_whitespace_only_name_counts_as_empty():
    violations = validate_create_client({"name": "   ", "email": "a@b.com"})

    assert _codes(violations) == {("name", FIELD_REQUIRED)}


def test_malformed_email_is_rejected():
    violations = validate_create_client(
        {"name": "Acme Corporation", "email": "not-an-email"}
    )

    assert _codes(violations) == {("email", FIELD_INVALID_FORMAT)}


def test_missing_fields_are_reported_together():
    violations = validate_create_client({})

    assert _codes(violations) == {("name", FIELD_REQUIRED), ("email", FIELD_REQUIRED)}


def test_all_violations_are_reported_at_once():
    violations = validate_create_client({"name": "x" * 256, "email": "nope"})

    assert _codes(violations) == {
        ("name", FIELD_TOO_LONG),
        ("email", FIELD_INVALID_FORMAT),
    }


def test_length_boundaries():
    local = "a" * 64
    domain = ("b" * 60 + ".") * 3 + "com"
    long_email = f"{local}@{domain}"
    assert len(long_email) <= 255

    assert validate_create_client({"name": "x" * 255, "email": long_email}) == []

    too_long_email = "a" * 250 + "@acme.com"
    codes = _codes(validate_create_client({"name": "Acme", "email": too_long_email}))
    assert ("email", FIELD_TOO_LONG) in codes


def test_non_string_values_are_rejected():
    violations = validate_create_client({"name": 42, "email": ["a@b.com"]})

    assert _codes(violations) == {
        ("name", FIELD_INVALID_TYPE),
        ("email", FIELD_INVALID_TYPE),
    }


@pytest.mark.parametrize(
    "email",
    ["contact@acme.com", "first.last+tag@sub.acme.co.uk", "a@b.com"],
)
def test_email_syntax_accepts(email: str):
    assert is_valid_email(email)


@pytest.mark.parametrize(
    "email", ["plainaddress", "@acme.com", "contact@", "a b@acme.com", "a@@acme.com"]
)
def test_email_syntax_rejects(email: str):
    assert not is_valid_email(email)


def test_from_payload_builds_value():
    client = CreateClient.from_payload(
        {"name": "Acme Corporation", "email": "contact@acme.com"}
    )

    assert client == CreateClient(name="Acme Corporation", email="contact@acme.com")


def test_from_payload_raises_single_aggregated_error():
    with pytest.raises(ValidationError) as exc_info:
        CreateClient.from_payload({"name": "", "email": "not-an-email"})

    assert _codes(exc_info.value.violations) == {
        ("name", FIELD_REQUIRED),
        ("email", FIELD_INVALID_FORMAT),
    }
    assert "name" in str(exc_info.value)
    assert "email" in str(exc_info.value)
