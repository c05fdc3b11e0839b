"""Shared validation utilities for the application layer."""

from collections.abc import Mapping
from typing import Any

from ..domain.clients import CreateClient
from ..domain.exceptions import ValidationError
from ..logging_utils import log_validation_error


def create_client_with_logging(payload: Mapping[str, Any]) -> CreateClient:
    """Validate a client payload, logging each violation for monitoring.

    Args:
        payload: Raw request data

    Returns:
        The validated CreateClient value

    Raises:
        ValidationError: With every violated constraint
    """
    try:
        return CreateClient.from_payload(payload)
    except ValidationError as e:
        for violation in e.violations:
            log_validation_error(
                violation.field, payload.get(violation.field), violation.message
            )
        raise
