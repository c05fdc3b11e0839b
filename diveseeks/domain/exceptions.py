"""Domain-specific exceptions."""

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class FieldViolation:
    """A single failed constraint on an input field."""

    field: str
    code: str
    message: str


class DomainError(Exception):
    """Base exception for domain errors."""

    pass


class ValidationError(DomainError):
    """Raised when domain validation fails.

    Carries every violation found, not only the first one.
    """

    def __init__(self, violations: Iterable[FieldViolation]):
        self.violations: list[FieldViolation] = list(violations)
        super().__init__(
            "; ".join(f"{v.field}: {v.message}" for v in self.violations)
            or "Validation failed"
        )


class ClientAlreadyExistsError(DomainError):
    """Raised when attempting to register a client with a taken email."""

    pass


class UnknownEnumerationError(DomainError):
    """Raised when an enumeration name is not registered."""

    pass


class FileTooLargeError(DomainError):
    """Raised when an upload exceeds the configured size limit."""

    def __init__(self, size: int, max_size: int):
        self.size = size
        self.max_size = max_size
        super().__init__(f"File exceeds the maximum size of {max_size} bytes")


class UnsupportedFileTypeError(DomainError):
    """Raised when an upload has a content type that is not accepted."""

    def __init__(self, content_type: str | None):
        self.content_type = content_type
        super().__init__(f"File type {content_type!r} is not allowed")
