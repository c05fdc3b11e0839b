"""Centralized error handling for the presentation layer."""

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

from ..domain.exceptions import (
    ClientAlreadyExistsError,
    DomainError,
    FileTooLargeError,
    UnknownEnumerationError,
    UnsupportedFileTypeError,
    ValidationError,
)
from .problem_details import (
    ConflictProblemDetail,
    ErrorCodes,
    ProblemDetail,
    ProblemDetailFactory,
    ValidationProblemDetail,
)

# Pydantic error types -> field error codes
_PYDANTIC_ERROR_CODES = {
    "missing": ErrorCodes.FIELD_REQUIRED,
    "int_parsing": ErrorCodes.FIELD_INVALID_TYPE,
}


def problem_response(problem: ProblemDetail) -> JSONResponse:
    return JSONResponse(
        status_code=problem.status,
        content=problem.model_dump(exclude_none=True),
        media_type="application/problem+json",
    )


def handle_domain_error(error: DomainError, request: Request) -> JSONResponse:
    """Convert domain errors to RFC 7807 Problem Details responses."""
    instance = str(request.url.path)
    problem: ProblemDetail | ValidationProblemDetail | ConflictProblemDetail

    if isinstance(error, ValidationError):
        problem = ProblemDetailFactory.validation_failed(
            detail="Validation failed",
            instance=instance,
            field_errors=[
                {"field": v.field, "code": v.code, "message": v.message}
                for v in error.violations
            ],
        )
    elif isinstance(error, ClientAlreadyExistsError):
        problem = ProblemDetailFactory.resource_already_exists(
            resource_type="client",
            detail=str(error),
            instance=instance,
            conflicting_field="email",
        )
    elif isinstance(error, UnknownEnumerationError):
        problem = ProblemDetailFactory.resource_not_found(
            detail=str(error), instance=instance
        )
    elif isinstance(error, FileTooLargeError):
        problem = ProblemDetailFactory.payload_too_large(
            detail=str(error), instance=instance
        )
    elif isinstance(error, UnsupportedFileTypeError):
        problem = ProblemDetailFactory.unsupported_media_type(
            detail=str(error), instance=instance
        )
    else:
        problem = ProblemDetailFactory.internal_server_error(
            detail="An unexpected error occurred. Please try again.",
            instance=instance,
        )

    return problem_response(problem)


def extract_request_field_errors(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    """Flatten Pydantic request validation errors into field errors."""
    field_errors = []
    for error in errors:
        field_name = ".".join(
            str(loc) for loc in error["loc"] if loc not in ("body", "query")
        )
        field_errors.append(
            {
                "field": field_name or "unknown",
                "code": _PYDANTIC_ERROR_CODES.get(
                    error["type"], ErrorCodes.FIELD_INVALID_VALUE
                ),
                "message": error["msg"],
            }
        )
    return field_errors
