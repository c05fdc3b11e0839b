"""RFC 7807 Problem Details responses for the API."""

from fastapi import status
from pydantic import BaseModel, Field

from ..domain import constants as domain_constants


class ErrorCodes:
    """Machine-readable codes used in field errors."""

    FIELD_REQUIRED = domain_constants.FIELD_REQUIRED
    FIELD_INVALID_TYPE = domain_constants.FIELD_INVALID_TYPE
    FIELD_INVALID_VALUE = domain_constants.FIELD_INVALID_VALUE


class FieldError(BaseModel):
    field: str = Field(description="Name of the offending field")
    code: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable explanation")


class ProblemDetail(BaseModel):
    """Base RFC 7807 problem document."""

    type: str = Field(default="about:blank", description="Problem type URI")
    title: str = Field(description="Short summary of the problem type")
    status: int = Field(description="HTTP status code")
    detail: str | None = Field(default=None, description="Occurrence explanation")
    instance: str | None = Field(default=None, description="Request path")


class ValidationProblemDetail(ProblemDetail):
    errors: list[FieldError] = Field(default_factory=list)


class ConflictProblemDetail(ProblemDetail):
    resource_type: str | None = None
    conflicting_field: str | None = None


class ProblemDetailFactory:
    """Builds the problem documents returned by the exception handlers."""

    @staticmethod
    def validation_failed(
        detail: str,
        instance: str | None = None,
        field_errors: list[dict[str, str]] | None = None,
    ) -> ValidationProblemDetail:
        return ValidationProblemDetail(
            type="/problems/validation-failed",
            title="Validation Failed",
            status=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            instance=instance,
            errors=[FieldError(**error) for error in field_errors or []],
        )

    @staticmethod
    def resource_already_exists(
        resource_type: str,
        detail: str,
        instance: str | None = None,
        conflicting_field: str | None = None,
    ) -> ConflictProblemDetail:
        return ConflictProblemDetail(
            type="/problems/resource-already-exists",
            title="Resource Already Exists",
            status=status.HTTP_409_CONFLICT,
            detail=detail,
            instance=instance,
            resource_type=resource_type,
            conflicting_field=conflicting_field,
        )

    @staticmethod
    def resource_not_found(detail: str, instance: str | None = None) -> ProblemDetail:
        return ProblemDetail(
            type="/problems/resource-not-found",
            title="Resource Not Found",
            status=status.HTTP_404_NOT_FOUND,
            detail=detail,
            instance=instance,
        )

    @staticmethod
    def payload_too_large(detail: str, instance: str | None = None) -> ProblemDetail:
        return ProblemDetail(
            type="/problems/payload-too-large",
            title="Payload Too Large",
            status=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=detail,
            instance=instance,
        )

    @staticmethod
    def unsupported_media_type(
        detail: str, instance: str | None = None
    ) -> ProblemDetail:
        return ProblemDetail(
            type="/problems/unsupported-media-type",
            title="Unsupported Media Type",
            status=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail=detail,
            instance=instance,
        )

    @staticmethod
    def internal_server_error(
        detail: str, instance: str | None = None
    ) -> ProblemDetail:
        return ProblemDetail(
            type="/problems/internal-server-error",
            title="Internal Server Error",
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
            instance=instance,
        )
