import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    DEFAULT_MAX_FILE_SIZE,
    DEFAULT_NODE_ENV,
    DEFAULT_PORT,
    DEFAULT_THROTTLE_LIMIT,
    DEFAULT_THROTTLE_TTL,
    DEFAULT_UPLOAD_DEST,
    PRODUCTION_ENV,
)

# Field name -> environment variable
ENV_KEYS: Final = {
    "port": "PORT",
    "node_env": "NODE_ENV",
    "max_file_size": "MAX_FILE_SIZE",
    "upload_dest": "UPLOAD_DEST",
    "throttle_ttl": "THROTTLE_TTL",
    "throttle_limit": "THROTTLE_LIMIT",
}

# Plain base-10 integer, ASCII digits only
_INT_PATTERN: Final = re.compile(r"[+-]?[0-9]+")


def _parse_int(value: Any) -> int | None:
    """Coerce an environment value to an int, returning None when it can't be."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        return int(text) if _INT_PATTERN.fullmatch(text) else None
    return None


class AppConfig(BaseModel):
    """Resolved application configuration.

    Every field has a value: absent, empty, zero or malformed input falls back
    to the field default instead of raising. No range checks are applied.
    """

    model_config = ConfigDict(frozen=True)

    port: int = Field(default=DEFAULT_PORT, description="HTTP listen port")
    node_env: str = Field(default=DEFAULT_NODE_ENV, description="Environment name")
    max_file_size: int = Field(
        default=DEFAULT_MAX_FILE_SIZE, description="Upload size limit in bytes"
    )
    upload_dest: str = Field(
        default=DEFAULT_UPLOAD_DEST, description="Directory for uploaded files"
    )
    throttle_ttl: int = Field(
        default=DEFAULT_THROTTLE_TTL, description="Throttle window in seconds"
    )
    throttle_limit: int = Field(
        default=DEFAULT_THROTTLE_LIMIT, description="Requests allowed per window"
    )

    @field_validator(
        "port", "max_file_size", "throttle_ttl", "throttle_limit", mode="before"
    )
    @classmethod
    def number_or_default(cls, v: Any, info: ValidationInfo) -> int:
        """Use the parsed number when it is non-zero, the field default otherwise."""
        parsed = _parse_int(v)
        if parsed:
            return parsed
        return cls.model_fields[info.field_name].default  # type: ignore[index]

    @field_validator("node_env", "upload_dest", mode="before")
    @classmethod
    def text_or_default(cls, v: Any, info: ValidationInfo) -> str:
        """Use the value when it is a non-empty string, the field default otherwise."""
        if isinstance(v, str) and v:
            return v
        return cls.model_fields[info.field_name].default  # type: ignore[index]

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.node_env == DEFAULT_NODE_ENV

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.node_env == PRODUCTION_ENV

    @property
    def upload_path(self) -> Path:
        return Path(self.upload_dest)


class EnvironmentSettings(BaseSettings):
    """Raw configuration values read from environment variables and .env files."""

    port: str | None = None
    node_env: str | None = None
    max_file_size: str | None = None
    upload_dest: str | None = None
    throttle_ttl: str | None = None
    throttle_limit: str | None = None

    # Pydantic Settings configuration
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )


def resolve_app_config(environ: Mapping[str, str] | None = None) -> AppConfig:
    """Resolve the application configuration.

    Args:
        environ: Environment snapshot keyed by variable name. When omitted, the
            process environment and the optional .env file are read.

    Returns:
        Fully populated AppConfig
    """
    if environ is None:
        raw = EnvironmentSettings().model_dump(exclude_none=True)
    else:
        raw = {field: environ[key] for field, key in ENV_KEYS.items() if key in environ}
    return AppConfig.model_validate(raw)
