"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from podlens.constants.defaults import (
    LOG_LINE_LIMIT_DEFAULT,
    NAMESPACE_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
    RESOURCE_TYPE_DEFAULT,
    THEME_DEFAULT,
)


class AppSettings(BaseModel):
    """Persisted user preferences."""

    model_config = ConfigDict(populate_by_name=True)

    # Last selections
    last_namespace: str = NAMESPACE_DEFAULT
    last_context: str = ""
    last_resource_type: str = RESOURCE_TYPE_DEFAULT

    # UI preferences
    log_line_limit: int = LOG_LINE_LIMIT_DEFAULT
    refresh_interval: int = Field(
        default=REFRESH_INTERVAL_DEFAULT, alias="refresh_interval_seconds"
    )
    theme: str = THEME_DEFAULT

    @field_validator("last_namespace", mode="before")
    @classmethod
    def _blank_namespace(cls, value: object) -> object:
        return value or NAMESPACE_DEFAULT

    @field_validator("last_resource_type", mode="before")
    @classmethod
    def _blank_resource_type(cls, value: object) -> object:
        return value or RESOURCE_TYPE_DEFAULT

    @field_validator("refresh_interval", "log_line_limit")
    @classmethod
    def _positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("must be at least 1")
        return value


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigSaveError(ConfigError):
    """Raised when settings fail to save."""
