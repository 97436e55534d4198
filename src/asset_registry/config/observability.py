"""Observability configuration settings."""

import re

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_METRIC_NAME_RE = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")


class BaseObservabilityConfig(BaseSettings):
    """Configuration settings for logging and metrics.

    This class defines how registry invocations are logged and whether
    operation metrics are recorded.
    """

    model_config = SettingsConfigDict(
        str_strip_whitespace=True,
        extra="ignore",
    )

    # Logging settings
    log_level: str = Field(default="INFO", description="Logging level")
    """The logging level (e.g., "INFO", "DEBUG", "WARNING")."""
    log_format: str = Field(default="pretty", description="Console log format (json, pretty, compact, detailed)")
    """The format for console log output."""
    log_file: str | None = Field(default=None, description="Path of the JSON log file; file logging is off when unset")

    # Metrics settings
    metrics_enabled: bool = Field(default=True, description="Record Prometheus metrics for registry operations.")
    metrics_namespace: str = Field(default="asset_registry", description="Namespace prefix for metric names.")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validates and upper-cases the `log_level` field.

        Raises:
            ValueError: If the log level is not one of the allowed values.
        """
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v = v.upper()
        if v not in allowed:
            raise ValueError(f"log_level must be one of {allowed}")
        return v

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validates the `log_format` field."""
        allowed = {"json", "pretty", "compact", "detailed"}
        v = v.lower()
        if v not in allowed:
            raise ValueError(f"log_format must be one of {allowed}")
        return v

    @field_validator("metrics_namespace")
    @classmethod
    def validate_metrics_namespace(cls, v: str) -> str:
        """Metric namespaces must be valid Prometheus identifiers."""
        if not _METRIC_NAME_RE.match(v):
            raise ValueError(f"metrics_namespace {v!r} is not a valid Prometheus metric name")
        return v
