"""Unified registry settings."""

from typing import Any

from pydantic import ValidationError
from pydantic_settings import SettingsConfigDict

from ..exceptions import ConfigurationError
from .base import BaseCoreSettings
from .observability import BaseObservabilityConfig


class RegistrySettings(BaseCoreSettings, BaseObservabilityConfig):
    """All settings of an asset registry deployment.

    Values are read from ``ASSET_REGISTRY_*`` environment variables and an
    optional ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_prefix="ASSET_REGISTRY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        str_strip_whitespace=True,
        extra="ignore",
    )


def load_settings(**overrides: Any) -> RegistrySettings:
    """Load settings from the environment, applying explicit overrides.

    Raises:
        ConfigurationError: If any value fails validation
    """
    try:
        return RegistrySettings(**overrides)
    except ValidationError as e:
        fields = sorted({".".join(str(part) for part in error["loc"]) for error in e.errors()})
        raise ConfigurationError(
            f"invalid registry settings: {', '.join(fields)}",
            details={"fields": fields},
        ) from e
