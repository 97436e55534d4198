"""Configuration package for asset_registry.

- base: Core application settings
- observability: Logging and metrics settings
- settings: RegistrySettings, which inherits from both
"""

from .base import BaseCoreSettings
from .observability import BaseObservabilityConfig
from .settings import RegistrySettings, load_settings

__all__ = ["BaseCoreSettings", "BaseObservabilityConfig", "RegistrySettings", "load_settings"]
