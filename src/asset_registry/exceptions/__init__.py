"""Asset registry exceptions package.

All exceptions inherit from CoreError which provides structured error handling
with error codes, messages, trace IDs and additional details.
"""

from .core import (
    AssetAlreadyExistsError,
    AssetError,
    AssetNotFoundError,
    ConfigurationError,
    CoreError,
    LedgerError,
    LedgerIOError,
    SerializationError,
)

__all__ = [
    "CoreError",
    "ConfigurationError",
    "LedgerError",
    "LedgerIOError",
    "AssetError",
    "AssetNotFoundError",
    "AssetAlreadyExistsError",
    "SerializationError",
]
