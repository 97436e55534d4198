"""Asset Registry - a catalog of uniquely keyed assets kept on a transactional key-value ledger."""

from . import config, contract, ledger, models, observability
from .contract import SEED_ASSETS, AssetRegistry

# Exceptions
from .exceptions import (
    AssetAlreadyExistsError,
    AssetError,
    AssetNotFoundError,
    ConfigurationError,
    CoreError,
    LedgerError,
    LedgerIOError,
    SerializationError,
)
from .ledger import AbstractLedger, AbstractStateIterator, AbstractTransactionContext, KeyValue, TransactionContext
from .models import Asset

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Modules
    "config",
    "contract",
    "ledger",
    "models",
    "observability",
    # Registry
    "AssetRegistry",
    "SEED_ASSETS",
    "Asset",
    # Ledger interfaces
    "AbstractLedger",
    "AbstractStateIterator",
    "AbstractTransactionContext",
    "KeyValue",
    "TransactionContext",
    # Exceptions
    "CoreError",
    "ConfigurationError",
    "LedgerError",
    "LedgerIOError",
    "AssetError",
    "AssetNotFoundError",
    "AssetAlreadyExistsError",
    "SerializationError",
]
