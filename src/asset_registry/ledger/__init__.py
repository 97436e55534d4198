"""Ledger package for asset_registry.

This package defines the abstract interfaces through which the registry
reaches the external ledger: the ledger itself (`AbstractLedger`), its
range-scan cursor (`AbstractStateIterator`) and the per-invocation
transaction context that hands out the ledger.
"""

from .base import (
    AbstractLedger,
    AbstractStateIterator,
    AbstractTransactionContext,
    KeyValue,
    TransactionContext,
)

__all__ = [
    "AbstractLedger",
    "AbstractStateIterator",
    "AbstractTransactionContext",
    "KeyValue",
    "TransactionContext",
]
