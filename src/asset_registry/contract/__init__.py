"""Asset registry contract: the operations invoked against the ledger."""

from .registry import AssetRegistry
from .seed import SEED_ASSETS

__all__ = ["AssetRegistry", "SEED_ASSETS"]
