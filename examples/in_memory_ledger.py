#!/usr/bin/env python3
"""
Example: How to run the asset registry against a custom ledger.

This example shows how to plug a ledger into the registry by implementing
the AbstractLedger interface. We'll implement a dict-backed ledger with a
sorted range scan, seed it, and walk an asset through its lifecycle.
"""

import asyncio

from asset_registry import (
    AbstractLedger,
    AbstractStateIterator,
    AssetNotFoundError,
    AssetRegistry,
    KeyValue,
    TransactionContext,
)
from asset_registry.config import load_settings
from asset_registry.observability import configure_logging


class DictStateIterator(AbstractStateIterator):
    """Cursor over a snapshot of the keyspace."""

    def __init__(self, items: list[KeyValue]):
        self._items = items
        self._position = 0

    async def has_next(self) -> bool:
        return self._position < len(self._items)

    async def next(self) -> KeyValue:
        item = self._items[self._position]
        self._position += 1
        return item

    async def close(self) -> None:
        self._items = []


class DictLedger(AbstractLedger):
    """Dict-backed ledger; commits are immediate and there is no conflict detection."""

    def __init__(self) -> None:
        self._state: dict[str, bytes] = {}

    async def get_state(self, key: str) -> bytes | None:
        return self._state.get(key)

    async def put_state(self, key: str, value: bytes) -> None:
        self._state[key] = value

    async def del_state(self, key: str) -> None:
        self._state.pop(key, None)

    async def get_state_by_range(self, start_key: str, end_key: str) -> DictStateIterator:
        keys = sorted(k for k in self._state if (not start_key or k >= start_key) and (not end_key or k < end_key))
        return DictStateIterator([KeyValue(key=k, value=self._state[k]) for k in keys])


async def main() -> None:
    """Main example function."""
    settings = load_settings(log_format="compact")
    configure_logging(settings, enqueue=False)

    registry = AssetRegistry.from_settings(settings)
    ledger = DictLedger()

    # One context per invocation, as a peer would hand them out
    await registry.init_ledger(TransactionContext(ledger, tx_id="tx-init"))

    ctx = TransactionContext(ledger, tx_id="tx-create")
    await registry.create_asset(ctx, "asset7", "purple", 20, "Ana", 900)

    ctx = TransactionContext(ledger, tx_id="tx-transfer")
    previous = await registry.transfer_asset(ctx, "asset7", "Ravi")
    print(f"asset7 moved from {previous} to Ravi")

    print("\n📦 All assets:")
    for asset in await registry.get_all_assets(TransactionContext(ledger, tx_id="tx-scan")):
        print(f"  {asset}")

    ctx = TransactionContext(ledger, tx_id="tx-delete")
    await registry.delete_asset(ctx, "asset7")
    try:
        await registry.delete_asset(ctx, "asset7")
    except AssetNotFoundError as e:
        print(f"\nSecond delete rejected: {e}")

    if registry.metrics is not None:
        print("\n📊 Metrics:")
        print(registry.metrics.registry.generate_metrics().decode())


if __name__ == "__main__":
    print("🚀 Asset Registry Example")
    print("=" * 50)
    asyncio.run(main())
