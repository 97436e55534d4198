"""Asset registry operations over a transactional key-value ledger.

Every operation receives the transaction context of the current invocation,
takes the ledger handle from it and performs a short sequence of ledger
calls. The registry keeps no state between invocations.

Existence checks followed by writes (check-then-act) are not atomic here.
Correctness under concurrent invocations relies on the ledger's commit
protocol, which must detect read/write-set conflicts (optimistic concurrency)
and reject the losing transaction. The registry adds no locking of its own.
"""

import functools
import time
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from ..exceptions import AssetAlreadyExistsError, AssetNotFoundError, CoreError, LedgerIOError
from ..ledger import AbstractLedger, AbstractTransactionContext
from ..models import Asset, AssetAttribute
from ..observability.logging import get_logger, log_exception_with_context
from ..observability.metrics import PrometheusMetricsRegistry, RegistryMetrics
from ..observability.trace_id import TraceContext
from .seed import SEED_ASSETS

if TYPE_CHECKING:
    from ..config import RegistrySettings

logger = get_logger(__name__)


def _describe(exc: BaseException) -> str:
    return exc.message if isinstance(exc, CoreError) else str(exc)


@contextmanager
def _ledger_call(operation: str, action: str, key: str | None = None) -> Iterator[None]:
    """Translate foreign exceptions raised by a ledger call into LedgerIOError.

    Errors that are already a CoreError pass through untouched.
    """
    try:
        yield
    except CoreError:
        raise
    except Exception as e:
        raise LedgerIOError(f"{action}: {e}", key=key, operation=operation) from e


def _operation(func: Callable[..., Any]) -> Callable[..., Any]:
    """Run a registry operation under the invocation's trace ID, with logging and metrics."""
    name = func.__name__

    @functools.wraps(func)
    async def wrapper(self: "AssetRegistry", ctx: AbstractTransactionContext, *args: Any, **kwargs: Any) -> Any:
        with TraceContext(ctx.get_tx_id()):
            started_at = time.perf_counter()
            try:
                result = await func(self, ctx, *args, **kwargs)
            except CoreError as e:
                self._observe(name, e.error_code, started_at)
                log_exception_with_context(e, "WARNING", f"{name} failed: {e.message}", operation=name)
                raise
            self._observe(name, "success", started_at)
            return result

    return wrapper


class AssetRegistry:
    """CRUD and enumeration over assets stored on the ledger.

    Presence of the asset key is the single precondition governing every
    mutation: create requires the key to be absent, update, transfer and
    delete require it to be present.
    """

    def __init__(
        self,
        *,
        metrics: RegistryMetrics | None = None,
        seed_assets: Sequence[Asset] = SEED_ASSETS,
    ) -> None:
        """Initialize the registry.

        Args:
            metrics: Optional operation metrics; nothing is recorded when None
            seed_assets: Assets written by `init_ledger`, in order
        """
        self.metrics = metrics
        self.seed_assets = tuple(seed_assets)

    @classmethod
    def from_settings(cls, settings: "RegistrySettings") -> "AssetRegistry":
        """Build a registry with metrics wired according to settings."""
        metrics = None
        if settings.metrics_enabled:
            metrics = RegistryMetrics(PrometheusMetricsRegistry(namespace=settings.metrics_namespace))
        return cls(metrics=metrics)

    def _observe(self, operation: str, outcome: str, started_at: float) -> None:
        if self.metrics is not None:
            self.metrics.observe(operation, outcome, started_at)

    async def _read_state(self, ledger: AbstractLedger, asset_id: str) -> bytes | None:
        """Read raw asset bytes, normalizing an absent key to None."""
        with _ledger_call("get_state", "failed to read from world state", asset_id):
            data = await ledger.get_state(asset_id)
        return data or None

    async def _write_asset(self, ledger: AbstractLedger, asset: Asset) -> None:
        data = asset.to_bytes()
        with _ledger_call("put_state", "failed to put to world state", asset.id):
            await ledger.put_state(asset.id, data)

    @_operation
    async def init_ledger(self, ctx: AbstractTransactionContext) -> None:
        """Write the seed assets to the ledger.

        Stops at the first failed write. Entries written before the failure
        are not rolled back; the enclosing ledger transaction is the unit of
        atomicity.

        Raises:
            LedgerIOError: If a write fails, naming the seed asset that failed
        """
        ledger = ctx.get_ledger()
        for asset in self.seed_assets:
            data = asset.to_bytes()
            try:
                await ledger.put_state(asset.id, data)
            except Exception as e:
                raise LedgerIOError(
                    f"failed to put to world state. {_describe(e)}", key=asset.id, operation="put_state"
                ) from e
        logger.info("Seeded ledger with {count} assets", count=len(self.seed_assets))

    @_operation
    async def asset_exists(self, ctx: AbstractTransactionContext, asset_id: str) -> bool:
        """Check whether an asset is stored under the given ID.

        Returns:
            True if the ledger holds non-empty bytes for the ID, False if the key is absent

        Raises:
            LedgerIOError: If the ledger read fails
        """
        return await self._read_state(ctx.get_ledger(), asset_id) is not None

    @_operation
    async def create_asset(
        self,
        ctx: AbstractTransactionContext,
        asset_id: str,
        color: AssetAttribute,
        size: AssetAttribute,
        owner: AssetAttribute,
        appraised_value: AssetAttribute,
    ) -> None:
        """Create a new asset.

        Raises:
            AssetAlreadyExistsError: If an asset with the ID is already stored
            SerializationError: If an attribute cannot be encoded
            LedgerIOError: If the existence check or the write fails
        """
        ledger = ctx.get_ledger()
        if await self._read_state(ledger, asset_id) is not None:
            raise AssetAlreadyExistsError(asset_id)

        asset = Asset.build(asset_id, color, size, owner, appraised_value)
        await self._write_asset(ledger, asset)
        logger.info("Created asset {asset_id}", asset_id=asset_id)

    @_operation
    async def read_asset(self, ctx: AbstractTransactionContext, asset_id: str) -> Asset:
        """Read the asset stored under the given ID.

        Raises:
            AssetNotFoundError: If no asset is stored under the ID
            SerializationError: If the stored bytes are not a valid asset
            LedgerIOError: If the ledger read fails
        """
        data = await self._read_state(ctx.get_ledger(), asset_id)
        if data is None:
            raise AssetNotFoundError(asset_id)

        logger.debug("Read asset {asset_id}", asset_id=asset_id)
        return Asset.from_bytes(data, key=asset_id)

    @_operation
    async def update_asset(
        self,
        ctx: AbstractTransactionContext,
        asset_id: str,
        color: AssetAttribute,
        size: AssetAttribute,
        owner: AssetAttribute,
        appraised_value: AssetAttribute,
    ) -> None:
        """Replace every attribute of an existing asset.

        The stored record is overwritten as a whole; attributes are not merged.

        Raises:
            AssetNotFoundError: If no asset is stored under the ID
            SerializationError: If an attribute cannot be encoded
            LedgerIOError: If the existence check or the write fails
        """
        ledger = ctx.get_ledger()
        if await self._read_state(ledger, asset_id) is None:
            raise AssetNotFoundError(asset_id)

        asset = Asset.build(asset_id, color, size, owner, appraised_value)
        await self._write_asset(ledger, asset)
        logger.info("Updated asset {asset_id}", asset_id=asset_id)

    @_operation
    async def delete_asset(self, ctx: AbstractTransactionContext, asset_id: str) -> None:
        """Delete an existing asset.

        Deleting is not idempotent: deleting an already deleted asset fails.

        Raises:
            AssetNotFoundError: If no asset is stored under the ID
            LedgerIOError: If the existence check or the delete fails
        """
        ledger = ctx.get_ledger()
        if await self._read_state(ledger, asset_id) is None:
            raise AssetNotFoundError(asset_id)

        with _ledger_call("del_state", "failed to delete from world state", asset_id):
            await ledger.del_state(asset_id)
        logger.info("Deleted asset {asset_id}", asset_id=asset_id)

    @_operation
    async def transfer_asset(
        self, ctx: AbstractTransactionContext, asset_id: str, new_owner: AssetAttribute
    ) -> AssetAttribute:
        """Assign an existing asset to a new owner.

        Returns:
            The previous owner

        Raises:
            AssetNotFoundError: If no asset is stored under the ID
            SerializationError: If the stored bytes are not a valid asset or the new owner cannot be encoded
            LedgerIOError: If the read or the write fails
        """
        ledger = ctx.get_ledger()
        data = await self._read_state(ledger, asset_id)
        if data is None:
            raise AssetNotFoundError(asset_id)

        asset = Asset.from_bytes(data, key=asset_id)
        await self._write_asset(ledger, asset.with_owner(new_owner))
        logger.info(
            "Transferred asset {asset_id} from {old_owner} to {new_owner}",
            asset_id=asset_id,
            old_owner=asset.owner,
            new_owner=new_owner,
        )
        return asset.owner

    @_operation
    async def get_all_assets(self, ctx: AbstractTransactionContext) -> list[Asset]:
        """Return every asset on the ledger, in scan order.

        Scans the full keyspace and drains the cursor. The cursor is closed on
        every exit path. If the cursor or a decode fails partway through, the
        error propagates and no partial result is returned.

        Raises:
            LedgerIOError: If the scan cannot be opened or iterated
            SerializationError: If a stored value is not a valid asset
        """
        ledger = ctx.get_ledger()
        assets: list[Asset] = []
        with _ledger_call("get_state_by_range", "failed to read from world state"):
            iterator = await ledger.get_state_by_range("", "")
            async with iterator:
                async for kv in iterator:
                    assets.append(Asset.from_bytes(kv.value, key=kv.key or None))

        logger.debug("Scanned {count} assets", count=len(assets))
        return assets
