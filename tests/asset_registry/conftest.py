"""Test configuration and fixtures for asset_registry tests."""

from collections.abc import Generator, Iterable
from typing import Any
from unittest.mock import AsyncMock

import pytest
from loguru import logger

from asset_registry.contract import AssetRegistry
from asset_registry.ledger import AbstractLedger, AbstractStateIterator, KeyValue, TransactionContext
from asset_registry.models import Asset
from asset_registry.observability.metrics import PrometheusMetricsRegistry, RegistryMetrics


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: fast tests of a single component")
    config.addinivalue_line("markers", "integration: tests running the registry against the in-memory ledger")


class FakeStateIterator(AbstractStateIterator):
    """In-memory range cursor that records whether it was closed."""

    def __init__(self, items: Iterable[KeyValue], *, fail_at: int | None = None, error: Exception | None = None):
        self._items = list(items)
        self._position = 0
        self._fail_at = fail_at
        self._error = error
        self.closed = False

    async def has_next(self) -> bool:
        return not self.closed and self._position < len(self._items)

    async def next(self) -> KeyValue:
        if self._fail_at is not None and self._position == self._fail_at:
            assert self._error is not None
            raise self._error
        item = self._items[self._position]
        self._position += 1
        return item

    async def close(self) -> None:
        self.closed = True


class FakeLedger(AbstractLedger):
    """Sorted in-memory keyspace with injectable faults.

    ``inject_fault("put_state", err, after=2)`` lets two writes succeed and
    fails every later one.
    """

    def __init__(self) -> None:
        self.state: dict[str, bytes] = {}
        self.iterators: list[FakeStateIterator] = []
        self._faults: dict[str, list[Any]] = {}
        self._scan_fault: tuple[int, Exception] | None = None

    def inject_fault(self, operation: str, error: Exception, *, after: int = 0) -> None:
        self._faults[operation] = [after, error]

    def inject_scan_fault(self, error: Exception, *, at: int) -> None:
        self._scan_fault = (at, error)

    def _check(self, operation: str) -> None:
        fault = self._faults.get(operation)
        if fault is None:
            return
        if fault[0] > 0:
            fault[0] -= 1
            return
        raise fault[1]

    async def get_state(self, key: str) -> bytes | None:
        self._check("get_state")
        return self.state.get(key)

    async def put_state(self, key: str, value: bytes) -> None:
        self._check("put_state")
        self.state[key] = bytes(value)

    async def del_state(self, key: str) -> None:
        self._check("del_state")
        self.state.pop(key, None)

    async def get_state_by_range(self, start_key: str, end_key: str) -> FakeStateIterator:
        self._check("get_state_by_range")
        items = [
            KeyValue(key=key, value=self.state[key])
            for key in sorted(self.state)
            if (not start_key or key >= start_key) and (not end_key or key < end_key)
        ]
        fail_at, error = self._scan_fault if self._scan_fault else (None, None)
        iterator = FakeStateIterator(items, fail_at=fail_at, error=error)
        self.iterators.append(iterator)
        return iterator


@pytest.fixture
def fake_ledger() -> FakeLedger:
    return FakeLedger()


@pytest.fixture
def ctx(fake_ledger: FakeLedger) -> TransactionContext:
    return TransactionContext(fake_ledger, tx_id="tx-test")


@pytest.fixture
def mock_ledger() -> AsyncMock:
    """Ledger whose calls are AsyncMocks; absent keys by default."""
    ledger = AsyncMock(spec=AbstractLedger)
    ledger.get_state.return_value = None
    return ledger


@pytest.fixture
def mock_ctx(mock_ledger: AsyncMock) -> TransactionContext:
    return TransactionContext(mock_ledger)


@pytest.fixture
def metrics() -> RegistryMetrics:
    return RegistryMetrics(PrometheusMetricsRegistry(namespace="test_registry"))


@pytest.fixture
def registry(metrics: RegistryMetrics) -> AssetRegistry:
    return AssetRegistry(metrics=metrics)


@pytest.fixture
def sample_asset() -> Asset:
    """Provides a fully populated Asset for testing."""
    return Asset(id="asset1", color="blue", size=5, owner="Tomoko", appraised_value=300)


@pytest.fixture
def capture_logs() -> Generator[list[str], None, None]:
    """Collects formatted loguru messages emitted during the test."""
    messages: list[str] = []
    handler_id = logger.add(messages.append, format="{level} | {message}", level="DEBUG")
    yield messages
    logger.remove(handler_id)
