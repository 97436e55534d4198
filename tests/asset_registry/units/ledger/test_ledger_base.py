"""Unit tests for the ledger interfaces and the transaction context."""

from collections.abc import Iterable

import pytest
from pydantic import ValidationError

from asset_registry.ledger import AbstractLedger, AbstractStateIterator, KeyValue, TransactionContext


class ListIterator(AbstractStateIterator):
    def __init__(self, values: Iterable[bytes]) -> None:
        self.items = [KeyValue(key=str(i), value=v) for i, v in enumerate(values)]
        self.position = 0
        self.close_calls = 0

    async def has_next(self) -> bool:
        return self.position < len(self.items)

    async def next(self) -> KeyValue:
        item = self.items[self.position]
        self.position += 1
        return item

    async def close(self) -> None:
        self.close_calls += 1


@pytest.mark.unit
class TestAbstractInterfaces:
    """Test cases for the abstract ledger contracts."""

    def test_ledger_cannot_be_instantiated(self) -> None:
        with pytest.raises(TypeError):
            AbstractLedger()  # type: ignore[abstract]

    def test_ledger_abstract_methods(self) -> None:
        assert AbstractLedger.__abstractmethods__ == {"get_state", "put_state", "del_state", "get_state_by_range"}

    def test_iterator_abstract_methods(self) -> None:
        assert AbstractStateIterator.__abstractmethods__ == {"has_next", "next", "close"}


@pytest.mark.unit
class TestStateIterator:
    """Test cases for iteration and scoped release."""

    @pytest.mark.asyncio
    async def test_async_for_drains_in_order(self) -> None:
        iterator = ListIterator([b"a", b"b", b"c"])

        values = [kv.value async for kv in iterator]

        assert values == [b"a", b"b", b"c"]

    @pytest.mark.asyncio
    async def test_context_manager_closes_on_success(self) -> None:
        iterator = ListIterator([b"a"])

        async with iterator as it:
            assert it is iterator

        assert iterator.close_calls == 1

    @pytest.mark.asyncio
    async def test_context_manager_closes_on_error(self) -> None:
        iterator = ListIterator([b"a", b"b"])

        with pytest.raises(RuntimeError):
            async with iterator:
                async for _ in iterator:
                    raise RuntimeError("abort")

        assert iterator.close_calls == 1
        assert iterator.position == 1


@pytest.mark.unit
class TestKeyValue:
    def test_key_defaults_to_empty(self) -> None:
        assert KeyValue(value=b"x").key == ""

    def test_frozen(self) -> None:
        kv = KeyValue(key="k", value=b"v")

        with pytest.raises(ValidationError):
            kv.key = "other"  # type: ignore[misc]


@pytest.mark.unit
class TestTransactionContext:
    def test_returns_ledger_and_tx_id(self, fake_ledger: AbstractLedger) -> None:
        ctx = TransactionContext(fake_ledger, tx_id="tx-1")

        assert ctx.get_ledger() is fake_ledger
        assert ctx.get_tx_id() == "tx-1"

    def test_tx_id_is_optional(self, fake_ledger: AbstractLedger) -> None:
        assert TransactionContext(fake_ledger).get_tx_id() is None
