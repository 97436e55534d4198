"""Abstract ledger interfaces consumed by the asset registry.

The ledger is an external, transactional key-value store. The registry only
ever reaches it through a per-invocation transaction context, so any
implementation honoring these interfaces can be substituted, including
in-memory fakes in tests.
"""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, ConfigDict


class KeyValue(BaseModel):
    """A single key/value pair yielded by a range scan."""

    model_config = ConfigDict(frozen=True)

    key: str = ""
    value: bytes


class AbstractStateIterator(ABC):
    """Lazy, finite, forward-only cursor over a ledger range.

    Iterators hold ledger resources and must be closed after use. Prefer
    ``async with`` so that release happens on every exit path::

        async with await ledger.get_state_by_range("", "") as it:
            async for kv in it:
                ...
    """

    @abstractmethod
    async def has_next(self) -> bool:
        """Check whether another key/value pair is available."""
        pass

    @abstractmethod
    async def next(self) -> KeyValue:
        """Advance the cursor.

        Returns:
            The next key/value pair in scan order

        Raises:
            LedgerIOError: If the ledger fails to produce the next pair
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release the cursor and any ledger resources behind it."""
        pass

    def __aiter__(self) -> "AbstractStateIterator":
        return self

    async def __anext__(self) -> KeyValue:
        if not await self.has_next():
            raise StopAsyncIteration
        return await self.next()

    async def __aenter__(self) -> "AbstractStateIterator":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()


class AbstractLedger(ABC):
    """Keyed byte-string store with range iteration.

    Reads are tri-state: a present key yields non-empty bytes, an absent key
    yields ``None`` (or empty bytes) and a failed read raises. Absence is
    never reported as an exception.
    """

    @abstractmethod
    async def get_state(self, key: str) -> bytes | None:
        """Read the value stored under a key.

        Args:
            key: Ledger key

        Returns:
            The stored bytes, or None (or empty bytes) if the key is absent

        Raises:
            LedgerIOError: If the read itself fails
        """
        pass

    @abstractmethod
    async def put_state(self, key: str, value: bytes) -> None:
        """Write a value under a key, replacing any previous value.

        Raises:
            LedgerIOError: If the write fails
        """
        pass

    @abstractmethod
    async def del_state(self, key: str) -> None:
        """Delete the value stored under a key.

        Raises:
            LedgerIOError: If the delete fails
        """
        pass

    @abstractmethod
    async def get_state_by_range(self, start_key: str, end_key: str) -> AbstractStateIterator:
        """Open a range scan over ``[start_key, end_key)``.

        Args:
            start_key: Inclusive start key; empty means the start of the keyspace
            end_key: Exclusive end key; empty means the end of the keyspace

        Returns:
            An iterator that the caller must close

        Raises:
            LedgerIOError: If the scan cannot be opened
        """
        pass


class AbstractTransactionContext(ABC):
    """Per-invocation handle granting access to the current ledger."""

    @abstractmethod
    def get_ledger(self) -> AbstractLedger:
        """Get the ledger handle for this invocation."""
        pass

    def get_tx_id(self) -> str | None:
        """Get the transaction ID of this invocation, if the invoker supplies one."""
        return None


class TransactionContext(AbstractTransactionContext):
    """Transaction context holding one ledger handle for one invocation."""

    def __init__(self, ledger: AbstractLedger, *, tx_id: str | None = None) -> None:
        """Initialize the context.

        Args:
            ledger: Ledger handle for the invocation
            tx_id: Optional transaction ID, used as the trace ID of the invocation
        """
        self._ledger = ledger
        self._tx_id = tx_id

    def get_ledger(self) -> AbstractLedger:
        return self._ledger

    def get_tx_id(self) -> str | None:
        return self._tx_id
