"""Exception definitions for asset_registry.

This module defines the base exception class `CoreError` and the error
taxonomy raised by the registry: ledger I/O failures, missing or duplicate
assets, and serialization failures. Every exception captures the active
trace ID so that a failure can be correlated with the invocation that
raised it.
"""

from typing import Any

from ..observability.trace_id import NO_TRACE, get_formatted_trace_id


class CoreError(Exception):
    """Base exception for all asset_registry errors.

    Attributes:
        message (str): A human-readable description of the error.
        error_code (str): A standardized code for the error, defaulting to the class name.
        details (dict[str, Any]): Additional context about the error.
        trace_id (str): The trace ID active when the error was created.
    """

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
        trace_id: str | None = None,
    ) -> None:
        """Initialize CoreError.

        Args:
            message: Error message
            error_code: Optional error code for categorization
            details: Optional additional error details
            trace_id: Optional trace ID. If None, uses current trace ID
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

        self.trace_id = trace_id if trace_id is not None else get_formatted_trace_id()
        self.details["trace_id"] = self.trace_id

    def __str__(self) -> str:
        """String representation of the error."""
        parts = []

        if self.trace_id and self.trace_id != NO_TRACE:
            parts.append(f"[{self.trace_id}]")

        if self.error_code != self.__class__.__name__:
            parts.append(f"[{self.error_code}]")

        parts.append(self.message)

        details_to_show = {k: v for k, v in self.details.items() if k != "trace_id"}
        if details_to_show:
            parts.append(f"Details: {details_to_show}")

        return " ".join(parts)

    def __repr__(self) -> str:
        """Developer-friendly representation of the error."""
        return (
            f"{self.__class__.__name__}("
            f"message='{self.message}', "
            f"error_code='{self.error_code}', "
            f"trace_id='{self.trace_id}', "
            f"details={self.details}"
            f")"
        )


class ConfigurationError(CoreError):
    """Raised when there's a configuration error."""

    pass


class LedgerError(CoreError):
    """Base exception for ledger errors."""

    pass


class LedgerIOError(LedgerError):
    """Raised when a ledger read, write, delete or range scan fails.

    The registry never retries or recovers from this error. Retries, if any,
    belong to the ledger client.
    """

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        operation: str | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize LedgerIOError.

        Args:
            message: Error message
            key: Ledger key the failing call targeted, if any
            operation: Name of the ledger call that failed (e.g. 'get_state')
            **kwargs: Additional arguments for CoreError
        """
        super().__init__(message, **kwargs)
        self.key = key
        self.operation = operation
        if key is not None:
            self.details["key"] = key
        if operation:
            self.details["operation"] = operation


class AssetError(CoreError):
    """Base exception for asset precondition failures."""

    def __init__(self, message: str, *, asset_id: str, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.asset_id = asset_id
        self.details["asset_id"] = asset_id


class AssetNotFoundError(AssetError):
    """Raised when an operation requires an asset that is not on the ledger."""

    def __init__(self, asset_id: str, **kwargs: Any) -> None:
        super().__init__(f"the asset {asset_id} does not exist", asset_id=asset_id, **kwargs)


class AssetAlreadyExistsError(AssetError):
    """Raised when creating an asset whose ID already has a ledger record."""

    def __init__(self, asset_id: str, **kwargs: Any) -> None:
        super().__init__(f"the asset {asset_id} already exists", asset_id=asset_id, **kwargs)


class SerializationError(CoreError):
    """Raised when stored bytes cannot be decoded into an asset, or an asset cannot be encoded."""

    def __init__(self, message: str, *, key: str | None = None, **kwargs: Any) -> None:
        """Initialize SerializationError.

        Args:
            message: Error message
            key: Ledger key of the offending record, if known
            **kwargs: Additional arguments for CoreError
        """
        super().__init__(message, **kwargs)
        self.key = key
        if key is not None:
            self.details["key"] = key
