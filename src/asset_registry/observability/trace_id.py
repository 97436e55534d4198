"""Trace IDs correlating log records and errors with a registry invocation."""

import contextvars
import uuid
from typing import Any

NO_TRACE = "no-trace"

# Trace ID of the invocation running in the current context
trace_id_context: contextvars.ContextVar[str | None] = contextvars.ContextVar("trace_id", default=None)


def get_trace_id() -> str | None:
    """Return the trace ID of the current invocation, if any."""
    return trace_id_context.get()


def get_formatted_trace_id() -> str:
    """Return the current trace ID, or 'no-trace' outside an invocation."""
    return get_trace_id() or NO_TRACE


class TraceContext:
    """Binds a trace ID to the current context for the duration of a block.

    The registry enters one per invocation with the invocation's transaction
    ID. Without one, a random ID is generated so the invocation's records
    still correlate.
    """

    def __init__(self, trace_id: str | None = None):
        self.trace_id = trace_id
        self.token: contextvars.Token[str | None] | None = None

    def __enter__(self) -> str:
        if not self.trace_id:
            self.trace_id = uuid.uuid4().hex

        self.token = trace_id_context.set(self.trace_id)
        return self.trace_id

    def __exit__(self, exc_type: type[BaseException] | None, exc_val: BaseException | None, exc_tb: Any) -> None:
        if self.token is not None:
            trace_id_context.reset(self.token)
            self.token = None
