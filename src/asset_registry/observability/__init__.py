"""Observability package for asset_registry.

Structured logging (loguru), trace ID propagation and Prometheus metrics.
"""

from .logging import LogFormat, configure_logging, get_logger, log_exception_with_context, setup_logging
from .metrics import PrometheusMetricsRegistry, RegistryMetrics
from .trace_id import TraceContext, get_formatted_trace_id, get_trace_id

__all__ = [
    "LogFormat",
    "configure_logging",
    "get_logger",
    "log_exception_with_context",
    "setup_logging",
    "PrometheusMetricsRegistry",
    "RegistryMetrics",
    "TraceContext",
    "get_formatted_trace_id",
    "get_trace_id",
]
