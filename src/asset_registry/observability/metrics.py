"""Prometheus metrics registry and registry operation metrics."""

import time
from typing import Any

from prometheus_client import CollectorRegistry, Counter, Histogram, generate_latest

DEFAULT_DURATION_BUCKETS = (0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0)


class PrometheusMetricsRegistry:
    """Wrapper for Prometheus metrics registry with convenience methods."""

    def __init__(self, namespace: str | None = None) -> None:
        """Initialize metrics registry.

        Args:
            namespace: Optional namespace prefix for all metrics
        """
        self.registry = CollectorRegistry()
        self.namespace = namespace
        self._metrics: dict[str, Counter | Histogram] = {}

    def counter(
        self,
        name: str,
        description: str,
        labels: list[str] | None = None,
        **kwargs: Any,
    ) -> Counter:
        """Create or get a counter metric.

        Args:
            name: Metric name
            description: Metric description
            labels: Optional label names
            **kwargs: Additional arguments for Counter

        Returns:
            Counter instance
        """
        metric_name = self._format_name(name)
        if metric_name not in self._metrics:
            self._metrics[metric_name] = Counter(
                name=metric_name,
                documentation=description,
                labelnames=labels or [],
                namespace=self.namespace or "",
                registry=self.registry,
                **kwargs,
            )
        return self._metrics[metric_name]  # type: ignore

    def histogram(
        self,
        name: str,
        description: str,
        labels: list[str] | None = None,
        buckets: tuple[float, ...] | None = None,
        **kwargs: Any,
    ) -> Histogram:
        """Create or get a histogram metric.

        Args:
            name: Metric name
            description: Metric description
            labels: Optional label names
            buckets: Optional histogram buckets
            **kwargs: Additional arguments for Histogram

        Returns:
            Histogram instance
        """
        metric_name = self._format_name(name)
        if metric_name not in self._metrics:
            kwargs_with_buckets = kwargs.copy()
            if buckets:
                kwargs_with_buckets["buckets"] = buckets

            self._metrics[metric_name] = Histogram(
                name=metric_name,
                documentation=description,
                labelnames=labels or [],
                namespace=self.namespace or "",
                registry=self.registry,
                **kwargs_with_buckets,
            )
        return self._metrics[metric_name]  # type: ignore

    def get_sample_value(self, name: str, labels: dict[str, str] | None = None) -> float | None:
        """Read the current value of a sample, e.g. ``<namespace>_<counter>_total``."""
        return self.registry.get_sample_value(name, labels or {})

    def _format_name(self, name: str) -> str:
        """Format metric name."""
        return name.replace("-", "_").replace(".", "_")

    def generate_metrics(self) -> bytes:
        """Generate metrics in Prometheus text format."""
        return generate_latest(self.registry)


class RegistryMetrics:
    """Operation counters and latency histograms for the asset registry."""

    def __init__(self, registry: PrometheusMetricsRegistry | None = None) -> None:
        self.registry = registry or PrometheusMetricsRegistry(namespace="asset_registry")
        self.operations_total = self.registry.counter(
            "operations",
            "Total number of registry operations by outcome",
            labels=["operation", "outcome"],
        )
        self.operation_duration_seconds = self.registry.histogram(
            "operation_duration_seconds",
            "Registry operation duration in seconds",
            labels=["operation"],
            buckets=DEFAULT_DURATION_BUCKETS,
        )

    def observe(self, operation: str, outcome: str, started_at: float) -> None:
        """Record one finished operation.

        Args:
            operation: Registry operation name (e.g. 'create_asset')
            outcome: 'success' or the error code of the raised error
            started_at: ``time.perf_counter()`` value taken when the operation began
        """
        self.operations_total.labels(operation=operation, outcome=outcome).inc()
        self.operation_duration_seconds.labels(operation=operation).observe(time.perf_counter() - started_at)
