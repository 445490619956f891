"""
Shared metrics configuration for the cache facade.
"""

from typing import Optional

from prometheus_client import Counter, Histogram, CollectorRegistry, REGISTRY


class CacheMetrics:
    """Prometheus metrics for cache facade operations."""

    def __init__(self, service_name: str = "cache_facade", registry: Optional[CollectorRegistry] = None):
        self.service_name = service_name
        self.registry = registry if registry is not None else REGISTRY

        self.operations_total = Counter(
            "cache_operations_total",
            "Total cache operations",
            ["service", "operation", "result"],
            registry=self.registry
        )

        self.producer_duration_seconds = Histogram(
            "cache_producer_duration_seconds",
            "Time spent computing values for remember on a miss",
            ["service"],
            registry=self.registry
        )

    def record_operation(self, operation: str, result: str) -> None:
        """Count a cache operation outcome (hit, miss, write, delete)."""
        self.operations_total.labels(
            service=self.service_name,
            operation=operation,
            result=result
        ).inc()

    def observe_producer(self, duration: float) -> None:
        """Record how long a remember producer took."""
        self.producer_duration_seconds.labels(service=self.service_name).observe(duration)


_default_metrics: Optional[CacheMetrics] = None


def get_cache_metrics() -> CacheMetrics:
    """Get the process-wide metrics collector bound to the default registry."""
    global _default_metrics
    if _default_metrics is None:
        _default_metrics = CacheMetrics()
    return _default_metrics
