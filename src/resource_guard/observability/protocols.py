# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Protocol definitions for metrics collection backends.

The cache and the rate limiter report through this protocol, so hosts can
plug in Prometheus, StatsD, OpenTelemetry or a test double.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MetricsCollectorProtocol(Protocol):
    """
    Protocol for metrics collection backends.

    Implementations must be thread-safe: the primitives call them from
    whichever thread performed the operation.

    Example:
        >>> class MyCollector:
        ...     def inc_counter(self, name, value=1, labels=None): pass
        ...     def set_gauge(self, name, value, labels=None): pass
        ...     def inc_gauge(self, name, value=1.0, labels=None): pass
        ...     def dec_gauge(self, name, value=1.0, labels=None): pass
        ...     def get_metrics(self): return {}
        ...     def reset(self): pass
        >>>
        >>> isinstance(MyCollector(), MetricsCollectorProtocol)
        True
    """

    # === Counter Operations ===

    def inc_counter(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None:
        """
        Increment a counter metric.

        Args:
            name: Metric name (should follow Prometheus naming convention)
            value: Value to increment by (must be >= 0)
            labels: Optional labels dict for dimensional metrics

        Raises:
            ValueError: If value is negative
        """
        ...

    # === Gauge Operations ===

    def set_gauge(
        self,
        name: str,
        value: float,
        labels: dict[str, str] | None = None,
    ) -> None:
        """Set a gauge metric to a specific value."""
        ...

    def inc_gauge(
        self,
        name: str,
        value: float = 1.0,
        labels: dict[str, str] | None = None,
    ) -> None:
        """Increment a gauge metric."""
        ...

    def dec_gauge(
        self,
        name: str,
        value: float = 1.0,
        labels: dict[str, str] | None = None,
    ) -> None:
        """Decrement a gauge metric."""
        ...

    # === Snapshot Operations ===

    def get_metrics(self) -> dict[str, Any]:
        """
        Get a snapshot of all metrics.

        Returns:
            Dictionary with structure:
            {
                "counters": {"metric_name": {"label_key": value, ...}, ...},
                "gauges": {"metric_name": {"label_key": value, ...}, ...},
            }
        """
        ...

    # === Lifecycle ===

    def reset(self) -> None:
        """Reset all metrics to zero."""
        ...


__all__ = [
    "MetricsCollectorProtocol",
]
