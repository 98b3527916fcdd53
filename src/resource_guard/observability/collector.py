# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Unified metrics collector supporting both dict-based and Prometheus metrics.

Features:
    1. Thread-safe counter/gauge operations
    2. Prometheus metric registration (default or injected registry)
    3. Dict snapshot for JSON export
    4. Label cardinality protection (max 1000 unique combinations per metric)
    5. Optional HTTP server for Prometheus scraping

Usage:
    >>> from resource_guard.observability.collector import get_metrics_collector
    >>> collector = get_metrics_collector()
    >>> collector.inc_counter('resource_guard_cache_hits_total',
    ...                       labels={'component': 'sessions'})
    >>> metrics = collector.get_metrics()
"""

from __future__ import annotations

import logging
import threading
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, ClassVar

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Gauge
from prometheus_client import start_http_server as _start_http_server

from .constants import (
    BUCKETS_ACTIVE,
    CACHE_EVICTIONS_TOTAL,
    CACHE_HITS_TOTAL,
    CACHE_MISSES_TOTAL,
    CACHE_SIZE,
    REQUESTS_ALLOWED_TOTAL,
    REQUESTS_DENIED_TOTAL,
)

logger = logging.getLogger(__name__)


@dataclass
class MetricDefinition:
    """
    Definition for a metric that can be instantiated.
    """

    name: str
    metric_type: str  # 'counter' or 'gauge'
    description: str
    label_names: tuple[str, ...] = ()


METRIC_DEFINITIONS: dict[str, MetricDefinition] = {
    # === Cache ===
    CACHE_HITS_TOTAL: MetricDefinition(
        CACHE_HITS_TOTAL,
        "counter",
        "Total cache hits",
        ("component",),
    ),
    CACHE_MISSES_TOTAL: MetricDefinition(
        CACHE_MISSES_TOTAL,
        "counter",
        "Total cache misses",
        ("component",),
    ),
    CACHE_EVICTIONS_TOTAL: MetricDefinition(
        CACHE_EVICTIONS_TOTAL,
        "counter",
        "Total LRU evictions",
        ("component",),
    ),
    CACHE_SIZE: MetricDefinition(
        CACHE_SIZE,
        "gauge",
        "Current number of cache entries",
        ("component",),
    ),
    # === Rate limiter ===
    REQUESTS_ALLOWED_TOTAL: MetricDefinition(
        REQUESTS_ALLOWED_TOTAL,
        "counter",
        "Total requests admitted",
        ("component",),
    ),
    REQUESTS_DENIED_TOTAL: MetricDefinition(
        REQUESTS_DENIED_TOTAL,
        "counter",
        "Total requests rejected",
        ("component",),
    ),
    BUCKETS_ACTIVE: MetricDefinition(
        BUCKETS_ACTIVE,
        "gauge",
        "Token buckets held by the limiter",
        ("component",),
    ),
}


class UnifiedMetricsCollector:
    """
    Unified metrics collector supporting both dict-based and Prometheus metrics.

    Thread Safety:
        All dict updates happen under an RLock. Prometheus client objects are
        thread-safe on their own and are updated outside the lock.

    Cardinality Protection:
        At most MAX_LABEL_COMBINATIONS unique label combinations are tracked
        per metric; further combinations are dropped with a warning.

    Example:
        >>> collector = UnifiedMetricsCollector(enable_prometheus=False)
        >>> collector.inc_counter('resource_guard_requests_denied_total',
        ...                       labels={'component': 'api'})
        >>> collector.get_metrics()["counters"]
        {'resource_guard_requests_denied_total': {'component=api': 1}}
    """

    MAX_LABEL_COMBINATIONS: ClassVar[int] = 1000

    def __init__(
        self,
        enable_prometheus: bool = True,
        registry: CollectorRegistry | None = None,
    ) -> None:
        """
        Initialize the metrics collector.

        Args:
            enable_prometheus: Whether to mirror metrics into Prometheus
            registry: Optional Prometheus CollectorRegistry (tests pass a fresh one)
        """
        self._enable_prometheus = enable_prometheus
        self._registry = registry if registry is not None else REGISTRY

        self._counters: dict[str, dict[str, int]] = defaultdict(
            lambda: defaultdict(int)
        )
        self._gauges: dict[str, dict[str, float]] = defaultdict(
            lambda: defaultdict(float)
        )

        self._lock = threading.RLock()

        self._prom_counters: dict[str, Any] = {}
        self._prom_gauges: dict[str, Any] = {}

        self._label_combinations: dict[str, set[str]] = defaultdict(set)

        self._server_running = False

        logger.debug(
            f"UnifiedMetricsCollector initialized "
            f"(prometheus={'enabled' if self._enable_prometheus else 'disabled'})"
        )

    def _labels_to_key(self, labels: dict[str, str] | None) -> str:
        """Convert labels dict to a stable string key."""
        if not labels:
            return ""
        return ",".join(f"{k}={v}" for k, v in sorted(labels.items()))

    def _check_cardinality(self, name: str, label_key: str) -> bool:
        """
        Check if adding this label combination would exceed cardinality limit.

        Must be called while holding self._lock.
        """
        if label_key in self._label_combinations[name]:
            return True
        if len(self._label_combinations[name]) >= self.MAX_LABEL_COMBINATIONS:
            logger.warning(
                f"Cardinality limit ({self.MAX_LABEL_COMBINATIONS}) reached "
                f"for metric {name}. Dropping label combination: {label_key}"
            )
            return False
        self._label_combinations[name].add(label_key)
        return True

    def _get_or_create_prom_metric(
        self, name: str, metric_type: str, labels: dict[str, str] | None
    ) -> Any | None:
        """Get or create a Prometheus counter or gauge."""
        if not self._enable_prometheus:
            return None

        store: dict[str, Any] = (
            self._prom_counters if metric_type == "counter" else self._prom_gauges
        )
        with self._lock:
            if name not in store:
                metric_cls = Counter if metric_type == "counter" else Gauge
                defn = METRIC_DEFINITIONS.get(name)
                if defn and defn.metric_type == metric_type:
                    description = defn.description
                    label_names = list(defn.label_names)
                else:
                    # Dynamic metric, labelled by whatever the first caller passed
                    description = f"Dynamic {metric_type}: {name}"
                    label_names = sorted(labels) if labels else []
                try:
                    store[name] = metric_cls(
                        name,
                        description,
                        label_names,
                        registry=self._registry,
                    )
                except ValueError as e:
                    # Duplicate registration in a shared registry
                    logger.warning(f"Failed to create Prometheus {metric_type} {name}: {e}")
                    store[name] = None
            return store[name]

    # === Counter Operations ===

    def inc_counter(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None:
        """
        Increment a counter metric.

        Raises:
            ValueError: If value is negative
        """
        if value < 0:
            raise ValueError("Counter increment must be non-negative")

        label_key = self._labels_to_key(labels)

        with self._lock:
            if not self._check_cardinality(name, label_key):
                return
            self._counters[name][label_key] += value

        prom_counter = self._get_or_create_prom_metric(name, "counter", labels)
        if prom_counter is not None:
            try:
                if labels:
                    prom_counter.labels(**labels).inc(value)
                else:
                    prom_counter.inc(value)
            except ValueError as e:
                logger.debug(f"Prometheus counter update failed for {name}: {e}")

    # === Gauge Operations ===

    def set_gauge(
        self,
        name: str,
        value: float,
        labels: dict[str, str] | None = None,
    ) -> None:
        """Set a gauge metric to a specific value."""
        label_key = self._labels_to_key(labels)

        with self._lock:
            if not self._check_cardinality(name, label_key):
                return
            self._gauges[name][label_key] = value

        prom_gauge = self._get_or_create_prom_metric(name, "gauge", labels)
        if prom_gauge is not None:
            try:
                if labels:
                    prom_gauge.labels(**labels).set(value)
                else:
                    prom_gauge.set(value)
            except ValueError as e:
                logger.debug(f"Prometheus gauge update failed for {name}: {e}")

    def inc_gauge(
        self,
        name: str,
        value: float = 1.0,
        labels: dict[str, str] | None = None,
    ) -> None:
        """Increment a gauge metric."""
        label_key = self._labels_to_key(labels)

        with self._lock:
            if not self._check_cardinality(name, label_key):
                return
            self._gauges[name][label_key] += value

        prom_gauge = self._get_or_create_prom_metric(name, "gauge", labels)
        if prom_gauge is not None:
            try:
                if labels:
                    prom_gauge.labels(**labels).inc(value)
                else:
                    prom_gauge.inc(value)
            except ValueError as e:
                logger.debug(f"Prometheus gauge inc failed for {name}: {e}")

    def dec_gauge(
        self,
        name: str,
        value: float = 1.0,
        labels: dict[str, str] | None = None,
    ) -> None:
        """Decrement a gauge metric."""
        self.inc_gauge(name, -value, labels)

    # === Snapshot Operations ===

    def get_metrics(self) -> dict[str, Any]:
        """
        Get a snapshot of all metrics.

        Returns a dict suitable for JSON serialization with structure:
        {
            "counters": {"metric_name": {"label_key": value, ...}, ...},
            "gauges": {"metric_name": {"label_key": value, ...}, ...},
        }
        """
        with self._lock:
            counters = {
                name: dict(label_values)
                for name, label_values in self._counters.items()
            }
            gauges = {
                name: dict(label_values) for name, label_values in self._gauges.items()
            }

        return {
            "counters": counters,
            "gauges": gauges,
        }

    def get_flat_metrics(self) -> dict[str, Any]:
        """
        Get metrics in a flat dict format.

        Returns:
            Dict with metric names as keys and values as int/float.
            For labeled metrics, uses format "metric_name{label=value,...}".
        """
        result: dict[str, Any] = {}

        with self._lock:
            for store in (self._counters, self._gauges):
                for name, label_values in store.items():
                    for label_key, value in label_values.items():
                        if label_key:
                            result[f"{name}{{{label_key}}}"] = value
                        else:
                            result[name] = value

        return result

    # === Lifecycle ===

    def reset(self) -> None:
        """Reset all dict metrics. Prometheus series are cumulative and kept."""
        with self._lock:
            self._counters.clear()
            self._gauges.clear()
            self._label_combinations.clear()

        logger.debug("Metrics collector reset")

    # === Prometheus HTTP Server ===

    def start_http_server(self, host: str = "127.0.0.1", port: int = 9090) -> bool:
        """
        Start the Prometheus HTTP server for metrics scraping.

        Args:
            host: Host to bind to (default: 127.0.0.1 for localhost only)
            port: Port to bind to

        Returns:
            True if server started successfully, False otherwise
        """
        if not self._enable_prometheus:
            logger.warning("Cannot start Prometheus server: Prometheus disabled")
            return False

        if self._server_running:
            logger.warning("Prometheus server already running")
            return True

        try:
            # start_http_server runs in a daemon thread
            _start_http_server(port, addr=host, registry=self._registry)
        except OSError as e:
            logger.error(f"Failed to start Prometheus server: {e}")
            return False

        self._server_running = True
        logger.info(f"Prometheus metrics server started on {host}:{port}")
        return True

    @property
    def prometheus_enabled(self) -> bool:
        """Check if Prometheus metrics are enabled."""
        return self._enable_prometheus

    @property
    def server_running(self) -> bool:
        """Check if the Prometheus HTTP server is running."""
        return self._server_running


# =============================================================================
# Singleton Pattern
# =============================================================================

_global_collector: UnifiedMetricsCollector | None = None
_collector_lock = threading.Lock()


def get_metrics_collector(
    enable_prometheus: bool = True,
) -> UnifiedMetricsCollector:
    """
    Get or create the global metrics collector singleton.

    Args:
        enable_prometheus: Whether to enable Prometheus metrics
            (only used on first call)
    """
    global _global_collector

    if _global_collector is None:
        with _collector_lock:
            if _global_collector is None:
                _global_collector = UnifiedMetricsCollector(
                    enable_prometheus=enable_prometheus
                )

    return _global_collector


def reset_metrics_collector() -> None:
    """
    Reset the global metrics collector singleton (mainly for testing).
    """
    global _global_collector
    with _collector_lock:
        if _global_collector:
            _global_collector.reset()
        _global_collector = None


__all__ = [
    "METRIC_DEFINITIONS",
    "MetricDefinition",
    "UnifiedMetricsCollector",
    "get_metrics_collector",
    "reset_metrics_collector",
]
