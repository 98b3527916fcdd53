# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Observability and metrics for Resource Guard.

Classes:
    UnifiedMetricsCollector: Thread-safe collector mirroring into Prometheus.

Protocols:
    MetricsCollectorProtocol: Protocol for metrics collection backends.

Functions:
    get_metrics_collector: Get the global metrics collector singleton.
    reset_metrics_collector: Reset the global metrics collector singleton.
"""

from .collector import (
    METRIC_DEFINITIONS,
    MetricDefinition,
    UnifiedMetricsCollector,
    get_metrics_collector,
    reset_metrics_collector,
)
from .constants import (
    BUCKETS_ACTIVE,
    CACHE_EVICTIONS_TOTAL,
    CACHE_HITS_TOTAL,
    CACHE_MISSES_TOTAL,
    CACHE_SIZE,
    METRIC_PREFIX,
    REQUESTS_ALLOWED_TOTAL,
    REQUESTS_DENIED_TOTAL,
)
from .protocols import MetricsCollectorProtocol

__all__ = [
    "BUCKETS_ACTIVE",
    "CACHE_EVICTIONS_TOTAL",
    "CACHE_HITS_TOTAL",
    "CACHE_MISSES_TOTAL",
    "CACHE_SIZE",
    "METRIC_DEFINITIONS",
    "METRIC_PREFIX",
    "REQUESTS_ALLOWED_TOTAL",
    "REQUESTS_DENIED_TOTAL",
    "MetricDefinition",
    "MetricsCollectorProtocol",
    "UnifiedMetricsCollector",
    "get_metrics_collector",
    "reset_metrics_collector",
]
