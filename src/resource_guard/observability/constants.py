# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Metric name constants following Prometheus naming conventions.

All metric names use the `resource_guard_` prefix.

Naming Conventions:
    - Counter metrics end with `_total`
    - Gauges use present-tense descriptive names

Label Best Practices:
    Cache keys and limiter keys are caller-chosen and unbounded, so they are
    NEVER used as labels. The only label is `component`, which names the
    cache or limiter instance and is set by the host.

Usage:
    >>> from resource_guard.observability.constants import CACHE_HITS_TOTAL
    >>> print(CACHE_HITS_TOTAL)
    'resource_guard_cache_hits_total'
"""


# =============================================================================
# Global Prefix
# =============================================================================

METRIC_PREFIX = "resource_guard"
"""Prefix for all Prometheus metrics in this library."""


# =============================================================================
# Cache Metrics (cache/lru.py)
# =============================================================================

CACHE_HITS_TOTAL = f"{METRIC_PREFIX}_cache_hits_total"
"""Total cache lookups that found the key."""

CACHE_MISSES_TOTAL = f"{METRIC_PREFIX}_cache_misses_total"
"""Total cache lookups that returned NOT_FOUND."""

CACHE_EVICTIONS_TOTAL = f"{METRIC_PREFIX}_cache_evictions_total"
"""Total least-recently-used entries evicted to make room."""

CACHE_SIZE = f"{METRIC_PREFIX}_cache_size"
"""Current number of entries held by the cache."""


# =============================================================================
# Rate Limiter Metrics (limiter/registry.py)
# =============================================================================

REQUESTS_ALLOWED_TOTAL = f"{METRIC_PREFIX}_requests_allowed_total"
"""Total requests admitted by a token bucket."""

REQUESTS_DENIED_TOTAL = f"{METRIC_PREFIX}_requests_denied_total"
"""Total requests rejected because the bucket was empty."""

BUCKETS_ACTIVE = f"{METRIC_PREFIX}_buckets_active"
"""Number of token buckets held by the limiter registry."""


__all__ = [
    "BUCKETS_ACTIVE",
    "CACHE_EVICTIONS_TOTAL",
    "CACHE_HITS_TOTAL",
    "CACHE_MISSES_TOTAL",
    "CACHE_SIZE",
    "METRIC_PREFIX",
    "REQUESTS_ALLOWED_TOTAL",
    "REQUESTS_DENIED_TOTAL",
]
