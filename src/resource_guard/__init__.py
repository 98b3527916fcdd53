# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Resource Guard - In-process caching and rate limiting primitives.

This library provides two independent, thread-safe building blocks for
bounding resource use inside a service.

Key Features:
    - LRUCache: fixed-capacity cache with O(1) get/put and LRU eviction
    - TokenBucketRateLimiter: per-key token buckets with lazy refill
    - Injectable clock for deterministic tests
    - Optional Prometheus metrics through a pluggable collector

Quick Start:
    >>> from resource_guard import LRUCache, NOT_FOUND, TokenBucketRateLimiter
    >>>
    >>> cache = LRUCache(capacity=2)
    >>> cache.put(1, 10)
    >>> cache.get(1)
    10
    >>> cache.get(2) is NOT_FOUND
    True
    >>>
    >>> limiter = TokenBucketRateLimiter(capacity=5, refill_rate=2)
    >>> limiter.allow_request("user-123")
    True

Version: 1.0.0
"""

__version__ = "1.0.0"

from .cache import NOT_FOUND, CacheStats, LRUCache, NotFound
from .config import CacheConfig, LimiterConfig
from .exceptions import InvalidArgumentError, ResourceGuardError
from .limiter import BucketState, TokenBucket, TokenBucketRateLimiter
from .observability import (
    MetricsCollectorProtocol,
    UnifiedMetricsCollector,
    get_metrics_collector,
)
from .protocols import ClockProtocol, RateLimiterProtocol

__all__ = [
    "NOT_FOUND",
    "BucketState",
    # Config
    "CacheConfig",
    "CacheStats",
    # Protocols
    "ClockProtocol",
    # Exceptions
    "InvalidArgumentError",
    # Cache
    "LRUCache",
    "LimiterConfig",
    # Observability
    "MetricsCollectorProtocol",
    "NotFound",
    "RateLimiterProtocol",
    "ResourceGuardError",
    # Rate limiting
    "TokenBucket",
    "TokenBucketRateLimiter",
    "UnifiedMetricsCollector",
    "get_metrics_collector",
]
