"""
Shared fixtures for benchmark tests.
"""

import pytest

from resource_guard.cache import LRUCache
from resource_guard.limiter import TokenBucketRateLimiter


@pytest.fixture
def large_cache() -> LRUCache[int, int]:
    """A full cache of 100k entries."""
    cache: LRUCache[int, int] = LRUCache(100_000)
    for i in range(100_000):
        cache.put(i, i)
    return cache


@pytest.fixture
def small_cache() -> LRUCache[int, int]:
    """A full cache of 100 entries."""
    cache: LRUCache[int, int] = LRUCache(100)
    for i in range(100):
        cache.put(i, i)
    return cache


@pytest.fixture
def high_limit_limiter() -> TokenBucketRateLimiter:
    """A limiter that never denies during a benchmark run."""
    return TokenBucketRateLimiter(capacity=10_000_000, refill_rate=1_000_000)
