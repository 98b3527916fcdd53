# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Keyed token-bucket rate limiter.

Holds one TokenBucket per key, created lazily on the key's first request and
kept for the lifetime of the limiter.

ARCHITECTURE NOTE:
Buckets are never evicted. Memory grows with the number of distinct keys, so
hosts limiting by unbounded identities (client IPs, anonymous tokens) should
shard or recreate limiters themselves.
"""

import logging
import threading
import time
from typing import Any

from ..config import LimiterConfig, validate_capacity, validate_refill_rate
from ..observability.constants import (
    BUCKETS_ACTIVE,
    REQUESTS_ALLOWED_TOTAL,
    REQUESTS_DENIED_TOTAL,
)
from ..observability.protocols import MetricsCollectorProtocol
from ..protocols.clock import ClockProtocol
from .bucket import TokenBucket
from .models import BucketState

logger = logging.getLogger(__name__)


class TokenBucketRateLimiter:
    """
    Per-key admission control backed by independent token buckets.

    All buckets share the limiter's capacity and refill rate.

    Concurrency:
    - Lookup of an existing bucket is a plain dict read and takes no lock.
    - Creation takes ``_create_lock`` and re-checks the key, so concurrent
      first requests for the same key converge on a single bucket. Only a
      key's first request ever reaches that lock.
    - Each bucket serializes its own refill-and-consume; requests for
      different keys never wait on each other.

    Example:
        >>> limiter = TokenBucketRateLimiter(capacity=5, refill_rate=2)
        >>> [limiter.allow_request("user-123") for _ in range(7)]
        [True, True, True, True, True, False, False]
    """

    def __init__(
        self,
        capacity: int,
        refill_rate: float,
        clock: ClockProtocol = time.monotonic,
        metrics_collector: MetricsCollectorProtocol | None = None,
        name: str = "rate_limiter",
    ) -> None:
        """
        Initialize the limiter.

        Args:
            capacity: Burst size of every bucket, a positive int
            refill_rate: Tokens per second added to every bucket
            clock: Time source handed to each bucket
            metrics_collector: Optional collector for allow/deny metrics
            name: Value of the ``component`` metric label

        Raises:
            InvalidArgumentError: If capacity or refill_rate is invalid
        """
        # Validate eagerly; buckets are only built on first request
        validate_capacity(capacity)
        validate_refill_rate(refill_rate)

        self._capacity = capacity
        self._refill_rate = refill_rate
        self._clock = clock

        self._buckets: dict[str, TokenBucket] = {}
        self._create_lock = threading.Lock()

        self._metrics_collector = metrics_collector
        self._labels = {"component": name}

        logger.debug(
            f"TokenBucketRateLimiter '{name}' initialized "
            f"(capacity={capacity}, refill_rate={refill_rate}/s)"
        )

    @classmethod
    def from_config(
        cls,
        config: LimiterConfig,
        clock: ClockProtocol = time.monotonic,
        metrics_collector: MetricsCollectorProtocol | None = None,
        name: str = "rate_limiter",
    ) -> "TokenBucketRateLimiter":
        """Create a limiter from a validated LimiterConfig."""
        return cls(
            config.capacity,
            config.refill_rate,
            clock=clock,
            metrics_collector=metrics_collector,
            name=name,
        )

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def refill_rate(self) -> float:
        return self._refill_rate

    def allow_request(self, key: str) -> bool:
        """
        Admit or reject one request for ``key``.

        Returns:
            True if the key's bucket had a token, False otherwise
        """
        allowed = self._get_or_create_bucket(key).try_consume()

        if self._metrics_collector:
            self._metrics_collector.inc_counter(
                REQUESTS_ALLOWED_TOTAL if allowed else REQUESTS_DENIED_TOTAL,
                labels=self._labels,
            )
        return allowed

    def get_bucket_state(self, key: str) -> BucketState | None:
        """Snapshot of the key's bucket, or None if the key was never seen."""
        bucket = self._buckets.get(key)
        if bucket is None:
            return None
        return bucket.snapshot()

    def get_stats(self) -> dict[str, Any]:
        """Get limiter statistics."""
        return {
            "buckets": len(self._buckets),
            "capacity": self._capacity,
            "refill_rate": self._refill_rate,
        }

    def __len__(self) -> int:
        return len(self._buckets)

    def __contains__(self, key: object) -> bool:
        return key in self._buckets

    def _get_or_create_bucket(self, key: str) -> TokenBucket:
        """Return the key's bucket, creating it at most once."""
        bucket = self._buckets.get(key)
        if bucket is not None:
            return bucket

        with self._create_lock:
            bucket = self._buckets.get(key)
            if bucket is None:
                bucket = TokenBucket(self._capacity, self._refill_rate, self._clock)
                self._buckets[key] = bucket
                bucket_count = len(self._buckets)
                logger.debug(f"Created token bucket for key {key!r}")
                if self._metrics_collector:
                    self._metrics_collector.set_gauge(
                        BUCKETS_ACTIVE, bucket_count, labels=self._labels
                    )
        return bucket


__all__ = ["TokenBucketRateLimiter"]
