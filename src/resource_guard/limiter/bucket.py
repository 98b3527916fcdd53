# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Token bucket with lazy, time-based refill.
"""

import logging
import math
import threading
import time

from ..config import validate_capacity, validate_refill_rate
from ..protocols.clock import ClockProtocol
from .models import BucketState

logger = logging.getLogger(__name__)


class TokenBucket:
    """
    A single token bucket.

    The bucket starts full and is refilled lazily on access: elapsed time is
    converted to whole tokens at ``refill_rate`` per second, the count is
    capped at ``capacity``, and ``last_refill`` advances only by the time
    those whole tokens account for. The fractional remainder carries over to
    the next call instead of being lost.

    The token count is an int in [0, capacity] at all times.

    Thread Safety:
        Refill-then-consume runs under a per-bucket threading.Lock; separate
        buckets never share a lock.
    """

    def __init__(
        self,
        capacity: int,
        refill_rate: float,
        clock: ClockProtocol = time.monotonic,
    ) -> None:
        """
        Initialize a full bucket.

        Args:
            capacity: Maximum tokens held, a positive int
            refill_rate: Tokens added per second, positive and finite
            clock: Zero-argument callable returning seconds

        Raises:
            InvalidArgumentError: If capacity or refill_rate is invalid
        """
        validate_capacity(capacity)
        validate_refill_rate(refill_rate)

        self._capacity = capacity
        self._refill_rate = float(refill_rate)
        self._clock = clock
        self._tokens = capacity
        self._last_refill = clock()
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def refill_rate(self) -> float:
        return self._refill_rate

    def try_consume(self) -> bool:
        """
        Take one token if available.

        Returns:
            True if a token was consumed, False if the bucket is empty
        """
        with self._lock:
            self._refill_unsafe()
            if self._tokens > 0:
                self._tokens -= 1
                return True
            return False

    @property
    def available_tokens(self) -> int:
        """Tokens available right now (refills, does not consume)."""
        with self._lock:
            self._refill_unsafe()
            return self._tokens

    def snapshot(self) -> BucketState:
        """Refill and return a validated snapshot of the bucket."""
        with self._lock:
            self._refill_unsafe()
            return BucketState(
                capacity=self._capacity,
                refill_rate=self._refill_rate,
                tokens=self._tokens,
                last_refill=self._last_refill,
            )

    def _refill_unsafe(self) -> None:
        """Add whole tokens earned since last refill. Caller holds self._lock."""
        now = self._clock()
        elapsed = now - self._last_refill
        # Clock did not advance (or went backwards): nothing earned
        if not elapsed > 0:
            return

        earned = elapsed * self._refill_rate
        if not math.isfinite(earned):
            # Saturate instead of carrying an unbounded interval forward
            logger.debug(f"Refill overflowed after {elapsed}s, saturating at capacity")
            self._tokens = self._capacity
            self._last_refill = now
            return

        tokens_to_add = math.floor(earned)
        if tokens_to_add <= 0:
            return

        self._tokens = min(self._capacity, self._tokens + tokens_to_add)
        self._last_refill += tokens_to_add / self._refill_rate

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(capacity={self._capacity}, "
            f"refill_rate={self._refill_rate}, tokens={self._tokens})"
        )


__all__ = ["TokenBucket"]
