# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Configuration for Resource Guard primitives

This module provides configuration classes for the bounded cache and the
keyed rate limiter, plus the argument validators both primitives share.
"""

import math
from dataclasses import dataclass

from .exceptions import InvalidArgumentError


def validate_capacity(capacity: int, argument: str = "capacity") -> None:
    """
    Validate that capacity is a positive integer.

    Args:
        capacity: The capacity value to validate
        argument: Parameter name used in the error message

    Raises:
        InvalidArgumentError: If capacity is not an int or is not positive
    """
    # bool is an int subclass; True is not a capacity
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise InvalidArgumentError(
            argument, capacity, f"must be an int, not {type(capacity).__name__}"
        )
    if capacity <= 0:
        raise InvalidArgumentError(argument, capacity)


def validate_refill_rate(refill_rate: float, argument: str = "refill_rate") -> None:
    """
    Validate that refill_rate is a positive, finite number of tokens per second.

    Raises:
        InvalidArgumentError: If refill_rate is not a number, not finite, or
            not positive
    """
    if isinstance(refill_rate, bool) or not isinstance(refill_rate, (int, float)):
        raise InvalidArgumentError(
            argument,
            refill_rate,
            f"must be a number, not {type(refill_rate).__name__}",
        )
    if not math.isfinite(refill_rate):
        raise InvalidArgumentError(argument, refill_rate, "must be finite")
    if refill_rate <= 0:
        raise InvalidArgumentError(argument, refill_rate)


@dataclass(frozen=True)
class CacheConfig:
    """
    Configuration for an LRUCache.
    """

    capacity: int = 1024
    """Maximum number of entries before LRU eviction."""

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        validate_capacity(self.capacity)


@dataclass(frozen=True)
class LimiterConfig:
    """
    Configuration for a TokenBucketRateLimiter.

    Every bucket the limiter creates shares these parameters.
    """

    capacity: int = 10
    """Maximum tokens per bucket (burst size). Buckets start full."""

    refill_rate: float = 1.0
    """Tokens added per second."""

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        validate_capacity(self.capacity)
        validate_refill_rate(self.refill_rate)


__all__ = [
    "CacheConfig",
    "LimiterConfig",
    "validate_capacity",
    "validate_refill_rate",
]
