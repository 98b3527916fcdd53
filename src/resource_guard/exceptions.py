# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Exception classes for the resource guard library.

This module defines the exception hierarchy used throughout the library.
All exceptions inherit from ResourceGuardError, making it easy to catch
all library errors with a single except clause.

A cache miss is not an error: ``LRUCache.get`` returns the ``NOT_FOUND``
sentinel instead of raising.
"""

from typing import Any


class ResourceGuardError(Exception):
    """Base exception for all resource guard errors.

    Example:
        try:
            limiter = TokenBucketRateLimiter(capacity, refill_rate)
        except ResourceGuardError as e:
            logger.error(f"Resource guard error: {e}")
    """

    pass


class InvalidArgumentError(ResourceGuardError, ValueError):
    """Raised when a primitive is constructed with an invalid parameter.

    Construction fails before any internal state is built, so no partially
    initialized cache, bucket or limiter is ever observable. Subclasses
    ValueError so callers validating input generically still catch it.

    Attributes:
        argument: Name of the offending parameter.
        value: The rejected value.

    Example:
        try:
            cache = LRUCache(capacity=0)
        except InvalidArgumentError as e:
            logger.error(f"Bad {e.argument}: {e.value!r}")
    """

    def __init__(self, argument: str, value: Any, reason: str = "must be positive"):
        super().__init__(f"{argument} {reason}, got {value!r}")
        self.argument = argument
        self.value = value


__all__ = [
    "InvalidArgumentError",
    "ResourceGuardError",
]
