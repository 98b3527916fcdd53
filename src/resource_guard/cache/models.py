# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Models for the bounded cache.

Contains the NOT_FOUND sentinel and the cache statistics dataclass.
"""

from dataclasses import dataclass
from enum import Enum


class NotFound(Enum):
    """
    Result of a cache lookup for an absent key.

    A single-member enum is used instead of ``None`` so that ``None`` (or any
    other value) can be stored and retrieved like a normal value. Compare with
    ``is``:

        >>> value = cache.get("k")
        >>> if value is NOT_FOUND:
        ...     value = load("k")
    """

    NOT_FOUND = "NOT_FOUND"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND = NotFound.NOT_FOUND


@dataclass
class CacheStats:
    """Cache access counters."""

    hits: int = 0
    misses: int = 0
    evictions: int = 0

    @property
    def hit_ratio(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0


__all__ = ["NOT_FOUND", "CacheStats", "NotFound"]
