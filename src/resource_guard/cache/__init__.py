# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Bounded least-recently-used cache.
"""

from .lru import LRUCache
from .models import NOT_FOUND, CacheStats, NotFound

__all__ = [
    "NOT_FOUND",
    "CacheStats",
    "LRUCache",
    "NotFound",
]
