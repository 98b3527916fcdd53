# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Bounded cache with least-recently-used eviction.

The recency ordering is an intrusive doubly-linked list framed by two sentinel
nodes, and a dict maps each key to its node. Both structures are only ever
mutated together under one lock, so get/put/evict stay O(1) and the dict and
the list always hold the same keys.

    head <-> MRU <-> ... <-> LRU <-> tail
"""

import logging
import threading
from collections.abc import Hashable
from typing import Any, Generic, TypeVar

from ..config import CacheConfig, validate_capacity
from ..observability.constants import (
    CACHE_EVICTIONS_TOTAL,
    CACHE_HITS_TOTAL,
    CACHE_MISSES_TOTAL,
    CACHE_SIZE,
)
from ..observability.protocols import MetricsCollectorProtocol
from .models import NOT_FOUND, CacheStats, NotFound

logger = logging.getLogger(__name__)  # resource_guard.cache.lru

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class _Node:
    """List node; the cache (not the node) owns ordering and index."""

    __slots__ = ("key", "next", "prev", "value")

    def __init__(self, key: Any, value: Any) -> None:
        self.key = key
        self.value = value
        self.prev: _Node = self
        self.next: _Node = self


class LRUCache(Generic[K, V]):
    """
    Fixed-capacity key/value store with O(1) get/put and LRU eviction.

    Every ``get`` hit and every ``put`` moves the key to the most-recently-used
    position. Inserting a new key into a full cache first evicts the entry at
    the least-recently-used end.

    Thread Safety:
        A single threading.Lock covers index lookup, list reposition and
        eviction for each call. Nothing inside the critical section blocks,
        so the cache is also safe to call from asyncio tasks.

    Example:
        >>> cache = LRUCache(2)
        >>> cache.put("a", 1)
        >>> cache.get("a")
        1
        >>> cache.get("b") is NOT_FOUND
        True
    """

    def __init__(
        self,
        capacity: int,
        metrics_collector: MetricsCollectorProtocol | None = None,
        name: str = "lru_cache",
    ) -> None:
        """
        Initialize the cache.

        Args:
            capacity: Maximum number of entries, a positive int
            metrics_collector: Optional collector for hit/miss/eviction metrics
            name: Value of the ``component`` metric label

        Raises:
            InvalidArgumentError: If capacity is not a positive int
        """
        validate_capacity(capacity)

        self._capacity = capacity
        self._index: dict[K, _Node] = {}

        self._head = _Node(None, None)
        self._tail = _Node(None, None)
        self._head.next = self._tail
        self._tail.prev = self._head

        self._lock = threading.Lock()

        self.metrics = CacheStats()
        self._metrics_collector = metrics_collector
        self._labels = {"component": name}

        logger.debug(f"LRUCache '{name}' initialized with capacity {capacity}")

    @classmethod
    def from_config(
        cls,
        config: CacheConfig,
        metrics_collector: MetricsCollectorProtocol | None = None,
        name: str = "lru_cache",
    ) -> "LRUCache[K, V]":
        """Create a cache from a validated CacheConfig."""
        return cls(config.capacity, metrics_collector=metrics_collector, name=name)

    @property
    def capacity(self) -> int:
        return self._capacity

    # === Public API ===

    def get(self, key: K) -> V | NotFound:
        """
        Look up ``key`` and mark it most recently used.

        Returns:
            The stored value, or NOT_FOUND if the key is absent. A miss does
            not touch the recency ordering.
        """
        with self._lock:
            node = self._index.get(key)
            if node is None:
                self.metrics.misses += 1
                if self._metrics_collector:
                    self._metrics_collector.inc_counter(
                        CACHE_MISSES_TOTAL, labels=self._labels
                    )
                return NOT_FOUND

            self._move_to_front(node)
            self.metrics.hits += 1
            if self._metrics_collector:
                self._metrics_collector.inc_counter(
                    CACHE_HITS_TOTAL, labels=self._labels
                )
            value: V = node.value
            return value

    def put(self, key: K, value: V) -> None:
        """
        Insert or overwrite ``key`` and mark it most recently used.

        A new key arriving at a full cache evicts the least recently used
        entry first.
        """
        with self._lock:
            node = self._index.get(key)
            if node is not None:
                node.value = value
                self._move_to_front(node)
                return

            if len(self._index) >= self._capacity:
                self._evict_lru_unsafe()

            node = _Node(key, value)
            self._add_to_front(node)
            self._index[key] = node

            if self._metrics_collector:
                self._metrics_collector.set_gauge(
                    CACHE_SIZE, len(self._index), labels=self._labels
                )

    def clear(self) -> None:
        """Drop every entry. Statistics are kept."""
        with self._lock:
            self._index.clear()
            self._head.next = self._tail
            self._tail.prev = self._head
            if self._metrics_collector:
                self._metrics_collector.set_gauge(CACHE_SIZE, 0, labels=self._labels)
        logger.debug(f"LRUCache '{self._labels['component']}' cleared")

    def keys(self) -> list[K]:
        """Snapshot of the keys, most recently used first."""
        with self._lock:
            keys = []
            node = self._head.next
            while node is not self._tail:
                keys.append(node.key)
                node = node.next
            return keys

    def get_stats(self) -> dict[str, Any]:
        """Get cache statistics."""
        with self._lock:
            return {
                "size": len(self._index),
                "capacity": self._capacity,
                "hits": self.metrics.hits,
                "misses": self.metrics.misses,
                "evictions": self.metrics.evictions,
                "hit_ratio": self.metrics.hit_ratio,
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._index)

    def __contains__(self, key: object) -> bool:
        """Membership test; does not count as a use."""
        with self._lock:
            return key in self._index

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(capacity={self._capacity}, "
            f"size={len(self._index)})"
        )

    # === List maintenance (caller holds self._lock) ===

    def _unlink(self, node: _Node) -> None:
        node.prev.next = node.next
        node.next.prev = node.prev

    def _add_to_front(self, node: _Node) -> None:
        node.prev = self._head
        node.next = self._head.next
        self._head.next.prev = node
        self._head.next = node

    def _move_to_front(self, node: _Node) -> None:
        if self._head.next is node:
            return
        self._unlink(node)
        self._add_to_front(node)

    def _evict_lru_unsafe(self) -> None:
        """Evict the entry at the tail of the ordering."""
        lru = self._tail.prev
        if lru is self._head:
            return

        self._unlink(lru)
        del self._index[lru.key]
        self.metrics.evictions += 1
        if self._metrics_collector:
            self._metrics_collector.inc_counter(
                CACHE_EVICTIONS_TOTAL, labels=self._labels
            )
        logger.debug(f"LRUCache '{self._labels['component']}' evicted key {lru.key!r}")


__all__ = ["LRUCache"]
