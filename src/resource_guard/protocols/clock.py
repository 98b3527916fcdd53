# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Protocol for time sources."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ClockProtocol(Protocol):
    """
    Protocol for the time source injected into token buckets.

    Any zero-argument callable returning seconds as a float satisfies it,
    e.g. ``time.monotonic`` (the default) or a fake clock in tests. Only
    differences between readings are used, so the epoch is irrelevant.
    """

    def __call__(self) -> float:
        """Return the current time in seconds."""
        ...
