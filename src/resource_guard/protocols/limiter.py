# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Protocol for keyed admission control."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class RateLimiterProtocol(Protocol):
    """
    Protocol for keyed rate limiters.

    Host services pick the key (user id, API key, client address) and
    interpret the boolean; formatting and transport of the decision are
    the host's business.
    """

    def allow_request(self, key: str) -> bool:
        """
        Decide whether one unit of work for ``key`` may proceed.

        Args:
            key: Caller-chosen identity being limited

        Returns:
            True if admitted, False if rejected
        """
        ...
