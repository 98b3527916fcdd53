# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Protocol definitions for resource guard components.

Available protocols:
- ClockProtocol: Interface for injectable time sources
- RateLimiterProtocol: Interface for keyed admission control
"""

from .clock import ClockProtocol
from .limiter import RateLimiterProtocol

__all__ = [
    "ClockProtocol",
    "RateLimiterProtocol",
]
