# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Token-bucket admission control.

Classes:
    TokenBucket: A single lazily refilled bucket.
    TokenBucketRateLimiter: Registry of per-key buckets.
    BucketState: Validated bucket snapshot.
"""

from .bucket import TokenBucket
from .models import BucketState
from .registry import TokenBucketRateLimiter

__all__ = [
    "BucketState",
    "TokenBucket",
    "TokenBucketRateLimiter",
]
