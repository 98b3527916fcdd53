# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
State models for token buckets.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class BucketState(BaseModel):
    """
    Point-in-time snapshot of a token bucket, taken under the bucket's lock.

    Validation rejects snapshots that break the bucket invariant, so a
    corrupted bucket surfaces as a ValidationError instead of a bad number.
    """

    model_config = ConfigDict(frozen=True)

    capacity: int = Field(gt=0)
    refill_rate: float = Field(gt=0)
    tokens: int = Field(ge=0)
    last_refill: float

    @model_validator(mode="after")
    def _validate_tokens(self) -> "BucketState":
        """Validate that tokens never exceed capacity."""
        if self.tokens > self.capacity:
            raise ValueError("tokens must not exceed capacity")
        return self

    @property
    def is_empty(self) -> bool:
        return self.tokens == 0


__all__ = ["BucketState"]
