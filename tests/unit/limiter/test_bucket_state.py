"""Unit tests for the BucketState snapshot model."""

import pytest
from pydantic import ValidationError

from resource_guard.limiter import BucketState


class TestBucketState:
    def test_valid_state(self):
        """Test creating a valid snapshot."""
        state = BucketState(capacity=5, refill_rate=2.0, tokens=3, last_refill=10.0)
        assert state.tokens == 3
        assert state.is_empty is False

    def test_empty_state(self):
        state = BucketState(capacity=5, refill_rate=2.0, tokens=0, last_refill=0.0)
        assert state.is_empty is True

    def test_tokens_above_capacity_rejected(self):
        """Test that the bucket invariant is enforced."""
        with pytest.raises(ValidationError, match="tokens must not exceed capacity"):
            BucketState(capacity=5, refill_rate=2.0, tokens=6, last_refill=0.0)

    def test_negative_tokens_rejected(self):
        with pytest.raises(ValidationError):
            BucketState(capacity=5, refill_rate=2.0, tokens=-1, last_refill=0.0)

    @pytest.mark.parametrize(
        ("capacity", "refill_rate"),
        [(0, 1.0), (5, 0.0), (5, -1.0)],
    )
    def test_non_positive_parameters_rejected(self, capacity, refill_rate):
        with pytest.raises(ValidationError):
            BucketState(
                capacity=capacity, refill_rate=refill_rate, tokens=0, last_refill=0.0
            )

    def test_frozen(self):
        """Test that snapshots cannot be mutated."""
        state = BucketState(capacity=5, refill_rate=2.0, tokens=3, last_refill=10.0)
        with pytest.raises(ValidationError):
            state.tokens = 4

    def test_model_dump(self):
        state = BucketState(capacity=5, refill_rate=2.0, tokens=3, last_refill=10.0)
        assert state.model_dump() == {
            "capacity": 5,
            "refill_rate": 2.0,
            "tokens": 3,
            "last_refill": 10.0,
        }
