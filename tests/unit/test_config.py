import math

import pytest

from resource_guard.config import (
    CacheConfig,
    LimiterConfig,
    validate_capacity,
    validate_refill_rate,
)
from resource_guard.exceptions import InvalidArgumentError


class TestCacheConfig:
    def test_default_values(self):
        """Test default configuration values."""
        config = CacheConfig()
        assert config.capacity == 1024

    def test_validation_capacity(self):
        """Test validation of capacity."""
        CacheConfig(capacity=1)

        with pytest.raises(InvalidArgumentError, match="capacity"):
            CacheConfig(capacity=0)
        with pytest.raises(InvalidArgumentError, match="capacity"):
            CacheConfig(capacity=-5)

    def test_frozen(self):
        config = CacheConfig(capacity=3)
        with pytest.raises(AttributeError):
            config.capacity = 4  # type: ignore[misc]


class TestLimiterConfig:
    def test_default_values(self):
        """Test default configuration values."""
        config = LimiterConfig()
        assert config.capacity == 10
        assert config.refill_rate == 1.0

    def test_validation_capacity(self):
        with pytest.raises(InvalidArgumentError, match="capacity"):
            LimiterConfig(capacity=0)

    def test_validation_refill_rate(self):
        """Test validation of refill_rate."""
        LimiterConfig(refill_rate=0.01)
        LimiterConfig(refill_rate=1000)

        with pytest.raises(InvalidArgumentError, match="refill_rate"):
            LimiterConfig(refill_rate=0)
        with pytest.raises(InvalidArgumentError, match="refill_rate"):
            LimiterConfig(refill_rate=-1.0)


class TestValidators:
    @pytest.mark.parametrize("value", [1, 10, 2**40])
    def test_validate_capacity_accepts_positive_ints(self, value):
        validate_capacity(value)

    @pytest.mark.parametrize("value", [True, False, 1.0, "1", None])
    def test_validate_capacity_rejects_non_ints(self, value):
        with pytest.raises(InvalidArgumentError, match="must be an int"):
            validate_capacity(value)

    def test_validate_capacity_custom_argument_name(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validate_capacity(0, argument="max_entries")
        assert exc_info.value.argument == "max_entries"
        assert str(exc_info.value) == "max_entries must be positive, got 0"

    @pytest.mark.parametrize("value", [True, "2", None])
    def test_validate_refill_rate_rejects_non_numbers(self, value):
        with pytest.raises(InvalidArgumentError, match="must be a number"):
            validate_refill_rate(value)

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
    def test_validate_refill_rate_rejects_non_finite(self, value):
        with pytest.raises(InvalidArgumentError, match="finite"):
            validate_refill_rate(value)
