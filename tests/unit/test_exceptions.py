"""Unit tests for the exceptions module.

Tests all exception classes defined in resource_guard.exceptions.
"""

import pytest

from resource_guard.exceptions import InvalidArgumentError, ResourceGuardError


class TestResourceGuardError:
    """Tests for the base ResourceGuardError exception."""

    def test_can_be_caught_as_exception(self):
        """ResourceGuardError can be caught as a standard Exception."""
        with pytest.raises(Exception):  # noqa: B017
            raise ResourceGuardError("test error")

    def test_message_preserved(self):
        """ResourceGuardError preserves its message."""
        error = ResourceGuardError("test message")
        assert str(error) == "test message"


class TestInvalidArgumentError:
    """Tests for InvalidArgumentError."""

    def test_can_be_caught_as_resource_guard_error(self):
        """InvalidArgumentError can be caught as ResourceGuardError."""
        with pytest.raises(ResourceGuardError):
            raise InvalidArgumentError("capacity", 0)

    def test_can_be_caught_as_value_error(self):
        """InvalidArgumentError can be caught as ValueError."""
        with pytest.raises(ValueError):
            raise InvalidArgumentError("capacity", 0)

    def test_stores_argument_and_value(self):
        """InvalidArgumentError stores the parameter name and rejected value."""
        error = InvalidArgumentError("refill_rate", -1.5)
        assert error.argument == "refill_rate"
        assert error.value == -1.5

    def test_default_message(self):
        error = InvalidArgumentError("capacity", -3)
        assert str(error) == "capacity must be positive, got -3"

    def test_custom_reason(self):
        error = InvalidArgumentError("refill_rate", float("inf"), "must be finite")
        assert str(error) == "refill_rate must be finite, got inf"
