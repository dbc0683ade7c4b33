"""
ABOUTME: Unit tests for the Success, Missing and Invalid outcome types
ABOUTME: Tests unwrapping, error construction and immutability
"""

from dataclasses import FrozenInstanceError

import pytest

from strict_env import Invalid, InvalidValueError, Missing, MissingVariableError, Success


class TestSuccess:
    """Test the Success outcome."""

    def test_unwrap_returns_value(self):
        """Test that unwrap hands back the parsed value."""
        assert Success(9001).unwrap() == 9001
        assert Success(9001).ok is True

    def test_is_frozen(self):
        """Test that outcomes cannot be mutated."""
        outcome = Success(1)
        with pytest.raises(FrozenInstanceError):
            outcome.value = 2


class TestMissing:
    """Test the Missing outcome."""

    def test_unwrap_raises_missing(self):
        """Test that unwrap raises MissingVariableError for the name."""
        with pytest.raises(MissingVariableError, match="PORT"):
            Missing("PORT").unwrap()

    def test_error_is_not_raised(self):
        """Test that error() builds the exception without raising it."""
        error = Missing("PORT").error()
        assert isinstance(error, MissingVariableError)
        assert error.name == "PORT"
        assert Missing("PORT").ok is False


class TestInvalid:
    """Test the Invalid outcome."""

    def test_unwrap_raises_invalid_with_cause(self):
        """Test that unwrap raises InvalidValueError chained to the parser's error."""
        cause = ValueError("bad")
        with pytest.raises(InvalidValueError) as exc_info:
            Invalid("PORT", "x", cause).unwrap()
        assert exc_info.value.cause is cause
        assert exc_info.value.__cause__ is cause
        assert exc_info.value.raw == "x"

    def test_outcomes_are_distinguishable(self):
        """Test that Missing and Invalid never compare equal."""
        assert Missing("PORT") != Invalid("PORT", "", ValueError())
        assert Missing("PORT") != Success(None)
