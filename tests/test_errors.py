"""Tests for the joker error hierarchy."""

from __future__ import annotations

import pytest

from joker.errors import (
    ConfigError,
    ConfigNotFoundError,
    ErrorCodes,
    InvalidInputError,
    PatternFileError,
    WildcardError,
)


class TestWildcardError:
    """Tests for the base error."""

    def test_str_includes_code(self) -> None:
        """str() renders as '[CODE] message'."""
        error = WildcardError(code="SOME_CODE", message="went wrong")
        assert str(error) == "[SOME_CODE] went wrong"

    def test_defaults(self) -> None:
        """details defaults to an empty dict and a timestamp is recorded."""
        error = WildcardError(code="X", message="m")
        assert error.details == {}
        assert error.cause is None
        assert error.timestamp.endswith("+00:00")


class TestSubclasses:
    """Tests for concrete error types."""

    @pytest.mark.parametrize(
        ("error", "code"),
        [
            (InvalidInputError("candidate", "a string", 3), ErrorCodes.GENERAL_INVALID_INPUT),
            (ConfigNotFoundError("/nope.yaml"), ErrorCodes.CONFIG_NOT_FOUND),
            (ConfigError("bad"), ErrorCodes.CONFIG_INVALID),
            (PatternFileError("bad"), ErrorCodes.PATTERN_FILE_INVALID),
        ],
    )
    def test_codes(self, error: WildcardError, code: str) -> None:
        """Each subclass carries its error code and derives from WildcardError."""
        assert error.code == code
        assert isinstance(error, WildcardError)

    def test_invalid_input_message(self) -> None:
        """InvalidInputError names the argument and the received type."""
        error = InvalidInputError("candidate", "a string", None)
        assert error.message == "'candidate' must be a string, got NoneType"
        assert error.details["type"] == "NoneType"


class TestErrorCodes:
    """Tests for the ErrorCodes constants."""

    def test_immutable(self) -> None:
        """Instances refuse attribute assignment."""
        with pytest.raises(AttributeError):
            ErrorCodes().GENERAL_INVALID_INPUT = "x"  # type: ignore[misc]
