"""Error hierarchy for the joker wildcard library."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "WildcardError",
    "InvalidInputError",
    "ConfigNotFoundError",
    "ConfigError",
    "PatternFileError",
    "ErrorCodes",
]


class WildcardError(Exception):
    """Base error for all joker errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class InvalidInputError(WildcardError):
    """Raised when the API is called with an argument of the wrong type."""

    def __init__(self, argument: str, expected: str, value: Any, **kwargs: Any) -> None:
        super().__init__(
            code="GENERAL_INVALID_INPUT",
            message=f"'{argument}' must be {expected}, got {type(value).__name__}",
            details={"argument": argument, "expected": expected, "type": type(value).__name__},
            **kwargs,
        )

    @property
    def argument(self) -> str:
        """Name of the offending argument."""
        return self.details["argument"]


class ConfigNotFoundError(WildcardError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(WildcardError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class PatternFileError(WildcardError):
    """Raised when a pattern list definition is structurally invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="PATTERN_FILE_INVALID", message=message, **kwargs)


class ErrorCodes:
    """All library error codes as constants.

    Example:
        if error.code == ErrorCodes.GENERAL_INVALID_INPUT:
            handle_bad_argument()
    """

    GENERAL_INVALID_INPUT = "GENERAL_INVALID_INPUT"
    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    PATTERN_FILE_INVALID = "PATTERN_FILE_INVALID"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
