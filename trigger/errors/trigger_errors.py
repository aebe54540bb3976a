"""Exception hierarchy for the trigger event registry.

Every error raised by the package derives from :class:`TriggerError`, so
callers can catch the whole family in one place. Listener failures are never
wrapped in these types; they propagate as raised.
"""

from __future__ import annotations

from typing import Any


class TriggerError(Exception):
    """Base exception for all trigger errors."""

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> dict[str, Any]:
        """Convert error to a plain dictionary."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message} (caused by: {self.cause!s})"
        return self.message


class InvalidArgumentError(TriggerError, TypeError):
    """Raised when an argument fails its type contract.

    Also a ``TypeError`` so generic callers handling bad argument types keep
    working.
    """

    def __init__(
        self,
        message: str,
        *,
        argument: str | None = None,
        expected: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if argument:
            details["argument"] = argument
        if expected:
            details["expected"] = expected
        super().__init__(message, error_code="InvalidArgument", details=details, **kwargs)
        self.argument = argument
        self.expected = expected


class ConfigurationError(TriggerError):
    """Raised when there's a configuration problem."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, error_code="ConfigurationError", details=details, **kwargs)
        self.config_key = config_key
