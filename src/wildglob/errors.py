"""Error hierarchy for wildglob."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "GlobError",
    "ConfigNotFoundError",
    "ConfigError",
    "InvalidWildcardError",
    "ErrorCodes",
]


class GlobError(Exception):
    """Base error for all wildglob errors."""

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


class ConfigNotFoundError(GlobError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )

    @property
    def config_path(self) -> str:
        return self.details["config_path"]


class ConfigError(GlobError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class InvalidWildcardError(GlobError):
    """Raised when an empty string is chosen as the wildcard token."""

    def __init__(self, wildcard: str, **kwargs: Any) -> None:
        super().__init__(
            code="INVALID_WILDCARD",
            message=f"Wildcard token must be a non-empty string, got {wildcard!r}",
            details={"wildcard": wildcard},
            **kwargs,
        )


class ErrorCodes:
    """All wildglob error codes as constants.

    Example:
        if error.code == ErrorCodes.CONFIG_NOT_FOUND:
            use_defaults()
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    INVALID_WILDCARD = "INVALID_WILDCARD"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
