"""
Structured error types for the trove catalog.

Errors carry a category and a structured context so that callers can log
them with key-value fields instead of parsing messages.

Hierarchy::

    TroveError
    ├── SourceError              (SOURCE)
    │   └── ParseError           (PARSE)
    ├── AggregationError         (AGGREGATION)
    └── ConfigError              (CONFIG)
        ├── MissingConfigError
        ├── InvalidConfigError
        └── NoUsableDirectoriesError

Only conditions that make a whole load meaningless are raised. A single
unreadable or malformed source file is logged and skipped by the loaders.

Usage:
    from trove.core.errors import AggregationError

    try:
        path = directory.absolute()
    except OSError as e:
        raise AggregationError("Cannot resolve directory", cause=e).with_context(
            directory=str(directory)
        )
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Standard error categories for classification and log routing."""

    SOURCE = "SOURCE"
    PARSE = "PARSE"
    AGGREGATION = "AGGREGATION"
    CONFIG = "CONFIG"
    INTERNAL = "INTERNAL"


@dataclass
class ErrorContext:
    """
    Structured metadata attached to an error.

    Attributes:
        path: File the error relates to
        directory: Source directory the error relates to
        metadata: Additional key-value pairs
    """

    path: str | None = None
    directory: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result: dict[str, Any] = {}
        for key in ("path", "directory"):
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class TroveError(Exception):
    """
    Base exception for all trove errors.

    Subclasses set ``default_category``; every instance carries a
    ``context`` and an optional chained ``cause``.
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> TroveError:
        """
        Add context to this error (fluent API).

        Known context fields are set directly, anything else lands in
        ``context.metadata``.
        """
        for key, value in kwargs.items():
            if hasattr(self.context, key) and key != "metadata":
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# SOURCE ERRORS
# =============================================================================


class SourceError(TroveError):
    """
    A snapshot file could not be read.

    Built by the normalizer and logged, never raised out of a load.
    """

    default_category = ErrorCategory.SOURCE


class ParseError(SourceError):
    """Snapshot content is neither a character nor an account document."""

    default_category = ErrorCategory.PARSE


# =============================================================================
# AGGREGATION ERRORS
# =============================================================================


class AggregationError(TroveError):
    """A load could not run at all (as opposed to skipping a bad input)."""

    default_category = ErrorCategory.AGGREGATION


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================


class ConfigError(TroveError):
    """
    Configuration error.

    Never recoverable at runtime - configuration must be fixed.
    """

    default_category = ErrorCategory.CONFIG


class MissingConfigError(ConfigError):
    """A required TROVE_* setting is unset, e.g. no source directories."""

    def __init__(self, key: str, message: str | None = None):
        self.key = key
        super().__init__(message or f"Missing required configuration: {key}")
        self.context.metadata["setting"] = key


class InvalidConfigError(ConfigError):
    """A TROVE_* setting failed validation (raised by ``get_settings``)."""

    def __init__(self, key: str, value: Any, message: str | None = None):
        self.key = key
        self.value = value
        super().__init__(message or f"Invalid configuration for {key}: {value!r}")
        self.context.metadata["setting"] = key
        self.context.metadata["value"] = value


class NoUsableDirectoriesError(ConfigError):
    """None of the configured source directories could be read."""

    def __init__(self, directories: list[str]):
        self.directories = directories
        super().__init__(
            f"No usable source directories among {len(directories)} configured"
        )
        self.context.metadata["directories"] = directories


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "TroveError",
    "SourceError",
    "ParseError",
    "AggregationError",
    "ConfigError",
    "MissingConfigError",
    "InvalidConfigError",
    "NoUsableDirectoriesError",
]
