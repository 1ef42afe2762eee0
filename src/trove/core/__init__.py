"""Platform primitives: errors, logging and settings."""

from trove.core.errors import (
    AggregationError,
    ConfigError,
    ErrorCategory,
    ErrorContext,
    InvalidConfigError,
    MissingConfigError,
    NoUsableDirectoriesError,
    ParseError,
    SourceError,
    TroveError,
)
from trove.core.logging import configure_logging, get_logger

__all__ = [
    "AggregationError",
    "ConfigError",
    "ErrorCategory",
    "ErrorContext",
    "InvalidConfigError",
    "MissingConfigError",
    "NoUsableDirectoriesError",
    "ParseError",
    "SourceError",
    "TroveError",
    "configure_logging",
    "get_logger",
]
