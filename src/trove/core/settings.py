"""Configuration management using Pydantic Settings."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from trove.core.errors import InvalidConfigError, MissingConfigError


class TroveSettings(BaseSettings):
    """
    Application settings loaded from environment variables.

    ``TROVE_DIRS`` is parsed as a JSON list, e.g.
    ``TROVE_DIRS='["/data/trove", "/backup/trove"]'``.
    """

    model_config = SettingsConfigDict(
        env_prefix="TROVE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Sources ──────────────────────────────────────────────────
    dirs: list[Path] = Field(
        default_factory=list,
        description="Directories containing Trove JSON snapshot files",
    )
    reload_interval: float = Field(
        60.0,
        gt=0,
        description="Seconds between change-detection polls",
    )

    # ── Queries ──────────────────────────────────────────────────
    page_size: int = Field(100, gt=0, description="Items per result page")

    # ── Observability ────────────────────────────────────────────
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "console"] = "console"
    verbose: bool = False

    @property
    def effective_log_level(self) -> str:
        """DEBUG when verbose, otherwise the configured level."""
        return "DEBUG" if self.verbose else self.log_level

    def require_dirs(self) -> list[Path]:
        """Return configured directories, raising if there are none."""
        if not self.dirs:
            raise MissingConfigError("dirs", "At least one input directory is required")
        return list(self.dirs)


# Global settings instance
_settings: TroveSettings | None = None


def get_settings() -> TroveSettings:
    """
    Get or create settings instance.

    Raises:
        InvalidConfigError: If a TROVE_* value fails validation
    """
    global _settings
    if _settings is None:
        try:
            _settings = TroveSettings()
        except ValidationError as e:
            first = e.errors()[0]
            key = ".".join(str(part) for part in first["loc"]) or "settings"
            raise InvalidConfigError(
                key, first.get("input"), f"Invalid configuration for {key}: {first['msg']}"
            ) from e
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None
