"""Tests for trove.core.settings - environment-driven configuration."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from trove.core.errors import InvalidConfigError, MissingConfigError
from trove.core.settings import TroveSettings, get_settings, reset_settings


class TestTroveSettings:
    """Test defaults and environment parsing."""

    def test_defaults(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)  # no stray .env
        settings = TroveSettings()
        assert settings.dirs == []
        assert settings.reload_interval == 60.0
        assert settings.page_size == 100
        assert settings.log_level == "INFO"
        assert settings.log_format == "console"
        assert settings.verbose is False

    def test_dirs_from_env(self, monkeypatch):
        monkeypatch.setenv("TROVE_DIRS", '["/data/trove", "/backup/trove"]')
        assert TroveSettings().dirs == [Path("/data/trove"), Path("/backup/trove")]

    def test_reload_interval_from_env(self, monkeypatch):
        monkeypatch.setenv("TROVE_RELOAD_INTERVAL", "2.5")
        assert TroveSettings().reload_interval == 2.5

    def test_reload_interval_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("TROVE_RELOAD_INTERVAL", "0")
        with pytest.raises(ValidationError):
            TroveSettings()

    def test_page_size_must_be_positive(self):
        with pytest.raises(ValidationError):
            TroveSettings(page_size=0)

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("TROVE_LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            TroveSettings()

    def test_effective_log_level(self):
        assert TroveSettings(log_level="WARNING").effective_log_level == "WARNING"
        assert TroveSettings(log_level="WARNING", verbose=True).effective_log_level == "DEBUG"

    def test_require_dirs(self, tmp_path):
        settings = TroveSettings(dirs=[tmp_path])
        assert settings.require_dirs() == [tmp_path]

    def test_require_dirs_missing(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(MissingConfigError) as exc_info:
            TroveSettings().require_dirs()
        assert exc_info.value.key == "dirs"


class TestGetSettings:
    """Test the cached settings accessor."""

    def test_cached(self):
        assert get_settings() is get_settings()

    def test_invalid_environment_raises_config_error(self, monkeypatch):
        monkeypatch.setenv("TROVE_PAGE_SIZE", "0")
        with pytest.raises(InvalidConfigError) as exc_info:
            get_settings()
        assert exc_info.value.key == "page_size"
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_invalid_environment_is_not_cached(self, monkeypatch):
        monkeypatch.setenv("TROVE_RELOAD_INTERVAL", "-5")
        with pytest.raises(InvalidConfigError):
            get_settings()
        monkeypatch.setenv("TROVE_RELOAD_INTERVAL", "5")
        assert get_settings().reload_interval == 5.0

    def test_reset(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("TROVE_PAGE_SIZE", "25")
        reset_settings()
        second = get_settings()
        assert second is not first
        assert second.page_size == 25
