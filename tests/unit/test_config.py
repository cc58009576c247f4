"""Tests for environment settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from contabilidade_pro.config import Settings, get_settings
from contabilidade_pro.core.models import Anexo


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test without CONTABIL_* variables."""
    for name in ("CONTABIL_LOG_LEVEL", "CONTABIL_DEFAULT_ANEXO", "CONTABIL_REPORT_DIR"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    """Defaults and environment overrides."""

    def test_defaults(self):
        """WARNING, Annex I and the current directory."""
        settings = Settings()

        assert settings.log_level == "WARNING"
        assert settings.default_annex == Anexo.I
        assert settings.report_dir == Path(".")

    def test_environment(self, monkeypatch, tmp_path):
        """Values come from CONTABIL_* variables."""
        monkeypatch.setenv("CONTABIL_LOG_LEVEL", "debug")
        monkeypatch.setenv("CONTABIL_DEFAULT_ANEXO", " iii ")
        monkeypatch.setenv("CONTABIL_REPORT_DIR", str(tmp_path))

        settings = Settings()

        assert settings.log_level == "DEBUG"
        assert settings.default_annex == Anexo.III
        assert settings.report_dir == tmp_path

    def test_invalid_log_level(self, monkeypatch):
        """Unknown log levels are rejected."""
        monkeypatch.setenv("CONTABIL_LOG_LEVEL", "verbose")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_annex(self, monkeypatch):
        """Unknown default annexes are rejected."""
        monkeypatch.setenv("CONTABIL_DEFAULT_ANEXO", "VI")
        with pytest.raises(ValidationError):
            Settings()

    def test_frozen(self):
        """Settings cannot be changed after creation."""
        settings = Settings()
        with pytest.raises(ValidationError):
            settings.log_level = "DEBUG"

    def test_get_settings_cached(self):
        """The same instance is returned on every call."""
        assert get_settings() is get_settings()
