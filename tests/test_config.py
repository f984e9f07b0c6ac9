"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from relevance_engine.config import Settings, get_settings


class TestSettings:
    """Test suite for Settings and get_settings."""

    def test_defaults(self, monkeypatch):
        for name in ("DEFAULT_EXPLORATION_LEVEL", "MAX_RESULTS", "LOG_LEVEL", "HIGH_RELEVANCE_THRESHOLD"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)

        assert settings.default_exploration_level == 0.5
        assert settings.max_results == 50
        assert settings.high_relevance_threshold == 7.0
        assert settings.log_level == "INFO"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("MAX_RESULTS", "20")
        monkeypatch.setenv("default_exploration_level", "0.25")
        settings = get_settings()

        assert settings.max_results == 20
        assert settings.default_exploration_level == 0.25

    def test_cached(self):
        assert get_settings() is get_settings()

    @pytest.mark.parametrize("name,value", [
        ("DEFAULT_EXPLORATION_LEVEL", "1.5"),
        ("MAX_RESULTS", "0"),
        ("LOG_LEVEL", "LOUD"),
    ])
    def test_invalid_values(self, monkeypatch, name, value):
        monkeypatch.setenv(name, value)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)
