"""
Tests for configuration module.
"""

import pytest
from pydantic import ValidationError

from geodoc.core.config import Settings


class TestSettings:
    """Tests for Settings class."""

    def test_default_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that default values are set correctly."""
        for key in ("GEODOC_ENVIRONMENT", "GEODOC_LOG_LEVEL", "GEODOC_JSON_INDENT"):
            monkeypatch.delenv(key, raising=False)

        settings = Settings(_env_file=None)
        assert settings.environment == "development"
        assert settings.log_level is None
        assert settings.json_indent is None
        assert settings.json_sort_keys is False
        assert settings.json_ensure_ascii is False

    def test_environment_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test settings are read from GEODOC_ variables."""
        monkeypatch.setenv("GEODOC_JSON_INDENT", "2")
        monkeypatch.setenv("GEODOC_JSON_SORT_KEYS", "true")
        monkeypatch.setenv("geodoc_environment", "production")

        settings = Settings(_env_file=None)
        assert settings.json_indent == 2
        assert settings.json_sort_keys is True
        assert settings.environment == "production"

    def test_env_file(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test settings are read from a .env file."""
        monkeypatch.delenv("GEODOC_LOG_LEVEL", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("GEODOC_LOG_LEVEL=WARNING\n", encoding="utf-8")

        settings = Settings(_env_file=env_file)
        assert settings.log_level == "WARNING"

    def test_custom_values(self) -> None:
        """Test setting custom configuration values."""
        settings = Settings(json_indent=4, json_ensure_ascii=True, environment="staging")

        assert settings.json_indent == 4
        assert settings.json_ensure_ascii is True
        assert settings.environment == "staging"

    def test_negative_indent(self) -> None:
        """Test indentation cannot be negative."""
        with pytest.raises(ValidationError):
            Settings(json_indent=-1)

    def test_unknown_environment(self) -> None:
        """Test environment is restricted to known names."""
        with pytest.raises(ValidationError):
            Settings(environment="qa")
