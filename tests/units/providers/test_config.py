"""Unit tests for the ConfigProvider."""

from unittest.mock import patch

import pytest
from portfolio.providers.config import Config, ConfigProvider
from pydantic import ValidationError


def test_get_config_returns_config_instance() -> None:
    """Tests that get_config returns a new Config instance on every call."""
    with patch("portfolio.providers.config.Config") as mock_config_constructor:
        config = ConfigProvider.get_config()
        mock_config_constructor.assert_called_once()
        assert config is not None


def test_defaults() -> None:
    """Tests the bilingual defaults."""
    config = Config()

    assert config.DEFAULT_LANGUAGE == "pt"
    assert config.SUPPORTED_LANGUAGES == ["pt", "en"]
    assert config.TRANSLATIONS_FILE.is_file()
    assert config.PARTIALS_DIR.is_dir()


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Tests that settings are read from environment variables."""
    monkeypatch.setenv("DEFAULT_LANGUAGE", "en")
    monkeypatch.setenv("SCROLL_COOKIE_NAME", "pending")

    config = ConfigProvider.get_config()

    assert config.DEFAULT_LANGUAGE == "en"
    assert config.SCROLL_COOKIE_NAME == "pending"


def test_rejects_unsupported_default_language() -> None:
    """Tests that the default language must be supported."""
    with pytest.raises(ValidationError):
        Config(DEFAULT_LANGUAGE="fr")
