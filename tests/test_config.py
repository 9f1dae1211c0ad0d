"""Tests for settings, logging setup and exceptions."""

import logging

import pytest
from rich.logging import RichHandler

from chainlinked.config import logging as logging_config
from chainlinked.config import clear_settings_cache, get_logger, get_settings, setup_logging
from chainlinked.exceptions import (
    ChainLinkedError,
    ConfigurationError,
    GenerationError,
    NothingToGenerateError,
    ResponseParseError,
    TemplateLoadError,
)


@pytest.fixture
def package_logger(monkeypatch):
    """Package logger restored after setup_logging changes it."""
    logger = logging.getLogger("chainlinked")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    monkeypatch.setattr(logging_config, "_configured", False)
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate


class TestSettings:
    """Tests for Settings and get_settings."""

    def test_defaults(self, monkeypatch) -> None:
        """Test default values without environment overrides."""
        monkeypatch.delenv("CHAINLINKED_GENERATION_RETRY_MIN_WAIT")
        monkeypatch.delenv("CHAINLINKED_GENERATION_RETRY_MAX_WAIT")
        clear_settings_cache()
        settings = get_settings()
        assert settings.log_level == "INFO"
        assert settings.generation_max_attempts == 3
        assert settings.generation_retry_min_wait == 1.0
        assert settings.generation_retry_max_wait == 8.0
        assert settings.style_refresh_post_growth == 0.2
        assert settings.style_refresh_max_age_days == 7.0

    def test_env_override(self, monkeypatch) -> None:
        """Test CHAINLINKED_* variables override defaults."""
        monkeypatch.setenv("CHAINLINKED_LOG_LEVEL", "debug")
        monkeypatch.setenv("CHAINLINKED_GENERATION_MAX_ATTEMPTS", "5")
        clear_settings_cache()
        settings = get_settings()
        assert settings.log_level == "DEBUG"
        assert settings.generation_max_attempts == 5

    def test_cached(self) -> None:
        """Test the settings instance is cached until cleared."""
        first = get_settings()
        assert get_settings() is first
        clear_settings_cache()
        assert get_settings() is not first

    @pytest.mark.parametrize(
        "name,value",
        [
            ("CHAINLINKED_LOG_LEVEL", "LOUD"),
            ("CHAINLINKED_GENERATION_MAX_ATTEMPTS", "0"),
            ("CHAINLINKED_GENERATION_MAX_ATTEMPTS", "11"),
            ("CHAINLINKED_STYLE_REFRESH_POST_GROWTH", "0"),
        ],
    )
    def test_invalid_values(self, monkeypatch, name: str, value: str) -> None:
        """Test invalid values raise ConfigurationError with details."""
        monkeypatch.setenv(name, value)
        clear_settings_cache()
        with pytest.raises(ConfigurationError) as exc_info:
            get_settings()
        assert exc_info.value.details


class TestLogging:
    """Tests for setup_logging and get_logger."""

    def test_get_logger_namespaced(self) -> None:
        """Test loggers live under the package root."""
        assert get_logger("chainlinked.carousel").name == "chainlinked.carousel"
        assert get_logger("chainlinked").name == "chainlinked"
        assert get_logger("scripts.tool").name == "chainlinked.scripts.tool"

    def test_setup_installs_rich_handler_once(self, package_logger) -> None:
        """Test repeated setup does not stack handlers."""
        setup_logging("warning")
        setup_logging("debug")
        rich_handlers = [h for h in package_logger.handlers if isinstance(h, RichHandler)]
        assert len(rich_handlers) == 1
        assert package_logger.level == logging.DEBUG
        assert package_logger.propagate is False

    def test_setup_uses_settings_level(self, package_logger, monkeypatch) -> None:
        """Test the level defaults to the configured setting."""
        monkeypatch.setenv("CHAINLINKED_LOG_LEVEL", "ERROR")
        clear_settings_cache()
        setup_logging()
        assert package_logger.level == logging.ERROR


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_message_and_details(self) -> None:
        """Test details are appended to the string form."""
        error = ChainLinkedError("Something failed", "stack info")
        assert error.message == "Something failed"
        assert str(error) == "Something failed\n  Details: stack info"
        assert str(ChainLinkedError("Plain")) == "Plain"

    def test_hierarchy(self) -> None:
        """Test generation errors share a base and template errors are ValueErrors."""
        assert issubclass(NothingToGenerateError, GenerationError)
        assert issubclass(ResponseParseError, GenerationError)
        assert issubclass(GenerationError, ChainLinkedError)
        assert issubclass(TemplateLoadError, ValueError)
        assert ResponseParseError("x", attempts=3).attempts == 3
