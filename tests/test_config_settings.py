"""Tests for runtime settings loading and logging configuration."""

from __future__ import annotations

import logging

import pytest

from runtime_registry.config import SettingsLoadError, config_configure_logging, config_load_settings
from runtime_registry.config.logging_setup import LOG_HANDLER_NAME


def test_config_load_settings_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Read settings from environment variables with case-insensitive names.

    Args:
        monkeypatch: Pytest fixture for environment isolation.

    Returns:
        None: Assertions validate loaded settings.

    Raises:
        AssertionError: Raised when environment values are not applied.
    """

    monkeypatch.setenv("ENVIRONMENT_NAME", " staging ")
    monkeypatch.setenv("APPLICATION_PORT", "9001")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = config_load_settings()

    assert settings.environment_name == "staging"
    assert settings.application_port == 9001
    assert settings.log_level == "DEBUG"


def test_config_load_settings_wraps_validation_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    """Raise SettingsLoadError for invalid environment values."""

    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(SettingsLoadError, match="Startup configuration validation failed"):
        config_load_settings()


def test_config_load_settings_rejects_out_of_range_port(monkeypatch: pytest.MonkeyPatch) -> None:
    """Raise SettingsLoadError for ports outside the valid range."""

    monkeypatch.setenv("APPLICATION_PORT", "70000")

    with pytest.raises(SettingsLoadError):
        config_load_settings()


def test_config_configure_logging_installs_single_handler() -> None:
    """Install the named handler once and update level on repeated calls."""

    root_logger = logging.getLogger()
    original_level = root_logger.level
    try:
        config_configure_logging("WARNING")
        config_configure_logging("DEBUG")

        named_handlers = [handler for handler in root_logger.handlers if handler.get_name() == LOG_HANDLER_NAME]
        assert len(named_handlers) == 1
        assert root_logger.level == logging.DEBUG
    finally:
        for handler in list(root_logger.handlers):
            if handler.get_name() == LOG_HANDLER_NAME:
                root_logger.removeHandler(handler)
        root_logger.setLevel(original_level)
