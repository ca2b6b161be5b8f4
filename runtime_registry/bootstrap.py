"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from runtime_registry.api import create_api_application
from runtime_registry.config import config_configure_logging, config_load_settings


def bootstrap_create_application() -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    settings = config_load_settings()
    config_configure_logging(settings.log_level)
    return create_api_application(settings=settings)
