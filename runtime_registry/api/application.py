"""FastAPI application factory for the runtime key registry service."""

from fastapi import FastAPI

from runtime_registry.config import AppSettings

from .routers import api_create_health_router, api_create_runtime_keys_router


def create_api_application(settings: AppSettings) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for runtime metadata.

    Returns:
        FastAPI: Framework application instance with registry routes.

    Raises:
        ValueError: Raised when settings is None.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    application = FastAPI(title="Runtime Key Registry")

    @application.get("/", tags=["foundation"])
    def foundation_index() -> dict[str, str]:
        """Return a minimal service banner for bootstrap verification."""

        return {
            "service": "runtime-registry",
            "status": "ready",
            "environment": settings.environment_name,
        }

    application.include_router(api_create_health_router())
    application.include_router(api_create_runtime_keys_router())

    return application
