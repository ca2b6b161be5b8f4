"""API router package for endpoint composition."""

from .health import api_create_health_router
from .runtime_keys import api_create_runtime_keys_router

__all__ = ["api_create_health_router", "api_create_runtime_keys_router"]
