"""Health endpoint router composition for application liveness checks."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from runtime_registry.domain import RUNTIME_KEY_SUPPORT


def api_create_health_router() -> APIRouter:
    """Create health-check router reporting application and registry status.

    Returns:
        APIRouter: Router exposing `/health` endpoint.

    Raises:
        RuntimeError: This factory does not raise runtime errors.
    """

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        """Return application health state with loaded registry size.

        Returns:
            JSONResponse: Deterministic health payload for operational checks.

        Raises:
            RuntimeError: This handler does not raise runtime errors.
        """

        payload = {
            "status": "ok",
            "app": "up",
            "runtime_keys": len(RUNTIME_KEY_SUPPORT),
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    return router
