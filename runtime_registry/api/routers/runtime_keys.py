"""Runtime key API router composition for read-only registry queries."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse

from runtime_registry.domain import (
    BackendType,
    RuntimeKey,
    RuntimeKeyCheckResult,
    domain_check_runtime_keys,
    domain_resolve_runtime_key,
    runtime_key_list_mandatory_for,
    runtime_key_list_supported_for,
    runtime_key_support,
)

logger = logging.getLogger(__name__)


def api_create_runtime_keys_router() -> APIRouter:
    """Create router exposing runtime key support lookups.

    Returns:
        APIRouter: Router exposing `/runtime-keys` and `/backends` endpoints.

    Raises:
        RuntimeError: This factory does not raise runtime errors.
    """

    router = APIRouter(tags=["runtime-keys"])

    @router.get("/runtime-keys")
    def api_runtime_key_list() -> JSONResponse:
        """List every runtime key with its backend classification.

        Returns:
            JSONResponse: Runtime keys in declaration order.

        Raises:
            RuntimeError: This handler does not raise runtime errors.
        """

        payload = {
            "items": [api_serialize_runtime_key(key) for key in RuntimeKey],
            "backend_types": [backend_type.value for backend_type in BackendType],
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    @router.get("/runtime-keys/{name}")
    def api_runtime_key_detail(name: str) -> JSONResponse:
        """Return one runtime key by its exact name.

        Args:
            name: Case-sensitive runtime key name.

        Returns:
            JSONResponse: Key payload, or 404 envelope for unknown names.

        Raises:
            RuntimeError: This handler does not raise runtime errors.
        """

        key = domain_resolve_runtime_key(name)
        if key is None:
            logger.info("Rejected lookup for unknown runtime key %r", name)
            payload = {
                "status": "error",
                "code": "UNKNOWN_RUNTIME_KEY",
                "message": f"unknown runtime key={name}",
            }
            return JSONResponse(content=payload, status_code=status.HTTP_404_NOT_FOUND)
        return JSONResponse(content=api_serialize_runtime_key(key), status_code=status.HTTP_200_OK)

    @router.get("/backends/{backend_type}/runtime-keys")
    def api_backend_runtime_keys(backend_type: str) -> JSONResponse:
        """Return mandatory and supported runtime keys for one backend.

        Args:
            backend_type: Backend identifier.

        Returns:
            JSONResponse: Key name lists, or 404 envelope for unknown backends.

        Raises:
            RuntimeError: This handler does not raise runtime errors.
        """

        resolved_backend_type = api_resolve_backend_type(backend_type)
        if resolved_backend_type is None:
            return api_unknown_backend_response(backend_type)

        payload = {
            "backend_type": resolved_backend_type.value,
            "mandatory": [key.value for key in runtime_key_list_mandatory_for(resolved_backend_type)],
            "supported": [key.value for key in runtime_key_list_supported_for(resolved_backend_type)],
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    @router.get("/backends/{backend_type}/runtime-keys/check")
    def api_backend_runtime_keys_check(
        backend_type: str,
        keys: list[str] = Query(default=[]),
    ) -> JSONResponse:
        """Check supplied runtime key names against one backend.

        Args:
            backend_type: Backend identifier.
            keys: Runtime key names supplied by a workflow author.

        Returns:
            JSONResponse: Check result payload, or 404 envelope for unknown backends.

        Raises:
            RuntimeError: This handler does not raise runtime errors.
        """

        resolved_backend_type = api_resolve_backend_type(backend_type)
        if resolved_backend_type is None:
            return api_unknown_backend_response(backend_type)

        check_result = domain_check_runtime_keys(resolved_backend_type, keys)
        return JSONResponse(content=api_serialize_check_result(check_result), status_code=status.HTTP_200_OK)

    return router


def api_resolve_backend_type(value: str) -> BackendType | None:
    """Resolve a path value to a backend type, or None when unknown."""

    try:
        return BackendType(value)
    except ValueError:
        return None


def api_unknown_backend_response(value: str) -> JSONResponse:
    """Build the 404 envelope for an unknown backend identifier."""

    logger.info("Rejected lookup for unknown backend type %r", value)
    payload = {
        "status": "error",
        "code": "UNKNOWN_BACKEND_TYPE",
        "message": f"unknown backend_type={value}",
    }
    return JSONResponse(content=payload, status_code=status.HTTP_404_NOT_FOUND)


def api_serialize_runtime_key(key: RuntimeKey) -> dict[str, object]:
    """Serialize one runtime key and its support classification to JSON payload.

    Args:
        key: Runtime key.

    Returns:
        dict[str, object]: JSON-serializable runtime key payload.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    support = runtime_key_support(key)
    return {
        "name": key.value,
        "mandatory": sorted(backend_type.value for backend_type in support.mandatory_backends),
        "optional": sorted(backend_type.value for backend_type in support.optional_backends),
    }


def api_serialize_check_result(check_result: RuntimeKeyCheckResult) -> dict[str, object]:
    """Serialize one runtime key check result to JSON payload."""

    return {
        "backend_type": check_result.backend_type.value,
        "valid": check_result.runtime_key_check_is_valid(),
        "missing_mandatory": list(check_result.missing_mandatory),
        "unsupported": list(check_result.unsupported),
        "unknown": list(check_result.unknown),
    }


__all__ = [
    "api_create_runtime_keys_router",
    "api_resolve_backend_type",
    "api_serialize_check_result",
    "api_serialize_runtime_key",
]
