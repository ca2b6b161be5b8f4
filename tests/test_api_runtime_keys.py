"""Tests for runtime key API endpoint behavior."""

from fastapi.testclient import TestClient

from runtime_registry.api.application import create_api_application
from runtime_registry.config import AppSettings


def _build_client() -> TestClient:
    """Create test client over an application with deterministic settings.

    Returns:
        TestClient: Client bound to a fresh application instance.

    Raises:
        ValueError: Raised by AppSettings when values are invalid.
    """

    return TestClient(create_api_application(AppSettings(environment_name="test")))


def test_api_runtime_keys_lists_every_key_in_declaration_order() -> None:
    """Return every runtime key with sorted backend classifications.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when response does not match expected payload.
    """

    response = _build_client().get("/runtime-keys")

    assert response.status_code == 200
    items = response.json()["items"]
    assert [item["name"] for item in items][:4] == ["cpu", "defaultDisks", "defaultZones", "docker"]
    assert items[3] == {"name": "docker", "mandatory": ["jes"], "optional": ["local"]}
    assert response.json()["backend_types"] == ["jes", "local", "sge"]


def test_api_runtime_keys_detail_returns_key_payload() -> None:
    """Return one key by exact name."""

    response = _build_client().get("/runtime-keys/failOnStderr")

    assert response.status_code == 200
    assert response.json() == {"name": "failOnStderr", "mandatory": [], "optional": ["jes", "local", "sge"]}


def test_api_runtime_keys_detail_returns_not_found_for_unknown_name() -> None:
    """Return HTTP 404 envelope for names matching no runtime key."""

    response = _build_client().get("/runtime-keys/FailOnStderr")

    assert response.status_code == 404
    assert response.json()["status"] == "error"
    assert response.json()["code"] == "UNKNOWN_RUNTIME_KEY"


def test_api_runtime_keys_backend_listing() -> None:
    """Return mandatory and supported key names for one backend."""

    response = _build_client().get("/backends/jes/runtime-keys")

    assert response.status_code == 200
    assert response.json()["mandatory"] == ["docker"]
    assert "failOnRc" not in response.json()["supported"]
    assert "preemptible" in response.json()["supported"]


def test_api_runtime_keys_backend_listing_rejects_unknown_backend() -> None:
    """Return HTTP 404 envelope for unknown backend identifiers."""

    response = _build_client().get("/backends/kubernetes/runtime-keys")

    assert response.status_code == 404
    assert response.json()["code"] == "UNKNOWN_BACKEND_TYPE"


def test_api_runtime_keys_check_reports_classification() -> None:
    """Run key check for supplied names and report validity.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when response does not match expected payload.
    """

    response = _build_client().get(
        "/backends/sge/runtime-keys/check",
        params=[("keys", "failOnRc"), ("keys", "docker"), ("keys", "gpu")],
    )

    assert response.status_code == 200
    assert response.json() == {
        "backend_type": "sge",
        "valid": False,
        "missing_mandatory": [],
        "unsupported": ["docker"],
        "unknown": ["gpu"],
    }


def test_api_runtime_keys_check_without_keys_reports_missing_mandatory() -> None:
    """Report missing mandatory keys when no names are supplied."""

    response = _build_client().get("/backends/jes/runtime-keys/check")

    assert response.status_code == 200
    assert response.json()["valid"] is False
    assert response.json()["missing_mandatory"] == ["docker"]
