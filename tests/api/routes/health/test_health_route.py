"""Testes dos endpoints de informação, health, readiness e fallback."""

from __future__ import annotations

from api.routes.endpoints import AVAILABLE_ENDPOINTS, SERVICE_ENDPOINTS
from app.observability import CORRELATION_ID_HEADER


def test_root_lists_endpoints_and_flags(client) -> None:
    response = client.get("/")

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Payment Backend Server"
    assert body["status"] == "RUNNING"
    assert body["firebase_enabled"] is True
    assert body["endpoints"] == list(SERVICE_ENDPOINTS)
    assert body["note"] == "Payment records are created by frontend, backend only updates status"


def test_health_reports_configuration(unconfigured_client) -> None:
    response = unconfigured_client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "OK"
    assert body["firebase_enabled"] is False
    assert body["email_config_ok"] is False
    assert body["midtrans_config_ok"] is False
    assert body["timestamp"]


def test_ready_when_store_answers(client) -> None:
    response = client.get("/ready")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ready"
    assert body["checks"]["firestore"]["status"] == "ok"


def test_not_ready_when_store_fails(client, record_store) -> None:
    record_store.fail_ping = True

    response = client.get("/ready")

    assert response.status_code == 503
    assert response.json()["checks"]["firestore"] == {
        "status": "failed",
        "latency_ms": None,
        "error": "FirestoreUnavailableError",
    }


def test_ready_with_firebase_disabled(unconfigured_client) -> None:
    response = unconfigured_client.get("/ready")

    assert response.status_code == 200
    assert response.json()["checks"]["firestore"]["status"] == "disabled"


def test_unknown_route_returns_catalog(client) -> None:
    response = client.get("/nope")

    assert response.status_code == 404
    assert response.json() == {
        "success": False,
        "message": "Route not found",
        "path": "/nope",
        "method": "GET",
        "available_endpoints": list(AVAILABLE_ENDPOINTS),
    }


def test_wrong_method_is_route_not_found(client) -> None:
    response = client.get("/send-otp")

    assert response.status_code == 404
    assert response.json()["message"] == "Route not found"


def test_unhandled_error_hides_details(client, record_store) -> None:
    async def _explode(order_id):
        raise ValueError("secret internals")

    record_store.get = _explode

    response = client.get("/payment-status/ORD1")

    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Internal server error"}


def test_correlation_id_is_echoed(client) -> None:
    response = client.get("/health", headers={CORRELATION_ID_HEADER: "corr-123"})

    assert response.headers[CORRELATION_ID_HEADER] == "corr-123"


def test_correlation_id_is_generated(client) -> None:
    response = client.get("/health")

    assert response.headers[CORRELATION_ID_HEADER]


def test_cors_preflight_is_allowed(client) -> None:
    response = client.options(
        "/generate-snap-token",
        headers={
            "Origin": "https://shop.example.com",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] in ("*", "https://shop.example.com")
