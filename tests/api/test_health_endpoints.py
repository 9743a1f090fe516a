# This file tests API health, readiness, and version endpoints.
# It exists to validate operational contracts used by orchestration and monitoring.
# The tests confirm request IDs and version metadata are always returned.

from __future__ import annotations

from src.api.app import app
from tests.api.support import FakeDBClient, api_test_client, build_test_config


def test_health_endpoint_returns_expected_fields() -> None:
    config = build_test_config()
    with api_test_client(config=config, db_client=FakeDBClient()) as client:
        response = client.get("/health")

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["environment"] == "test"
    assert payload["service_name"] == config.api_name
    assert payload["schema_version"] == config.schema_version
    assert payload["request_id"]
    assert "timestamp" in payload


def test_ready_endpoint_lists_every_entity_table() -> None:
    with api_test_client(db_client=FakeDBClient(connected=True)) as client:
        response = client.get("/ready")

    assert response.status_code == 200
    payload = response.json()
    assert payload["db_connected"] is True
    assert payload["tables"] == {
        "companies": True,
        "customers": True,
        "products": True,
        "clients": True,
        "users": True,
    }
    assert payload["ready"] is True


def test_ready_endpoint_reports_missing_table() -> None:
    db_client = FakeDBClient(existing_tables={"companies", "customers", "products", "clients"})
    with api_test_client(db_client=db_client) as client:
        response = client.get("/ready")

    payload = response.json()
    assert response.status_code == 503
    assert payload["tables"]["users"] is False
    assert payload["ready"] is False
    assert payload["database"] == "reachable"


def test_ready_endpoint_when_database_is_down() -> None:
    with api_test_client(db_client=FakeDBClient(connected=False)) as client:
        response = client.get("/ready")

    payload = response.json()
    assert response.status_code == 503
    assert payload["db_connected"] is False
    assert payload["database"] == "unreachable"
    assert not any(payload["tables"].values())


def test_version_endpoint_returns_version_metadata() -> None:
    config = build_test_config()
    with api_test_client(config=config, db_client=FakeDBClient()) as client:
        response = client.get("/version")

    assert response.status_code == 200
    payload = response.json()
    assert payload["api_prefix"] == "/api"
    assert payload["schema_version"] == config.schema_version
    assert payload["app_version"] == config.app_version
    assert payload["project"] == config.api_name


def test_request_id_header_is_echoed() -> None:
    with api_test_client() as client:
        response = client.get("/health", headers={"x-request-id": "trace-123"})

    assert response.headers["x-request-id"] == "trace-123"
    assert response.json()["request_id"] == "trace-123"
    assert "x-response-time-ms" in response.headers


def test_metrics_endpoint_exposes_request_counters() -> None:
    with api_test_client() as client:
        client.get("/health")
        response = client.get("/metrics")

    assert response.status_code == 200
    assert "api_http_requests_total" in response.text


def test_unknown_route_uses_error_shape() -> None:
    with api_test_client() as client:
        response = client.get("/api/nowhere")

    assert response.status_code == 404
    payload = response.json()
    assert payload["error_code"] == "HTTP_ERROR"
    assert payload["request_id"]


class _BrokenProductRepository:
    def search(self, **_: object) -> None:
        raise RuntimeError("connection reset")


def test_unhandled_error_keeps_request_id_header() -> None:
    with api_test_client(
        product_repository=_BrokenProductRepository(),
        raise_server_exceptions=False,
    ) as client:
        response = client.get("/api/products", headers={"x-request-id": "trace-500"})

    assert response.status_code == 500
    assert response.headers["x-request-id"] == "trace-500"
    payload = response.json()
    assert payload["error_code"] == "INTERNAL_SERVER_ERROR"
    assert payload["request_id"] == "trace-500"


def test_app_registers_every_resource_route() -> None:
    paths = app.openapi().get("paths", {})

    assert set(paths["/api/companies/{company_id}/customers"]) >= {"get", "post"}
    assert set(paths["/api/companies/{company_id}/customers/{customer_id}"]) >= {"get", "delete"}
    assert "get" in paths["/api/products"]
    assert "get" in paths["/api/products/{product_id}"]
    assert set(paths["/api/clients/{client_id}/users"]) >= {"get", "post"}
    assert set(paths["/api/clients/{client_id}/users/{user_id}"]) >= {"get", "delete"}
    assert {"/health", "/ready", "/version"} <= set(paths)
