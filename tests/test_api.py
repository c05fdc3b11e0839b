"""API tests for clients, enumerations and system endpoints."""

from fastapi.testclient import TestClient

from diveseeks import __version__
from diveseeks.config import AppConfig


def test_health(client: TestClient):
    response = client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "ok",
        "version": __version__,
        "node_env": "development",
    }


def test_config_endpoint_returns_injected_config(client: TestClient, config: AppConfig):
    response = client.get("/api/v1/config")

    assert response.status_code == 200
    assert response.json() == config.model_dump()


def test_create_client(client: TestClient):
    response = client.post(
        "/api/v1/clients",
        json={"name": "Acme Corporation", "email": "contact@acme.com"},
    )

    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Acme Corporation"
    assert data["email"] == "contact@acme.com"
    assert data["id"]
    assert data["created_at"]


def test_create_client_empty_name(client: TestClient):
    response = client.post("/api/v1/clients", json={"name": "", "email": "a@b.com"})

    assert response.status_code == 400
    data = response.json()
    assert [e["field"] for e in data["errors"]] == ["name"]
    assert data["errors"][0]["code"] == "FIELD_REQUIRED"


def test_create_client_bad_email(client: TestClient):
    response = client.post(
        "/api/v1/clients", json={"name": "Acme Corporation", "email": "not-an-email"}
    )

    assert response.status_code == 400
    errors = response.json()["errors"]
    assert errors == [
        {
            "field": "email",
            "code": "FIELD_INVALID_FORMAT",
            "message": "email must be a valid email address",
        }
    ]


def test_create_client_reports_every_violation(client: TestClient):
    response = client.post("/api/v1/clients", json={})

    assert response.status_code == 400
    fields = sorted(e["field"] for e in response.json()["errors"])
    assert fields == ["email", "name"]


def test_create_client_wrong_type(client: TestClient):
    response = client.post("/api/v1/clients", json={"name": 5, "email": "a@b.com"})

    assert response.status_code == 400
    errors = response.json()["errors"]
    assert errors[0]["field"] == "name"
    assert errors[0]["code"] == "FIELD_INVALID_TYPE"


def test_wrong_type_does_not_hide_other_violations(client: TestClient):
    response = client.post("/api/v1/clients", json={"name": 42, "email": "nope"})

    assert response.status_code == 400
    codes = {e["field"]: e["code"] for e in response.json()["errors"]}
    assert codes == {"name": "FIELD_INVALID_TYPE", "email": "FIELD_INVALID_FORMAT"}


def test_duplicate_email_conflicts(client: TestClient):
    payload = {"name": "Acme Corporation", "email": "contact@acme.com"}
    assert client.post("/api/v1/clients", json=payload).status_code == 201

    response = client.post(
        "/api/v1/clients", json={"name": "Acme Again", "email": "Contact@Acme.com"}
    )

    assert response.status_code == 409
    data = response.json()
    assert data["status"] == 409
    assert data["conflicting_field"] == "email"
    assert data["resource_type"] == "client"


def test_list_clients_paginates(client: TestClient):
    for i in range(3):
        response = client.post(
            "/api/v1/clients", json={"name": f"Client {i}", "email": f"c{i}@acme.com"}
        )
        assert response.status_code == 201

    response = client.get("/api/v1/clients", params={"page": 2, "limit": 2})

    assert response.status_code == 200
    data = response.json()
    assert [c["name"] for c in data["data"]] == ["Client 2"]
    assert data["total"] == 3
    assert data["page"] == 2
    assert data["limit"] == 2
    assert data["total_pages"] == 2


def test_list_clients_clamps_limit(client: TestClient):
    response = client.get("/api/v1/clients", params={"limit": 500})

    assert response.status_code == 200
    assert response.json()["limit"] == 100


def test_list_enums(client: TestClient):
    response = client.get("/api/v1/enums")

    assert response.status_code == 200
    names = [e["name"] for e in response.json()["enumerations"]]
    assert "business_type" in names
    assert "notification_channel" in names
    assert "user_status" in names


def test_get_enum(client: TestClient):
    response = client.get("/api/v1/enums/stock_status")

    assert response.status_code == 200
    assert response.json()["values"] == [
        {"tag": "IN_STOCK", "value": "in_stock"},
        {"tag": "LOW_STOCK", "value": "low_stock"},
        {"tag": "OUT_OF_STOCK", "value": "out_of_stock"},
        {"tag": "DISCONTINUED", "value": "discontinued"},
    ]


def test_resolve_enum_value(client: TestClient):
    response = client.get("/api/v1/enums/user_role/kitchen_staff")

    assert response.status_code == 200
    assert response.json() == {"tag": "KITCHEN_STAFF", "value": "kitchen_staff"}


def test_unknown_enum_is_not_found(client: TestClient):
    response = client.get("/api/v1/enums/colour")

    assert response.status_code == 404
    assert response.json()["title"] == "Resource Not Found"


def test_unknown_enum_value_is_bad_request(client: TestClient):
    response = client.get("/api/v1/enums/cart_status/lost")

    assert response.status_code == 400
    assert response.json()["errors"][0]["code"] == "FIELD_INVALID_VALUE"
