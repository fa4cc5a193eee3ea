"""Tests for application wiring: health, action dispatch and tenancy."""

from .conftest import ActionClient, register_and_login

PATH = "/api/crm/customers"


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_missing_action(client, auth_headers):
    response = client.post(PATH, json={}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Invalid action"


def test_query_action_wins_over_body(client, auth_headers):
    response = client.post(
        "/api/vendors/management",
        params={"action": "create-vendor"},
        json={"action": "rate-vendor", "vendorName": "V", "email": "v@v.test"},
        headers=auth_headers,
    )
    assert response.status_code == 201
    assert response.json()["vendorName"] == "V"


def test_body_must_be_object(client, auth_headers):
    response = client.post("/api/vendors/management", params={"action": "create-vendor"}, json=[1, 2], headers=auth_headers)
    assert response.status_code == 400


def test_companies_are_isolated(client, api):
    """Test that one company can neither list nor act on another's records."""
    vendor = api.create("/api/vendors/management", "create-vendor", {"vendorName": "V", "email": "v@v.test"})
    other = ActionClient(client, register_and_login(client, email="admin@globex.test", company_id="globex"))

    assert other.fetch("/api/vendors/management", "vendors") == []
    response = other.post("/api/vendors/management", "update-vendor-status", {"vendorId": vendor["id"], "status": "inactive"})
    assert response.status_code == 404
    assert other.fetch("/api/vendors/management", "metrics")["totalVendors"] == 0
