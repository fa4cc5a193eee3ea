"""Tests for the audit log route."""

from .conftest import add_member, register_and_login

PATH = "/api/audit/logs"


def test_state_changes_are_logged(api, client, auth_headers):
    """Test that creates and approvals show up newest first."""
    vendor = api.create("/api/vendors/management", "create-vendor", {"vendorName": "V", "email": "v@v.test"})
    api.ok("/api/vendors/management", "update-vendor-status", {"vendorId": vendor["id"], "status": "inactive"})

    response = client.get(PATH, params={"objectType": "vendor"}, headers=auth_headers)
    assert response.status_code == 200
    entries = response.json()
    assert [e["action"] for e in entries] == ["update-status", "create"]
    assert entries[0]["objectId"] == vendor["id"]
    assert entries[0]["details"] == {"status": "inactive"}


def test_entries_name_the_acting_user(client, auth_headers):
    """Test that each entry carries the id of the user who made the change."""
    admin_id = client.get("/api/auth/me", headers=auth_headers).json()["id"]
    employee = add_member(client, auth_headers, "dev@acme.test")
    employee_id = client.get("/api/auth/me", headers=employee).json()["id"]

    body = {
        "firstName": "Jane",
        "lastName": "Doe",
        "email": "jane@acme.test",
        "department": "Engineering",
        "position": "Developer",
        "salary": 5000,
        "hireDate": "2024-01-15",
    }
    created = client.post("/api/hrm/employees", params={"action": "create-employee"}, json=body, headers=employee)
    assert created.status_code == 201
    entries = client.get(PATH, params={"objectType": "employee"}, headers=auth_headers).json()
    assert [e["userId"] for e in entries] == [employee_id]

    users = client.get(PATH, params={"objectType": "user"}, headers=auth_headers).json()
    assert {e["userId"] for e in users} == {admin_id}


def test_logs_are_admin_only(client, auth_headers):
    employee = add_member(client, auth_headers, "dev@acme.test")
    assert client.get(PATH, headers=employee).status_code == 403


def test_logs_are_company_scoped(client, auth_headers):
    other = register_and_login(client, email="admin@globex.test", company_id="globex")
    entries = client.get(PATH, headers=other).json()
    assert {e["companyId"] for e in entries} == {"globex"}
