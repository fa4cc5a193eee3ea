"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from erp_api.app.core.rate_limit import login_limiter
from erp_api.app.core.store import reset_stores
from erp_api.app.main import app
from erp_api.app.services.audit_service import AuditService


@pytest.fixture(autouse=True)
def clean_state():
    """Wipe every in-memory store, the audit trail and login limits around each test."""
    reset_stores()
    AuditService.clear()
    login_limiter.clear()
    yield
    reset_stores()
    AuditService.clear()
    login_limiter.clear()


@pytest.fixture
def client():
    return TestClient(app)


def register_and_login(client, email="admin@acme.test", password="secret123", company_id="acme"):
    """Register the founding admin of a company and return its ``Authorization`` headers."""
    response = client.post(
        "/api/auth/register",
        json={"email": email, "password": password, "companyId": company_id},
    )
    assert response.status_code == 201, response.text
    return login(client, email, password)


def login(client, email, password="secret123"):
    response = client.post("/api/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['accessToken']}"}


def add_member(client, admin_headers, email, password="secret123", role="employee"):
    """Have an admin add a user to their company and return its headers."""
    response = client.post(
        "/api/auth/users",
        json={"email": email, "password": password, "role": role},
        headers=admin_headers,
    )
    assert response.status_code == 201, response.text
    return login(client, email, password)


@pytest.fixture
def auth_headers(client):
    return register_and_login(client)


class ActionClient:
    """Small wrapper around ``TestClient`` for action-dispatched routes."""

    def __init__(self, client, headers):
        self.client = client
        self.headers = headers

    def get(self, path, action, **params):
        return self.client.get(path, params={"action": action, **params}, headers=self.headers)

    def post(self, path, action, body=None):
        return self.client.post(path, params={"action": action}, json=body or {}, headers=self.headers)

    def create(self, path, action, body):
        """POST a creation action and return the created record."""
        response = self.post(path, action, body)
        assert response.status_code == 201, response.text
        return response.json()

    def ok(self, path, action, body=None):
        """POST a non-creating action and return its JSON result."""
        response = self.post(path, action, body)
        assert response.status_code == 200, response.text
        return response.json()

    def fetch(self, path, action, **params):
        response = self.get(path, action, **params)
        assert response.status_code == 200, response.text
        return response.json()


@pytest.fixture
def api(client, auth_headers):
    return ActionClient(client, auth_headers)
