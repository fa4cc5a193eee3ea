"""Tests for the fixed-window rate limiter and the login limit."""

import pytest

from erp_api.app.core.errors import ApiError
from erp_api.app.core.rate_limit import RateLimiter

from .conftest import register_and_login


def test_window_allows_up_to_the_limit():
    limiter = RateLimiter(max_requests=2, window_seconds=60)
    assert limiter.hit("a")
    assert limiter.remaining("a") == 1
    assert limiter.hit("a")
    assert not limiter.hit("a")
    assert limiter.remaining("a") == 0
    assert limiter.hit("b")


def test_window_resets(monkeypatch):
    limiter = RateLimiter(max_requests=1, window_seconds=10)
    now = [1000.0]
    monkeypatch.setattr("erp_api.app.core.rate_limit.time.monotonic", lambda: now[0])
    assert limiter.hit("a")
    assert not limiter.hit("a")
    assert limiter.retry_after("a") == 11
    now[0] += 10
    assert limiter.hit("a")


def test_check_raises_rate_limited():
    limiter = RateLimiter(max_requests=1, window_seconds=60)
    limiter.check("a")
    with pytest.raises(ApiError) as excinfo:
        limiter.check("a")
    assert excinfo.value.code == "RATE_LIMITED"
    assert excinfo.value.status_code == 429
    limiter.reset("a")
    limiter.check("a")


def test_login_attempts_are_limited(client):
    register_and_login(client)
    body = {"email": "Admin@Acme.test", "password": "wrong-password"}
    for _ in range(4):
        assert client.post("/api/auth/login", json=body).status_code == 401

    response = client.post("/api/auth/login", json={"email": "admin@acme.test", "password": "secret123"})
    assert response.status_code == 429
    assert response.json()["error"]["code"] == "RATE_LIMITED"
