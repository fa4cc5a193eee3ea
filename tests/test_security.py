"""Unit tests for password hashing and tokens."""

import base64
import json

from erp_api.app.core.security import create_access_token, decode_access_token, hash_password, verify_password


def test_password_round_trip():
    hashed = hash_password("secret123")
    assert verify_password("secret123", hashed)
    assert not verify_password("secret124", hashed)
    assert not verify_password("secret123", "garbage")


def test_token_claims():
    token = create_access_token({"sub": "a@b.test", "company_id": "acme"})
    claims = decode_access_token(token)
    assert claims["company_id"] == "acme"
    assert "exp" in claims


def test_expired_token():
    assert decode_access_token(create_access_token({"sub": "a"}, expires_delta=-10)) is None


def test_tampered_token():
    header, payload, signature = create_access_token({"sub": "a"}).split(".")
    assert decode_access_token(f"{header}.{payload}x.{signature}") is None
    assert decode_access_token("not-a-token") is None


def test_token_header_names_hs256():
    header, _, _ = create_access_token({"sub": "a"}).split(".")
    assert json.loads(base64.urlsafe_b64decode(header + "=" * (-len(header) % 4))) == {"alg": "HS256", "typ": "JWT"}


def test_foreign_algorithm_rejected():
    _, payload, signature = create_access_token({"sub": "a"}).split(".")
    forged = base64.urlsafe_b64encode(b'{"alg":"none","typ":"JWT"}').rstrip(b"=").decode()
    assert decode_access_token(f"{forged}.{payload}.{signature}") is None
