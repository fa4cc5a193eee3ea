"""
Structured API errors.

Route handlers raise ``ApiError`` (usually through one of the helper
constructors below) and the exception handlers registered by
``register_exception_handlers`` turn them into JSON bodies of the form::

    {"error": {"code": "NOT_FOUND", "message": "Employee not found", "details": null}}

Request validation failures raised by FastAPI itself are reported as
``VALIDATION_ERROR`` with HTTP 400, and anything unexpected is logged
with its traceback and surfaced as a generic HTTP 500.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

logger = logging.getLogger(__name__)

VALIDATION_ERROR = "VALIDATION_ERROR"
FORBIDDEN = "FORBIDDEN"
NOT_FOUND = "NOT_FOUND"
CONFLICT = "CONFLICT"
RATE_LIMITED = "RATE_LIMITED"
INVALID_STATE = "INVALID_STATE"
BUSINESS_RULE_VIOLATION = "BUSINESS_RULE_VIOLATION"
SERVER_ERROR = "SERVER_ERROR"


class ApiError(Exception):
    """An error with a machine readable code and an HTTP status."""

    def __init__(
        self,
        code: str,
        status_code: int,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.status_code = status_code
        self.message = message
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        return {"error": {"code": self.code, "message": self.message, "details": self.details}}


def validation_error(message: str, details: Optional[Dict[str, Any]] = None) -> ApiError:
    return ApiError(VALIDATION_ERROR, status.HTTP_400_BAD_REQUEST, message, details)


def forbidden(message: str = "Forbidden") -> ApiError:
    return ApiError(FORBIDDEN, status.HTTP_403_FORBIDDEN, message)


def not_found(message: str = "Not found") -> ApiError:
    return ApiError(NOT_FOUND, status.HTTP_404_NOT_FOUND, message)


def conflict(message: str) -> ApiError:
    return ApiError(CONFLICT, status.HTTP_409_CONFLICT, message)


def rate_limited(message: str = "Rate limit exceeded") -> ApiError:
    return ApiError(RATE_LIMITED, status.HTTP_429_TOO_MANY_REQUESTS, message)


def invalid_state(message: str) -> ApiError:
    return ApiError(INVALID_STATE, status.HTTP_400_BAD_REQUEST, message)


def business_rule_violation(message: str) -> ApiError:
    return ApiError(BUSINESS_RULE_VIOLATION, status.HTTP_422_UNPROCESSABLE_ENTITY, message)


def invalid_action(action: Optional[str]) -> ApiError:
    """Error for an action string the route does not dispatch."""
    return validation_error("Invalid action", {"action": action})


def from_validation_error(exc: ValidationError) -> ApiError:
    """Convert a pydantic ``ValidationError`` into a 400 ``ApiError``."""
    return validation_error(
        "Invalid request body",
        {"errors": jsonable_encoder(exc.errors(include_url=False, include_context=False, include_input=False))},
    )


def _strip_context(err: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in err.items() if key not in {"ctx", "url", "input"}}


async def _api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = validation_error(
        "Invalid request",
        {"errors": jsonable_encoder([_strip_context(err) for err in exc.errors()])},
    )
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error processing %s %s", request.method, request.url.path)
    error = ApiError(SERVER_ERROR, status.HTTP_500_INTERNAL_SERVER_ERROR, "An unexpected error occurred")
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers on ``app``."""
    app.add_exception_handler(ApiError, _api_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
