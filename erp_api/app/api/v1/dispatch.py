"""
Helpers shared by the action-dispatched domain routes.

Every domain exposes a single path.  ``GET`` requests select a listing
or the metrics summary with ``?action=<name>``; ``POST`` requests carry
the action either in the query string or as an ``action`` field of the
JSON body, with the remaining body fields forming the payload.
"""

from typing import Any, Dict, Optional, Tuple, Type, TypeVar

from fastapi import Depends, Response, status
from pydantic import BaseModel, ValidationError

from erp_api.app.core.errors import from_validation_error, invalid_action, not_found, validation_error
from erp_api.app.core.security import get_current_user

M = TypeVar("M", bound=BaseModel)
T = TypeVar("T")


def resolve_action(action: Optional[str], payload: Optional[Dict[str, Any]]) -> Tuple[str, Dict[str, Any]]:
    """Return the action name and the payload without its ``action`` key.

    The query parameter wins over the body field.  Raises a 400 error when
    neither is present.
    """
    if payload is None:
        body: Dict[str, Any] = {}
    elif isinstance(payload, dict):
        body = dict(payload)
    else:
        raise validation_error("Request body must be a JSON object")
    body_action = body.pop("action", None)
    name = action or body_action
    if not name or not isinstance(name, str):
        raise invalid_action(name)
    return name, body


def parse_payload(model: Type[M], payload: Dict[str, Any]) -> M:
    """Validate ``payload`` against ``model``, mapping failures to HTTP 400."""
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise from_validation_error(exc) from exc


def found(item: Optional[T], entity: str) -> T:
    """Return ``item`` or raise a 404 naming ``entity``."""
    if item is None:
        raise not_found(f"{entity} not found")
    return item


def created(response: Response) -> None:
    response.status_code = status.HTTP_201_CREATED


def current_company(current_user: Dict[str, Any] = Depends(get_current_user)) -> str:
    """Dependency returning the company id the request is scoped to."""
    return current_user["company_id"]
