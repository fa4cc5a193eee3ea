"""Vendor management endpoints for API v1."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from erp_api.app.api.v1.dispatch import created, current_company, found, parse_payload, resolve_action
from erp_api.app.core.errors import invalid_action
from erp_api.app.schemas.vendors import (
    VendorCreate,
    VendorRating,
    VendorRequestCreate,
    VendorRequestDecision,
    VendorStatusUpdate,
)
from erp_api.app.services.vendor_service import VendorService

router = APIRouter()


@router.get("")
async def read_vendors(
    action: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
    vendor_id: Optional[str] = Query(None, alias="vendorId"),
    company_id: str = Depends(current_company),
) -> Any:
    if action == "vendors":
        return await VendorService.get_vendors(company_id, status=status_filter)
    if action == "performances":
        return await VendorService.get_performances(company_id, vendor_id=vendor_id)
    if action == "requests":
        return await VendorService.get_requests(company_id, status=status_filter)
    if action == "metrics":
        return await VendorService.get_metrics(company_id)
    raise invalid_action(action)


@router.post("")
async def act_vendors(
    response: Response,
    action: Optional[str] = Query(None),
    payload: Optional[Dict[str, Any]] = Body(None),
    company_id: str = Depends(current_company),
) -> Any:
    name, body = resolve_action(action, payload)

    if name == "create-vendor":
        created(response)
        return await VendorService.create_vendor(company_id, parse_payload(VendorCreate, body))
    if name == "update-vendor-status":
        data = parse_payload(VendorStatusUpdate, body)
        return found(await VendorService.update_vendor_status(company_id, data.vendor_id, data.status), "Vendor")
    if name == "rate-vendor":
        created(response)
        return await VendorService.rate_vendor(company_id, parse_payload(VendorRating, body))
    if name == "create-request":
        created(response)
        return await VendorService.create_request(company_id, parse_payload(VendorRequestCreate, body))
    if name == "approve-request":
        data = parse_payload(VendorRequestDecision, body)
        return found(await VendorService.decide_request(company_id, data.request_id, data.status), "Request")
    raise invalid_action(name)
