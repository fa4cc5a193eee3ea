"""Shift management endpoints for API v1."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from erp_api.app.api.v1.dispatch import created, current_company, found, parse_payload, resolve_action
from erp_api.app.core.errors import invalid_action
from erp_api.app.core.security import get_current_user
from erp_api.app.schemas.shifts import (
    AssignmentCreate,
    AssignmentRef,
    ShiftCreate,
    ShiftStatusUpdate,
    SwapCreate,
    SwapDecision,
)
from erp_api.app.services.shift_service import ShiftService

router = APIRouter()


@router.get("")
async def read_shifts(
    action: Optional[str] = Query(None),
    employee_id: Optional[str] = Query(None, alias="employeeId"),
    status_filter: Optional[str] = Query(None, alias="status"),
    company_id: str = Depends(current_company),
) -> Any:
    if action == "shifts":
        return await ShiftService.get_shifts(company_id)
    if action == "assignments":
        return await ShiftService.get_assignments(company_id, employee_id=employee_id)
    if action == "swaps":
        return await ShiftService.get_swaps(company_id, status=status_filter)
    if action == "metrics":
        return await ShiftService.get_metrics(company_id)
    raise invalid_action(action)


@router.post("")
async def act_shifts(
    response: Response,
    action: Optional[str] = Query(None),
    payload: Optional[Dict[str, Any]] = Body(None),
    current_user: Dict[str, Any] = Depends(get_current_user),
) -> Any:
    name, body = resolve_action(action, payload)
    company_id = current_user["company_id"]

    if name == "create-shift":
        created(response)
        return await ShiftService.create_shift(company_id, parse_payload(ShiftCreate, body))
    if name == "update-shift-status":
        data = parse_payload(ShiftStatusUpdate, body)
        return found(await ShiftService.update_shift_status(company_id, data.shift_id, data.status), "Shift")
    if name == "assign-shift":
        created(response)
        return await ShiftService.assign_shift(company_id, parse_payload(AssignmentCreate, body))
    if name == "complete-assignment":
        data = parse_payload(AssignmentRef, body)
        return found(await ShiftService.complete_assignment(company_id, data.assignment_id), "Assignment")
    if name == "request-swap":
        created(response)
        return await ShiftService.request_swap(company_id, parse_payload(SwapCreate, body))
    if name == "approve-swap":
        data = parse_payload(SwapDecision, body)
        approver = data.approved_by or current_user.get("user_id")
        return found(await ShiftService.decide_swap(company_id, data.swap_id, data.status, approver), "Swap")
    raise invalid_action(name)
