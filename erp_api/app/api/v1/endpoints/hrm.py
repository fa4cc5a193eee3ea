"""
HRM endpoints for API v1.

``GET /hrm/employees?action=...`` lists employees (optionally filtered
by ``status``), leave requests, attendance of one employee, performance
reviews or returns the HR metrics summary.  ``POST`` dispatches on the
action to hire, update or remove employees, file and decide leave
requests, record attendance and write reviews.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from erp_api.app.api.v1.dispatch import created, current_company, found, parse_payload, resolve_action
from erp_api.app.core.errors import invalid_action, not_found, validation_error
from erp_api.app.core.security import get_current_user
from erp_api.app.schemas.hrm import (
    AttendanceCreate,
    CheckOut,
    EmployeeCreate,
    EmployeeRef,
    EmployeeStatusUpdate,
    LeaveDecision,
    LeaveRequestCreate,
    PerformanceReviewCreate,
)
from erp_api.app.services.hrm_service import HRMService

router = APIRouter()


@router.get("")
async def read_hrm(
    action: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
    employee_id: Optional[str] = Query(None, alias="employeeId"),
    limit: int = Query(30, ge=1, le=366),
    company_id: str = Depends(current_company),
) -> Any:
    if action == "employees":
        return await HRMService.get_employees(company_id, status=status_filter)
    if action == "metrics":
        return await HRMService.get_metrics(company_id)
    if action == "leave-requests":
        return await HRMService.get_leave_requests(company_id, status=status_filter, employee_id=employee_id)
    if action == "attendance":
        if not employee_id:
            raise validation_error("employeeId is required")
        return await HRMService.get_employee_attendance(company_id, employee_id, limit=limit)
    if action == "reviews":
        return await HRMService.get_performance_reviews(company_id, employee_id=employee_id)
    raise invalid_action(action)


@router.post("")
async def act_hrm(
    response: Response,
    action: Optional[str] = Query(None),
    payload: Optional[Dict[str, Any]] = Body(None),
    current_user: Dict[str, Any] = Depends(get_current_user),
) -> Any:
    name, body = resolve_action(action, payload)
    company_id = current_user["company_id"]

    if name == "create-employee":
        created(response)
        return await HRMService.create_employee(company_id, parse_payload(EmployeeCreate, body))
    if name == "update-employee-status":
        data = parse_payload(EmployeeStatusUpdate, body)
        return found(await HRMService.update_employee_status(company_id, data.employee_id, data.status), "Employee")
    if name == "delete-employee":
        data = parse_payload(EmployeeRef, body)
        if not await HRMService.delete_employee(company_id, data.employee_id):
            raise not_found("Employee not found")
        return {"success": True}
    if name == "request-leave":
        created(response)
        return await HRMService.request_leave(company_id, parse_payload(LeaveRequestCreate, body))
    if name == "approve-leave":
        data = parse_payload(LeaveDecision, body)
        approver = data.approved_by or current_user.get("user_id")
        return found(
            await HRMService.decide_leave_request(company_id, data.request_id, data.status, approver),
            "Leave request",
        )
    if name == "record-attendance":
        created(response)
        return await HRMService.record_attendance(company_id, parse_payload(AttendanceCreate, body))
    if name == "record-checkout":
        data = parse_payload(CheckOut, body)
        return found(await HRMService.record_check_out(company_id, data.attendance_id, data.check_out), "Attendance record")
    if name == "create-review":
        created(response)
        return await HRMService.create_performance_review(company_id, parse_payload(PerformanceReviewCreate, body))
    raise invalid_action(name)
