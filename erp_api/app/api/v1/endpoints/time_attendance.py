"""Time and attendance endpoints for API v1."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from erp_api.app.api.v1.dispatch import created, found, parse_payload, resolve_action
from erp_api.app.core.errors import invalid_action
from erp_api.app.core.security import get_current_user
from erp_api.app.schemas.time_attendance import (
    ClockInCreate,
    ClockOut,
    TimeOffCreate,
    TimeOffDecision,
    TimesheetCreate,
    TimesheetDecision,
)
from erp_api.app.services.time_attendance_service import TimeAttendanceService

router = APIRouter()


@router.get("")
async def read_time_attendance(
    action: Optional[str] = Query(None),
    employee_id: Optional[str] = Query(None, alias="employeeId"),
    status_filter: Optional[str] = Query(None, alias="status"),
    current_user: Dict[str, Any] = Depends(get_current_user),
) -> Any:
    company_id = current_user["company_id"]
    if action == "records":
        return await TimeAttendanceService.get_records(company_id, employee_id=employee_id)
    if action == "leave-requests":
        return await TimeAttendanceService.get_leave_requests(company_id, employee_id=employee_id, status=status_filter)
    if action == "timesheets":
        return await TimeAttendanceService.get_timesheets(company_id, employee_id=employee_id)
    if action == "metrics":
        return await TimeAttendanceService.get_metrics(company_id)
    raise invalid_action(action)


@router.post("")
async def act_time_attendance(
    response: Response,
    action: Optional[str] = Query(None),
    payload: Optional[Dict[str, Any]] = Body(None),
    current_user: Dict[str, Any] = Depends(get_current_user),
) -> Any:
    name, body = resolve_action(action, payload)
    company_id = current_user["company_id"]

    if name == "record-attendance":
        created(response)
        return await TimeAttendanceService.record_attendance(company_id, parse_payload(ClockInCreate, body))
    if name == "record-checkout":
        data = parse_payload(ClockOut, body)
        return found(
            await TimeAttendanceService.record_check_out(company_id, data.record_id, data.check_out_time),
            "Attendance record",
        )
    if name == "create-leave-request":
        created(response)
        return await TimeAttendanceService.create_leave_request(company_id, parse_payload(TimeOffCreate, body))
    if name == "approve-leave-request":
        data = parse_payload(TimeOffDecision, body)
        approver = data.approved_by or current_user.get("user_id")
        return found(
            await TimeAttendanceService.decide_leave_request(company_id, data.leave_request_id, data.status, approver),
            "Leave request",
        )
    if name == "create-timesheet":
        created(response)
        return await TimeAttendanceService.create_timesheet(company_id, parse_payload(TimesheetCreate, body))
    if name == "update-timesheet-status":
        data = parse_payload(TimesheetDecision, body)
        approver = data.approved_by or current_user.get("user_id")
        return found(
            await TimeAttendanceService.update_timesheet_status(company_id, data.timesheet_id, data.status, approver),
            "Timesheet",
        )
    raise invalid_action(name)
