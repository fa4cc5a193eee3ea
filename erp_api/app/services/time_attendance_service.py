"""
Service layer for time and attendance.

Working hours are computed at check-out as the elapsed time since
check-in, rounded to two decimals.  A leave request spans
``endDate - startDate`` days.  Timesheets go ``draft`` -> ``submitted``
-> ``approved``/``rejected``.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import List, Optional

from erp_api.app.core.errors import invalid_state, validation_error
from erp_api.app.core.store import InMemoryStore
from erp_api.app.schemas.time_attendance import (
    AttendanceMetrics,
    AttendanceRecord,
    ClockInCreate,
    TimeOffCreate,
    TimeOffRequest,
    Timesheet,
    TimesheetCreate,
)
from erp_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)

TOTAL_EMPLOYEES = 150
AVERAGE_ATTENDANCE_RATE = 92.5

records: InMemoryStore[AttendanceRecord] = InMemoryStore("time_attendance.records")
leave_requests: InMemoryStore[TimeOffRequest] = InMemoryStore("time_attendance.leave_requests")
timesheets: InMemoryStore[Timesheet] = InMemoryStore("time_attendance.timesheets")

TIMESHEET_TRANSITIONS = {
    "draft": ("submitted",),
    "submitted": ("approved", "rejected"),
}


class TimeAttendanceService:
    @classmethod
    async def record_attendance(cls, company_id: str, data: ClockInCreate) -> AttendanceRecord:
        record = records.add(AttendanceRecord(company_id=company_id, **data.model_dump()))
        logger.info("Attendance recorded for employee %s on %s", record.employee_id, record.attendance_date)
        return record

    @classmethod
    async def record_check_out(cls, company_id: str, record_id: str, check_out_time: datetime) -> Optional[AttendanceRecord]:
        record = records.get_owned(record_id, company_id)
        if record is None:
            return None
        if check_out_time < record.check_in_time:
            raise validation_error("checkOutTime must not be before checkInTime")
        record.check_out_time = check_out_time
        record.working_hours = round((check_out_time - record.check_in_time).total_seconds() / 3600, 2)
        logger.info("Check-out recorded: %s (%.2f h)", record_id, record.working_hours)
        return record

    @classmethod
    async def create_leave_request(cls, company_id: str, data: TimeOffCreate) -> TimeOffRequest:
        request = leave_requests.add(
            TimeOffRequest(
                company_id=company_id,
                number_of_days=(data.end_date - data.start_date).days,
                **data.model_dump(),
            )
        )
        logger.info("Leave request created for employee %s: %d day(s)", request.employee_id, request.number_of_days)
        await AuditService.record("create", "time_off_request", request, leave_type=request.leave_type)
        return request

    @classmethod
    async def decide_leave_request(
        cls, company_id: str, request_id: str, status: str, approved_by: Optional[str]
    ) -> Optional[TimeOffRequest]:
        request = leave_requests.get_owned(request_id, company_id)
        if request is None:
            return None
        if request.status != "pending":
            raise invalid_state(f"Leave request is already {request.status}")
        request.status = status
        request.approved_by = approved_by
        logger.info("Leave request %s %s", request_id, status)
        await AuditService.record(status, "time_off_request", request)
        return request

    @classmethod
    async def create_timesheet(cls, company_id: str, data: TimesheetCreate) -> Timesheet:
        timesheet = timesheets.add(Timesheet(company_id=company_id, **data.model_dump()))
        logger.info("Timesheet created for employee %s week of %s", timesheet.employee_id, timesheet.week_start_date)
        return timesheet

    @classmethod
    async def update_timesheet_status(
        cls, company_id: str, timesheet_id: str, status: str, approved_by: Optional[str] = None
    ) -> Optional[Timesheet]:
        timesheet = timesheets.get_owned(timesheet_id, company_id)
        if timesheet is None:
            return None
        if status not in TIMESHEET_TRANSITIONS.get(timesheet.status, ()):
            raise invalid_state(f"Cannot move a {timesheet.status} timesheet to {status}")
        timesheet.status = status
        if status != "submitted":
            timesheet.approved_by = approved_by
        return timesheet

    @classmethod
    async def get_records(cls, company_id: str, employee_id: Optional[str] = None) -> List[AttendanceRecord]:
        return records.filter(company_id=company_id, employee_id=employee_id)

    @classmethod
    async def get_leave_requests(
        cls, company_id: str, employee_id: Optional[str] = None, status: Optional[str] = None
    ) -> List[TimeOffRequest]:
        return leave_requests.filter(company_id=company_id, employee_id=employee_id, status=status)

    @classmethod
    async def get_timesheets(cls, company_id: str, employee_id: Optional[str] = None) -> List[Timesheet]:
        return timesheets.filter(company_id=company_id, employee_id=employee_id)

    @classmethod
    async def get_metrics(cls, company_id: str) -> AttendanceMetrics:
        today = records.filter(company_id=company_id, attendance_date=date.today())
        requests = leave_requests.filter(company_id=company_id)
        return AttendanceMetrics(
            total_employees=TOTAL_EMPLOYEES,
            present_today=sum(1 for r in today if r.status == "present"),
            absent_today=sum(1 for r in today if r.status == "absent"),
            late_today=sum(1 for r in today if r.status == "late"),
            on_leave_today=sum(1 for r in today if r.status == "leave"),
            average_attendance_rate=AVERAGE_ATTENDANCE_RATE,
            total_leave_requests=len(requests),
            approved_leaves=sum(1 for r in requests if r.status == "approved"),
            pending_leaves=sum(1 for r in requests if r.status == "pending"),
        )
