"""Pydantic schemas for clock-in records, leave requests and timesheets."""

from datetime import date, datetime
from typing import Literal, Optional

from pydantic import Field, model_validator

from .base import CamelModel, Record, code_field

ClockStatus = Literal["present", "absent", "late", "half-day", "leave"]
LeaveType = Literal["annual", "sick", "personal", "maternity", "unpaid"]
TimesheetStatus = Literal["draft", "submitted", "approved", "rejected"]


class ClockInCreate(CamelModel):
    employee_id: str
    attendance_date: date = Field(default_factory=date.today)
    check_in_time: datetime
    status: ClockStatus = "present"
    remarks: str = ""


class AttendanceRecord(Record, ClockInCreate):
    check_out_time: Optional[datetime] = None
    working_hours: float = 0


class ClockOut(CamelModel):
    record_id: str
    check_out_time: datetime = Field(default_factory=datetime.utcnow)


class TimeOffCreate(CamelModel):
    employee_id: str
    leave_code: str = code_field("LV")
    leave_type: LeaveType
    start_date: date
    end_date: date
    reason: str = ""

    @model_validator(mode="after")
    def check_dates(self) -> "TimeOffCreate":
        if self.end_date < self.start_date:
            raise ValueError("endDate must not be before startDate")
        return self


class TimeOffRequest(Record, TimeOffCreate):
    number_of_days: int = 0
    status: Literal["pending", "approved", "rejected", "cancelled"] = "pending"
    approved_by: Optional[str] = None


class TimeOffDecision(CamelModel):
    leave_request_id: str
    status: Literal["approved", "rejected"] = "approved"
    approved_by: Optional[str] = None


class TimesheetCreate(CamelModel):
    employee_id: str
    timesheet_code: str = code_field("TS")
    week_start_date: date
    week_end_date: date
    total_hours: float = Field(..., ge=0)
    overtime_hours: float = Field(0, ge=0)


class Timesheet(Record, TimesheetCreate):
    status: TimesheetStatus = "draft"
    approved_by: Optional[str] = None


class TimesheetDecision(CamelModel):
    timesheet_id: str
    status: Literal["submitted", "approved", "rejected"]
    approved_by: Optional[str] = None


class AttendanceMetrics(CamelModel):
    total_employees: int
    present_today: int
    absent_today: int
    late_today: int
    on_leave_today: int
    average_attendance_rate: float
    total_leave_requests: int
    approved_leaves: int
    pending_leaves: int
