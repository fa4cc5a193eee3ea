"""
Pydantic schemas for human resource management.

Employees, their leave requests, daily attendance and performance
reviews.  ``*Create`` models describe request payloads; the plain
models are the stored records returned by the API.
"""

from datetime import date, datetime
from typing import List, Literal, Optional

from pydantic import Field

from .base import CamelModel, Record

EmployeeStatus = Literal["active", "inactive", "on-leave"]
LeaveType = Literal["vacation", "sick", "personal", "unpaid"]
LeaveStatus = Literal["pending", "approved", "rejected"]
AttendanceStatus = Literal["present", "absent", "late", "half-day"]


class EmployeeBase(CamelModel):
    first_name: str = Field(..., min_length=1, examples=["Jane"])
    last_name: str = Field(..., min_length=1, examples=["Doe"])
    email: str = Field(..., examples=["jane.doe@example.com"])
    phone: str = ""
    department: str = Field(..., min_length=1, examples=["Engineering"])
    position: str = Field(..., min_length=1, examples=["Backend developer"])
    salary: float = Field(..., ge=0)
    hire_date: date
    manager_id: Optional[str] = None


class EmployeeCreate(EmployeeBase):
    """Schema for hiring a new employee."""


class Employee(Record, EmployeeBase):
    status: EmployeeStatus = "active"
    updated_at: datetime = Field(default_factory=datetime.utcnow)


class EmployeeStatusUpdate(CamelModel):
    employee_id: str
    status: EmployeeStatus


class EmployeeRef(CamelModel):
    employee_id: str


class LeaveRequestCreate(CamelModel):
    employee_id: str
    type: LeaveType
    start_date: date
    end_date: date
    reason: str = ""


class LeaveRequest(Record, LeaveRequestCreate):
    status: LeaveStatus = "pending"
    approved_by: Optional[str] = None


class LeaveDecision(CamelModel):
    """Approve or reject a pending leave request."""

    request_id: str
    status: Literal["approved", "rejected"] = "approved"
    approved_by: Optional[str] = None


class AttendanceCreate(CamelModel):
    employee_id: str
    date: date
    check_in: datetime
    status: AttendanceStatus = "present"
    notes: str = ""


class Attendance(Record, AttendanceCreate):
    check_out: Optional[datetime] = None


class CheckOut(CamelModel):
    attendance_id: str
    check_out: datetime = Field(default_factory=datetime.utcnow)


class PerformanceReviewCreate(CamelModel):
    employee_id: str
    rating: float = Field(..., ge=1, le=5)
    feedback: str = ""
    goals: List[str] = Field(default_factory=list)
    reviewed_by: str


class PerformanceReview(Record, PerformanceReviewCreate):
    review_date: datetime = Field(default_factory=datetime.utcnow)


class HRMMetrics(CamelModel):
    total_employees: int
    active_employees: int
    on_leave: int
    average_salary: float
    department_count: int
    pending_leave_requests: int
