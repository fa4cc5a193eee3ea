"""
Service layer for human resource management.

Keeps employees, leave requests, attendance records and performance
reviews in memory.  Every record belongs to a company; leave requests,
attendance and reviews must reference an employee of that company.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from erp_api.app.core.errors import invalid_state, not_found
from erp_api.app.core.store import InMemoryStore
from erp_api.app.schemas.hrm import (
    Attendance,
    AttendanceCreate,
    Employee,
    EmployeeCreate,
    EmployeeStatus,
    HRMMetrics,
    LeaveRequest,
    LeaveRequestCreate,
    PerformanceReview,
    PerformanceReviewCreate,
)
from erp_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)

employees: InMemoryStore[Employee] = InMemoryStore("hrm.employees")
leave_requests: InMemoryStore[LeaveRequest] = InMemoryStore("hrm.leave_requests")
attendance: InMemoryStore[Attendance] = InMemoryStore("hrm.attendance")
reviews: InMemoryStore[PerformanceReview] = InMemoryStore("hrm.reviews")


class HRMService:
    """Service class for employees and their HR records."""

    @classmethod
    async def create_employee(cls, company_id: str, data: EmployeeCreate) -> Employee:
        employee = employees.add(Employee(company_id=company_id, **data.model_dump()))
        logger.info("Employee created: %s %s (%s)", employee.first_name, employee.last_name, employee.id)
        await AuditService.record("create", "employee", employee, department=employee.department)
        return employee

    @classmethod
    async def get_employees(cls, company_id: str, status: Optional[str] = None) -> List[Employee]:
        return employees.filter(company_id=company_id, status=status)

    @classmethod
    async def get_employee(cls, company_id: str, employee_id: str) -> Optional[Employee]:
        return employees.get_owned(employee_id, company_id)

    @classmethod
    async def update_employee_status(
        cls, company_id: str, employee_id: str, status: EmployeeStatus
    ) -> Optional[Employee]:
        employee = employees.get_owned(employee_id, company_id)
        if employee is None:
            return None
        employee.status = status
        employee.updated_at = datetime.utcnow()
        logger.info("Employee %s status changed to %s", employee_id, status)
        await AuditService.record("update-status", "employee", employee, status=status)
        return employee

    @classmethod
    async def delete_employee(cls, company_id: str, employee_id: str) -> bool:
        employee = employees.get_owned(employee_id, company_id)
        if employee is None:
            return False
        employees.delete(employee_id)
        logger.info("Employee deleted: %s", employee_id)
        await AuditService.record("delete", "employee", employee)
        return True

    @classmethod
    async def request_leave(cls, company_id: str, data: LeaveRequestCreate) -> LeaveRequest:
        cls._require_employee(company_id, data.employee_id)
        request = leave_requests.add(LeaveRequest(company_id=company_id, **data.model_dump()))
        logger.info("Leave request created: %s for employee %s", request.id, request.employee_id)
        await AuditService.record("create", "leave_request", request, type=request.type)
        return request

    @classmethod
    async def decide_leave_request(
        cls,
        company_id: str,
        request_id: str,
        status: str = "approved",
        approved_by: Optional[str] = None,
    ) -> Optional[LeaveRequest]:
        """Approve or reject a leave request; ``None`` when it does not exist."""
        request = leave_requests.get_owned(request_id, company_id)
        if request is None:
            return None
        if request.status != "pending":
            raise invalid_state(f"Leave request is already {request.status}")
        request.status = status
        request.approved_by = approved_by
        logger.info("Leave request %s %s", request_id, status)
        await AuditService.record(status, "leave_request", request)
        return request

    @classmethod
    async def get_leave_requests(
        cls, company_id: str, status: Optional[str] = None, employee_id: Optional[str] = None
    ) -> List[LeaveRequest]:
        return leave_requests.filter(company_id=company_id, status=status, employee_id=employee_id)

    @classmethod
    async def record_attendance(cls, company_id: str, data: AttendanceCreate) -> Attendance:
        cls._require_employee(company_id, data.employee_id)
        record = attendance.add(Attendance(company_id=company_id, **data.model_dump()))
        logger.info("Attendance recorded: %s for employee %s", record.id, record.employee_id)
        return record

    @classmethod
    async def record_check_out(cls, company_id: str, attendance_id: str, check_out: datetime) -> Optional[Attendance]:
        record = attendance.get_owned(attendance_id, company_id)
        if record is None:
            return None
        record.check_out = check_out
        logger.info("Check-out recorded: %s", attendance_id)
        return record

    @classmethod
    async def get_employee_attendance(cls, company_id: str, employee_id: str, limit: int = 30) -> List[Attendance]:
        """Return the most recent ``limit`` attendance records of an employee."""
        records = attendance.filter(company_id=company_id, employee_id=employee_id)
        return records[-limit:] if limit > 0 else []

    @classmethod
    async def create_performance_review(cls, company_id: str, data: PerformanceReviewCreate) -> PerformanceReview:
        cls._require_employee(company_id, data.employee_id)
        review = reviews.add(PerformanceReview(company_id=company_id, **data.model_dump()))
        logger.info("Performance review created: %s for employee %s", review.id, review.employee_id)
        await AuditService.record("create", "performance_review", review, rating=review.rating)
        return review

    @classmethod
    async def get_performance_reviews(cls, company_id: str, employee_id: Optional[str] = None) -> List[PerformanceReview]:
        return reviews.filter(company_id=company_id, employee_id=employee_id)

    @classmethod
    async def get_metrics(cls, company_id: str) -> HRMMetrics:
        staff = employees.filter(company_id=company_id)
        average_salary = sum(e.salary for e in staff) / len(staff) if staff else 0
        return HRMMetrics(
            total_employees=len(staff),
            active_employees=sum(1 for e in staff if e.status == "active"),
            on_leave=sum(1 for e in staff if e.status == "on-leave"),
            average_salary=average_salary,
            department_count=len({e.department for e in staff}),
            pending_leave_requests=len(leave_requests.filter(company_id=company_id, status="pending")),
        )

    @classmethod
    def _require_employee(cls, company_id: str, employee_id: str) -> Employee:
        employee = employees.get_owned(employee_id, company_id)
        if employee is None:
            raise not_found("Employee not found")
        return employee
