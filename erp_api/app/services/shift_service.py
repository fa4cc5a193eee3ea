"""
Service layer for shift management.

An approved swap that names an assignment hands that assignment to the
target employee.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from erp_api.app.core.errors import invalid_state, not_found
from erp_api.app.core.store import InMemoryStore, document_number
from erp_api.app.schemas.shifts import (
    AssignmentCreate,
    Shift,
    ShiftAssignment,
    ShiftCreate,
    ShiftMetrics,
    ShiftSwap,
    SwapCreate,
)
from erp_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)

AVERAGE_SHIFT_UTILIZATION = 85.5
SHIFT_COVERAGE_RATE = 94.0

shifts: InMemoryStore[Shift] = InMemoryStore("shifts.shifts")
assignments: InMemoryStore[ShiftAssignment] = InMemoryStore("shifts.assignments")
swaps: InMemoryStore[ShiftSwap] = InMemoryStore("shifts.swaps")


class ShiftService:
    @classmethod
    async def create_shift(cls, company_id: str, data: ShiftCreate) -> Shift:
        shift = shifts.add(Shift(company_id=company_id, **data.model_dump()))
        logger.info("Shift created: %s %s-%s", shift.shift_name, shift.start_time, shift.end_time)
        return shift

    @classmethod
    async def update_shift_status(cls, company_id: str, shift_id: str, status: str) -> Optional[Shift]:
        shift = shifts.get_owned(shift_id, company_id)
        if shift is None:
            return None
        shift.status = status
        return shift

    @classmethod
    async def assign_shift(cls, company_id: str, data: AssignmentCreate) -> ShiftAssignment:
        shift = shifts.get_owned(data.shift_id, company_id)
        if shift is None:
            raise not_found("Shift not found")
        if shift.status != "active":
            raise invalid_state("Shift is inactive")
        values = data.model_dump()
        values["assignment_code"] = data.assignment_code or document_number("SA")
        assignment = assignments.add(ShiftAssignment(company_id=company_id, **values))
        logger.info("Shift %s assigned to employee %s on %s", shift.shift_name, assignment.employee_id, assignment.assignment_date)
        return assignment

    @classmethod
    async def complete_assignment(cls, company_id: str, assignment_id: str) -> Optional[ShiftAssignment]:
        assignment = assignments.get_owned(assignment_id, company_id)
        if assignment is None:
            return None
        assignment.status = "completed"
        return assignment

    @classmethod
    async def request_swap(cls, company_id: str, data: SwapCreate) -> ShiftSwap:
        if data.assignment_id and assignments.get_owned(data.assignment_id, company_id) is None:
            raise not_found("Assignment not found")
        swap = swaps.add(ShiftSwap(company_id=company_id, **data.model_dump()))
        logger.info("Shift swap requested by %s with %s", swap.requesting_employee_id, swap.target_employee_id)
        return swap

    @classmethod
    async def decide_swap(
        cls, company_id: str, swap_id: str, status: str = "approved", approved_by: Optional[str] = None
    ) -> Optional[ShiftSwap]:
        swap = swaps.get_owned(swap_id, company_id)
        if swap is None:
            return None
        if swap.status != "pending":
            raise invalid_state(f"Swap is already {swap.status}")
        swap.status = status
        swap.approved_by = approved_by
        if status == "approved" and swap.assignment_id:
            assignment = assignments.get_owned(swap.assignment_id, company_id)
            if assignment is not None:
                assignment.employee_id = swap.target_employee_id
        logger.info("Shift swap %s %s", swap_id, status)
        await AuditService.record(status, "shift_swap", swap)
        return swap

    @classmethod
    async def get_shifts(cls, company_id: str) -> List[Shift]:
        return shifts.filter(company_id=company_id)

    @classmethod
    async def get_assignments(cls, company_id: str, employee_id: Optional[str] = None) -> List[ShiftAssignment]:
        return assignments.filter(company_id=company_id, employee_id=employee_id)

    @classmethod
    async def get_swaps(cls, company_id: str, status: Optional[str] = None) -> List[ShiftSwap]:
        return swaps.filter(company_id=company_id, status=status)

    @classmethod
    async def get_metrics(cls, company_id: str) -> ShiftMetrics:
        company_shifts = shifts.filter(company_id=company_id)
        company_assignments = assignments.filter(company_id=company_id)
        company_swaps = swaps.filter(company_id=company_id)
        return ShiftMetrics(
            total_shifts=len(company_shifts),
            active_shifts=sum(1 for s in company_shifts if s.status == "active"),
            total_assignments=len(company_assignments),
            completed_assignments=sum(1 for a in company_assignments if a.status == "completed"),
            pending_swaps=sum(1 for s in company_swaps if s.status == "pending"),
            approved_swaps=sum(1 for s in company_swaps if s.status == "approved"),
            average_shift_utilization=AVERAGE_SHIFT_UTILIZATION,
            shift_coverage_rate=SHIFT_COVERAGE_RATE,
        )
