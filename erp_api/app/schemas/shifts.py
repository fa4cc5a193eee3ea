"""Pydantic schemas for shifts, shift assignments and swap requests."""

from datetime import date
from typing import Literal, Optional

from pydantic import Field

from .base import CamelModel, Record, code_field

SwapStatus = Literal["pending", "approved", "rejected"]


class ShiftCreate(CamelModel):
    shift_code: str = code_field("SHIFT")
    shift_name: str = Field(..., min_length=1)
    start_time: str = Field(..., pattern=r"^\d{2}:\d{2}$")
    end_time: str = Field(..., pattern=r"^\d{2}:\d{2}$")
    break_duration: int = Field(0, ge=0, description="Minutes")
    working_hours: float = Field(..., gt=0)


class Shift(Record, ShiftCreate):
    status: Literal["active", "inactive"] = "active"


class ShiftStatusUpdate(CamelModel):
    shift_id: str
    status: Literal["active", "inactive"]


class AssignmentCreate(CamelModel):
    employee_id: str
    shift_id: str
    assignment_code: str = ""
    assignment_date: date


class ShiftAssignment(Record, AssignmentCreate):
    status: Literal["assigned", "completed", "cancelled"] = "assigned"


class AssignmentRef(CamelModel):
    assignment_id: str


class SwapCreate(CamelModel):
    assignment_id: Optional[str] = None
    requesting_employee_id: str
    target_employee_id: str
    swap_code: str = code_field("SWAP")
    original_shift_date: date
    target_shift_date: date
    reason: str = ""


class ShiftSwap(Record, SwapCreate):
    status: SwapStatus = "pending"
    approved_by: Optional[str] = None


class SwapDecision(CamelModel):
    swap_id: str
    status: Literal["approved", "rejected"] = "approved"
    approved_by: Optional[str] = None


class ShiftMetrics(CamelModel):
    total_shifts: int
    active_shifts: int
    total_assignments: int
    completed_assignments: int
    pending_swaps: int
    approved_swaps: int
    average_shift_utilization: float
    shift_coverage_rate: float
