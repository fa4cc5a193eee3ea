"""Pydantic schemas for payroll runs, deductions, bonuses and reports."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from .base import CamelModel, Record

PayrollStatus = Literal["draft", "processed", "paid"]
DeductionType = Literal["tax", "insurance", "loan", "other"]


class PayrollCreate(CamelModel):
    employee_id: str
    month: str = Field(..., examples=["2024-05"])
    base_salary: float = Field(..., ge=0)


class Payroll(Record, PayrollCreate):
    bonuses: float = 0
    deductions: float = 0
    net_salary: float
    status: PayrollStatus = "draft"
    processed_date: Optional[datetime] = None
    paid_date: Optional[datetime] = None


class PayrollRef(CamelModel):
    payroll_id: str


class DeductionCreate(CamelModel):
    payroll_id: str
    type: DeductionType = "other"
    amount: float = Field(..., gt=0)
    description: str = ""


class Deduction(Record, DeductionCreate):
    pass


class BonusCreate(CamelModel):
    employee_id: str
    month: str
    amount: float = Field(..., gt=0)
    reason: str = ""
    approved_by: Optional[str] = None


class Bonus(Record, BonusCreate):
    payroll_id: Optional[str] = None


class ReportRequest(CamelModel):
    month: str


class PayrollReport(Record):
    month: str
    total_payroll: float
    total_bonuses: float
    total_deductions: float
    employee_count: int
    average_salary: float
