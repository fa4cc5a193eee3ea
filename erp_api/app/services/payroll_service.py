"""
Service layer for payroll.

A payroll is created per employee and month with ``net = base``.
Deductions and bonuses may only change a ``draft`` payroll and always
recompute ``net = base + bonuses - deductions``.  A bonus is applied to
the employee's draft payroll of the same month when one exists and is
otherwise kept on record until such a payroll is created.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from erp_api.app.core.errors import invalid_state, not_found
from erp_api.app.core.store import InMemoryStore
from erp_api.app.schemas.payroll import (
    Bonus,
    BonusCreate,
    Deduction,
    DeductionCreate,
    Payroll,
    PayrollCreate,
    PayrollReport,
)
from erp_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)

payrolls: InMemoryStore[Payroll] = InMemoryStore("payroll.payrolls")
deductions: InMemoryStore[Deduction] = InMemoryStore("payroll.deductions")
bonuses: InMemoryStore[Bonus] = InMemoryStore("payroll.bonuses")
reports: InMemoryStore[PayrollReport] = InMemoryStore("payroll.reports")


def _recompute(payroll: Payroll) -> None:
    payroll.net_salary = payroll.base_salary + payroll.bonuses - payroll.deductions


class PayrollService:
    @classmethod
    async def create_payroll(cls, company_id: str, data: PayrollCreate) -> Payroll:
        payroll = payrolls.add(Payroll(company_id=company_id, net_salary=data.base_salary, **data.model_dump()))
        # pick up bonuses granted before the payroll existed
        pending = bonuses.filter(
            lambda b: b.payroll_id is None, company_id=company_id, employee_id=data.employee_id, month=data.month
        )
        for bonus in pending:
            bonus.payroll_id = payroll.id
            payroll.bonuses += bonus.amount
        _recompute(payroll)
        logger.info("Payroll created: employee %s for %s", payroll.employee_id, payroll.month)
        await AuditService.record("create", "payroll", payroll, month=payroll.month)
        return payroll

    @classmethod
    async def add_deduction(cls, company_id: str, data: DeductionCreate) -> Deduction:
        payroll = payrolls.get_owned(data.payroll_id, company_id)
        if payroll is None:
            raise not_found("Payroll not found")
        cls._require_draft(payroll)
        deduction = deductions.add(Deduction(company_id=company_id, **data.model_dump()))
        payroll.deductions += deduction.amount
        _recompute(payroll)
        logger.info("Deduction added to payroll %s: %.2f (%s)", payroll.id, deduction.amount, deduction.type)
        await AuditService.record("deduct", "payroll", payroll, amount=deduction.amount, type=deduction.type)
        return deduction

    @classmethod
    async def add_bonus(cls, company_id: str, data: BonusCreate) -> Bonus:
        drafts = payrolls.filter(company_id=company_id, employee_id=data.employee_id, month=data.month, status="draft")
        bonus = bonuses.add(Bonus(company_id=company_id, **data.model_dump()))
        if drafts:
            payroll = drafts[0]
            bonus.payroll_id = payroll.id
            payroll.bonuses += bonus.amount
            _recompute(payroll)
        logger.info("Bonus added for employee %s: %.2f", bonus.employee_id, bonus.amount)
        await AuditService.record("create", "bonus", bonus, amount=bonus.amount)
        return bonus

    @classmethod
    async def process_payroll(cls, company_id: str, payroll_id: str) -> Optional[Payroll]:
        payroll = payrolls.get_owned(payroll_id, company_id)
        if payroll is None:
            return None
        cls._require_draft(payroll)
        payroll.status = "processed"
        payroll.processed_date = datetime.utcnow()
        logger.info("Payroll processed: %s", payroll_id)
        await AuditService.record("process", "payroll", payroll, net=payroll.net_salary)
        return payroll

    @classmethod
    async def mark_as_paid(cls, company_id: str, payroll_id: str) -> Optional[Payroll]:
        payroll = payrolls.get_owned(payroll_id, company_id)
        if payroll is None:
            return None
        if payroll.status != "processed":
            raise invalid_state(f"Payroll is {payroll.status}, only processed payrolls can be paid")
        payroll.status = "paid"
        payroll.paid_date = datetime.utcnow()
        logger.info("Payroll marked as paid: %s", payroll_id)
        await AuditService.record("pay", "payroll", payroll)
        return payroll

    @classmethod
    async def get_payrolls(
        cls, company_id: str, month: Optional[str] = None, employee_id: Optional[str] = None
    ) -> List[Payroll]:
        return payrolls.filter(company_id=company_id, month=month, employee_id=employee_id)

    @classmethod
    async def generate_report(cls, company_id: str, month: str) -> PayrollReport:
        runs = payrolls.filter(company_id=company_id, month=month)
        total = sum(p.net_salary for p in runs)
        report = reports.add(
            PayrollReport(
                company_id=company_id,
                month=month,
                total_payroll=total,
                total_bonuses=sum(p.bonuses for p in runs),
                total_deductions=sum(p.deductions for p in runs),
                employee_count=len(runs),
                average_salary=total / len(runs) if runs else 0,
            )
        )
        logger.info("Payroll report generated for %s: %d payrolls", month, len(runs))
        return report

    @classmethod
    async def get_reports(cls, company_id: str, limit: int = 12) -> List[PayrollReport]:
        return reports.filter(company_id=company_id)[-limit:]

    @staticmethod
    def _require_draft(payroll: Payroll) -> None:
        if payroll.status != "draft":
            raise invalid_state(f"Payroll is already {payroll.status}")
