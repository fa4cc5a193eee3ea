"""
Payroll endpoints for API v1.

``GET /payroll?action=payrolls`` lists payrolls, optionally for one
``month`` or ``employeeId``; ``action=reports`` returns the twelve most
recent payroll reports.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from erp_api.app.api.v1.dispatch import created, current_company, found, parse_payload, resolve_action
from erp_api.app.core.errors import invalid_action
from erp_api.app.schemas.payroll import BonusCreate, DeductionCreate, PayrollCreate, PayrollRef, ReportRequest
from erp_api.app.services.payroll_service import PayrollService

router = APIRouter()


@router.get("")
async def read_payroll(
    action: Optional[str] = Query(None),
    month: Optional[str] = Query(None),
    employee_id: Optional[str] = Query(None, alias="employeeId"),
    company_id: str = Depends(current_company),
) -> Any:
    if action == "payrolls":
        return await PayrollService.get_payrolls(company_id, month=month, employee_id=employee_id)
    if action == "reports":
        return await PayrollService.get_reports(company_id)
    raise invalid_action(action)


@router.post("")
async def act_payroll(
    response: Response,
    action: Optional[str] = Query(None),
    payload: Optional[Dict[str, Any]] = Body(None),
    company_id: str = Depends(current_company),
) -> Any:
    name, body = resolve_action(action, payload)

    if name == "create-payroll":
        created(response)
        return await PayrollService.create_payroll(company_id, parse_payload(PayrollCreate, body))
    if name == "add-deduction":
        created(response)
        return await PayrollService.add_deduction(company_id, parse_payload(DeductionCreate, body))
    if name == "add-bonus":
        created(response)
        return await PayrollService.add_bonus(company_id, parse_payload(BonusCreate, body))
    if name == "process-payroll":
        data = parse_payload(PayrollRef, body)
        return found(await PayrollService.process_payroll(company_id, data.payroll_id), "Payroll")
    if name == "mark-paid":
        data = parse_payload(PayrollRef, body)
        return found(await PayrollService.mark_as_paid(company_id, data.payroll_id), "Payroll")
    if name == "generate-report":
        created(response)
        data = parse_payload(ReportRequest, body)
        return await PayrollService.generate_report(company_id, data.month)
    raise invalid_action(name)
