"""
Financial reporting endpoints for API v1.

Lists income statements, balance sheets, cash flow statements and
budgets (optionally for one ``period``) plus a reporting summary.
``POST`` actions create statements, allocate budgets and record
spending against them.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from erp_api.app.api.v1.dispatch import created, current_company, found, parse_payload, resolve_action
from erp_api.app.core.errors import invalid_action
from erp_api.app.schemas.financial_reporting import (
    BalanceSheetCreate,
    BudgetCreate,
    BudgetSpending,
    CashFlowCreate,
    IncomeStatementCreate,
)
from erp_api.app.services.financial_reporting_service import FinancialReportingService

router = APIRouter()


@router.get("")
async def read_financial_reports(
    action: Optional[str] = Query(None),
    period: Optional[str] = Query(None),
    department: Optional[str] = Query(None),
    company_id: str = Depends(current_company),
) -> Any:
    if action == "income-statements":
        return await FinancialReportingService.get_income_statements(company_id)
    if action == "balance-sheets":
        return await FinancialReportingService.get_balance_sheets(company_id)
    if action == "cash-flow-statements":
        return await FinancialReportingService.get_cash_flow_statements(company_id)
    if action == "budgets":
        return await FinancialReportingService.get_budgets(company_id, period=period, department=department)
    if action == "metrics":
        return await FinancialReportingService.get_metrics(company_id)
    raise invalid_action(action)


@router.post("")
async def act_financial_reports(
    response: Response,
    action: Optional[str] = Query(None),
    payload: Optional[Dict[str, Any]] = Body(None),
    company_id: str = Depends(current_company),
) -> Any:
    name, body = resolve_action(action, payload)

    if name == "create-income-statement":
        created(response)
        return await FinancialReportingService.create_income_statement(company_id, parse_payload(IncomeStatementCreate, body))
    if name == "create-balance-sheet":
        created(response)
        return await FinancialReportingService.create_balance_sheet(company_id, parse_payload(BalanceSheetCreate, body))
    if name == "create-cash-flow":
        created(response)
        return await FinancialReportingService.create_cash_flow_statement(company_id, parse_payload(CashFlowCreate, body))
    if name == "allocate-budget":
        created(response)
        return await FinancialReportingService.allocate_budget(company_id, parse_payload(BudgetCreate, body))
    if name == "record-spending":
        data = parse_payload(BudgetSpending, body)
        return found(
            await FinancialReportingService.record_budget_spending(company_id, data.budget_id, data.amount),
            "Budget",
        )
    raise invalid_action(name)
