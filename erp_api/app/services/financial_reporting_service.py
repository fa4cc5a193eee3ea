"""
Service layer for financial reporting.

Derived figures follow the usual statement arithmetic:

* income statement: gross profit = revenue - COGS, operating income =
  gross profit - operating expenses, net income = operating income -
  interest - tax;
* balance sheet: asset and liability totals are the sum of their parts;
* cash flow: net = operating + investing + financing, ending cash =
  beginning cash + net;
* budget: variance = allocated - spent, updated as spending is recorded.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from erp_api.app.core.store import InMemoryStore
from erp_api.app.schemas.financial_reporting import (
    AssetTotals,
    BalanceSheet,
    BalanceSheetCreate,
    BudgetAllocation,
    BudgetCreate,
    CashFlowCreate,
    CashFlowStatement,
    FinancialReportingMetrics,
    IncomeStatement,
    IncomeStatementCreate,
    LiabilityTotals,
)
from erp_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)

income_statements: InMemoryStore[IncomeStatement] = InMemoryStore("reporting.income_statements")
balance_sheets: InMemoryStore[BalanceSheet] = InMemoryStore("reporting.balance_sheets")
cash_flows: InMemoryStore[CashFlowStatement] = InMemoryStore("reporting.cash_flows")
budgets: InMemoryStore[BudgetAllocation] = InMemoryStore("reporting.budgets")


class FinancialReportingService:
    @classmethod
    async def create_income_statement(cls, company_id: str, data: IncomeStatementCreate) -> IncomeStatement:
        gross_profit = data.revenue - data.cost_of_goods_sold
        operating_income = gross_profit - data.operating_expenses
        statement = income_statements.add(
            IncomeStatement(
                company_id=company_id,
                gross_profit=gross_profit,
                operating_income=operating_income,
                net_income=operating_income - data.interest_expense - data.tax_expense,
                **data.model_dump(),
            )
        )
        logger.info("Income statement created for %s: net income %.2f", statement.period, statement.net_income)
        return statement

    @classmethod
    async def create_balance_sheet(cls, company_id: str, data: BalanceSheetCreate) -> BalanceSheet:
        sheet = balance_sheets.add(
            BalanceSheet(
                company_id=company_id,
                period=data.period,
                assets=AssetTotals(**data.assets.model_dump(), total=data.assets.current + data.assets.fixed),
                liabilities=LiabilityTotals(
                    **data.liabilities.model_dump(),
                    total=data.liabilities.current + data.liabilities.long_term,
                ),
                equity=data.equity,
            )
        )
        logger.info("Balance sheet created for %s", sheet.period)
        return sheet

    @classmethod
    async def create_cash_flow_statement(cls, company_id: str, data: CashFlowCreate) -> CashFlowStatement:
        net = data.operating_cash_flow + data.investing_cash_flow + data.financing_cash_flow
        statement = cash_flows.add(
            CashFlowStatement(
                company_id=company_id,
                net_cash_flow=net,
                ending_cash=data.beginning_cash + net,
                **data.model_dump(),
            )
        )
        logger.info("Cash flow statement created for %s: ending cash %.2f", statement.period, statement.ending_cash)
        return statement

    @classmethod
    async def allocate_budget(cls, company_id: str, data: BudgetCreate) -> BudgetAllocation:
        budget = budgets.add(BudgetAllocation(company_id=company_id, variance=data.allocated_amount, **data.model_dump()))
        logger.info("Budget allocated: %s %.2f for %s", budget.department, budget.allocated_amount, budget.period)
        await AuditService.record("create", "budget", budget, allocated=budget.allocated_amount)
        return budget

    @classmethod
    async def record_budget_spending(cls, company_id: str, budget_id: str, amount: float) -> Optional[BudgetAllocation]:
        budget = budgets.get_owned(budget_id, company_id)
        if budget is None:
            return None
        budget.spent_amount += amount
        budget.variance = budget.allocated_amount - budget.spent_amount
        logger.info("Budget %s spending recorded: %.2f (variance %.2f)", budget_id, amount, budget.variance)
        await AuditService.record("spend", "budget", budget, amount=amount)
        return budget

    @classmethod
    async def get_income_statements(cls, company_id: str) -> List[IncomeStatement]:
        return income_statements.filter(company_id=company_id)

    @classmethod
    async def get_balance_sheets(cls, company_id: str) -> List[BalanceSheet]:
        return balance_sheets.filter(company_id=company_id)

    @classmethod
    async def get_cash_flow_statements(cls, company_id: str) -> List[CashFlowStatement]:
        return cash_flows.filter(company_id=company_id)

    @classmethod
    async def get_budgets(
        cls, company_id: str, period: Optional[str] = None, department: Optional[str] = None
    ) -> List[BudgetAllocation]:
        return budgets.filter(company_id=company_id, period=period, department=department)

    @classmethod
    async def get_metrics(cls, company_id: str) -> FinancialReportingMetrics:
        statements = income_statements.filter(company_id=company_id)
        company_budgets = budgets.filter(company_id=company_id)
        allocated = sum(b.allocated_amount for b in company_budgets)
        spent = sum(b.spent_amount for b in company_budgets)
        return FinancialReportingMetrics(
            income_statements=len(statements),
            latest_net_income=statements[-1].net_income if statements else None,
            total_allocated=allocated,
            total_spent=spent,
            total_variance=allocated - spent,
            budget_utilization=spent / allocated * 100 if allocated > 0 else 0,
            over_budget_departments=len({b.department for b in company_budgets if b.variance < 0}),
        )
