"""
Pydantic schemas for financial statements and departmental budgets.

Statement records store both their inputs and the derived figures
(gross profit, totals, ending cash) so reports render without
recomputation.
"""

from typing import Optional

from pydantic import Field

from .base import CamelModel, Record


class IncomeStatementCreate(CamelModel):
    period: str = Field(..., examples=["2024-Q1"])
    revenue: float
    cost_of_goods_sold: float = 0
    operating_expenses: float = 0
    interest_expense: float = 0
    tax_expense: float = 0


class IncomeStatement(Record, IncomeStatementCreate):
    gross_profit: float
    operating_income: float
    net_income: float


class AssetsInput(CamelModel):
    current: float = 0
    fixed: float = 0


class LiabilitiesInput(CamelModel):
    current: float = 0
    long_term: float = 0


class AssetTotals(AssetsInput):
    total: float


class LiabilityTotals(LiabilitiesInput):
    total: float


class BalanceSheetCreate(CamelModel):
    period: str
    assets: AssetsInput
    liabilities: LiabilitiesInput
    equity: float = 0


class BalanceSheet(Record):
    period: str
    assets: AssetTotals
    liabilities: LiabilityTotals
    equity: float


class CashFlowCreate(CamelModel):
    period: str
    operating_cash_flow: float = 0
    investing_cash_flow: float = 0
    financing_cash_flow: float = 0
    beginning_cash: float = 0


class CashFlowStatement(Record, CashFlowCreate):
    net_cash_flow: float
    ending_cash: float


class BudgetCreate(CamelModel):
    department: str = Field(..., min_length=1)
    category: str = ""
    allocated_amount: float = Field(..., ge=0)
    period: str


class BudgetAllocation(Record, BudgetCreate):
    spent_amount: float = 0
    variance: float


class BudgetSpending(CamelModel):
    budget_id: str
    amount: float = Field(..., gt=0)


class FinancialReportingMetrics(CamelModel):
    income_statements: int
    latest_net_income: Optional[float]
    total_allocated: float
    total_spent: float
    total_variance: float
    budget_utilization: float
    over_budget_departments: int
