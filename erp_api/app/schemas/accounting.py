"""
Pydantic schemas for general accounting.

A chart of accounts, double-entry journal entries whose lines move
account balances when posted, and customer invoices.
"""

from datetime import date, datetime
from typing import List, Literal

from pydantic import Field

from .base import CamelModel, Record

AccountType = Literal["asset", "liability", "equity", "revenue", "expense"]
JournalStatus = Literal["draft", "posted", "reversed"]
InvoiceStatus = Literal["draft", "sent", "paid", "overdue", "cancelled"]


class AccountCreate(CamelModel):
    account_code: str = Field(..., min_length=1, examples=["1000"])
    account_name: str = Field(..., min_length=1, examples=["Cash"])
    account_type: AccountType


class Account(Record, AccountCreate):
    balance: float = 0


class JournalLine(CamelModel):
    account_id: str
    debit: float = Field(0, ge=0)
    credit: float = Field(0, ge=0)


class JournalEntryCreate(CamelModel):
    description: str = ""
    entries: List[JournalLine] = Field(..., min_length=1)


class JournalEntry(Record, JournalEntryCreate):
    entry_number: str
    entry_date: datetime = Field(default_factory=datetime.utcnow)
    status: JournalStatus = "draft"


class JournalEntryRef(CamelModel):
    entry_id: str


class InvoiceLine(CamelModel):
    description: str
    quantity: float = Field(..., gt=0)
    unit_price: float = Field(..., ge=0)


class InvoiceCreate(CamelModel):
    customer_id: str
    items: List[InvoiceLine] = Field(..., min_length=1)
    tax: float = Field(0, ge=0)
    due_date: date


class Invoice(Record, InvoiceCreate):
    invoice_number: str
    subtotal: float
    total: float
    status: InvoiceStatus = "draft"


class InvoiceRef(CamelModel):
    invoice_id: str


class FinancialMetrics(CamelModel):
    total_assets: float
    total_liabilities: float
    total_equity: float
    total_revenue: float
    total_expenses: float
    net_income: float
    profit_margin: float
    outstanding_invoices: int
