"""
Service layer for accounting.

Posting a journal entry adds ``debit - credit`` of each line to the
referenced account's balance; an entry can only be posted once.
Invoices compute ``subtotal`` from their lines and ``total`` as
subtotal plus tax, and move ``draft`` -> ``sent`` -> ``paid``.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from erp_api.app.core.errors import invalid_state, not_found
from erp_api.app.core.store import InMemoryStore, document_number
from erp_api.app.schemas.accounting import (
    Account,
    AccountCreate,
    FinancialMetrics,
    Invoice,
    InvoiceCreate,
    JournalEntry,
    JournalEntryCreate,
)
from erp_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)

accounts: InMemoryStore[Account] = InMemoryStore("accounting.accounts")
journal_entries: InMemoryStore[JournalEntry] = InMemoryStore("accounting.journal_entries")
invoices: InMemoryStore[Invoice] = InMemoryStore("accounting.invoices")


class AccountingService:
    """Service class for the chart of accounts, journal and invoices."""

    @classmethod
    async def create_account(cls, company_id: str, data: AccountCreate) -> Account:
        account = accounts.add(Account(company_id=company_id, **data.model_dump()))
        logger.info("Account created: %s %s", account.account_code, account.account_name)
        await AuditService.record("create", "account", account)
        return account

    @classmethod
    async def get_chart_of_accounts(cls, company_id: str) -> List[Account]:
        return accounts.filter(company_id=company_id)

    @classmethod
    async def create_journal_entry(cls, company_id: str, data: JournalEntryCreate) -> JournalEntry:
        for line in data.entries:
            if accounts.get_owned(line.account_id, company_id) is None:
                raise not_found(f"Account {line.account_id} not found")
        entry = journal_entries.add(
            JournalEntry(company_id=company_id, entry_number=document_number("JE"), **data.model_dump())
        )
        logger.info("Journal entry created: %s", entry.entry_number)
        await AuditService.record("create", "journal_entry", entry)
        return entry

    @classmethod
    async def post_journal_entry(cls, company_id: str, entry_id: str) -> Optional[JournalEntry]:
        entry = journal_entries.get_owned(entry_id, company_id)
        if entry is None:
            return None
        if entry.status != "draft":
            raise invalid_state(f"Journal entry is already {entry.status}")
        for line in entry.entries:
            account = accounts.get_owned(line.account_id, company_id)
            if account is not None:
                account.balance += line.debit - line.credit
        entry.status = "posted"
        logger.info("Journal entry posted: %s", entry.entry_number)
        await AuditService.record("post", "journal_entry", entry)
        return entry

    @classmethod
    async def get_journal_entries(cls, company_id: str, status: Optional[str] = None) -> List[JournalEntry]:
        return journal_entries.filter(company_id=company_id, status=status)

    @classmethod
    async def create_invoice(cls, company_id: str, data: InvoiceCreate) -> Invoice:
        subtotal = sum(line.quantity * line.unit_price for line in data.items)
        invoice = invoices.add(
            Invoice(
                company_id=company_id,
                invoice_number=document_number("INV"),
                subtotal=subtotal,
                total=subtotal + data.tax,
                **data.model_dump(),
            )
        )
        logger.info("Invoice created: %s total %.2f", invoice.invoice_number, invoice.total)
        await AuditService.record("create", "invoice", invoice, total=invoice.total)
        return invoice

    @classmethod
    async def send_invoice(cls, company_id: str, invoice_id: str) -> Optional[Invoice]:
        return await cls._set_invoice_status(company_id, invoice_id, "sent")

    @classmethod
    async def mark_invoice_paid(cls, company_id: str, invoice_id: str) -> Optional[Invoice]:
        return await cls._set_invoice_status(company_id, invoice_id, "paid")

    @classmethod
    async def get_invoices(cls, company_id: str, status: Optional[str] = None) -> List[Invoice]:
        return invoices.filter(company_id=company_id, status=status)

    @classmethod
    async def get_metrics(cls, company_id: str) -> FinancialMetrics:
        totals = {"asset": 0.0, "liability": 0.0, "equity": 0.0, "revenue": 0.0, "expense": 0.0}
        for account in accounts.filter(company_id=company_id):
            totals[account.account_type] += account.balance
        net_income = totals["revenue"] - totals["expense"]
        outstanding = invoices.filter(company_id=company_id, predicate=lambda i: i.status in ("sent", "overdue"))
        return FinancialMetrics(
            total_assets=totals["asset"],
            total_liabilities=totals["liability"],
            total_equity=totals["equity"],
            total_revenue=totals["revenue"],
            total_expenses=totals["expense"],
            net_income=net_income,
            profit_margin=net_income / totals["revenue"] * 100 if totals["revenue"] > 0 else 0,
            outstanding_invoices=len(outstanding),
        )

    @classmethod
    async def _set_invoice_status(cls, company_id: str, invoice_id: str, status: str) -> Optional[Invoice]:
        invoice = invoices.get_owned(invoice_id, company_id)
        if invoice is None:
            return None
        invoice.status = status
        logger.info("Invoice %s marked %s", invoice.invoice_number, status)
        await AuditService.record(status, "invoice", invoice)
        return invoice
