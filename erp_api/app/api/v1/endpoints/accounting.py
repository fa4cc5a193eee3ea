"""
Accounting endpoints for API v1.

Lists the chart of accounts, journal entries, invoices and the
financial metrics.  ``POST`` actions create accounts, create and post
journal entries and create, send and settle invoices.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from erp_api.app.api.v1.dispatch import created, current_company, found, parse_payload, resolve_action
from erp_api.app.core.errors import invalid_action
from erp_api.app.schemas.accounting import AccountCreate, InvoiceCreate, InvoiceRef, JournalEntryCreate, JournalEntryRef
from erp_api.app.services.accounting_service import AccountingService

router = APIRouter()


@router.get("")
async def read_accounting(
    action: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
    company_id: str = Depends(current_company),
) -> Any:
    if action == "chart-of-accounts":
        return await AccountingService.get_chart_of_accounts(company_id)
    if action == "journal-entries":
        return await AccountingService.get_journal_entries(company_id, status=status_filter)
    if action == "invoices":
        return await AccountingService.get_invoices(company_id, status=status_filter)
    if action == "metrics":
        return await AccountingService.get_metrics(company_id)
    raise invalid_action(action)


@router.post("")
async def act_accounting(
    response: Response,
    action: Optional[str] = Query(None),
    payload: Optional[Dict[str, Any]] = Body(None),
    company_id: str = Depends(current_company),
) -> Any:
    name, body = resolve_action(action, payload)

    if name == "create-account":
        created(response)
        return await AccountingService.create_account(company_id, parse_payload(AccountCreate, body))
    if name == "create-journal-entry":
        created(response)
        return await AccountingService.create_journal_entry(company_id, parse_payload(JournalEntryCreate, body))
    if name == "post-journal-entry":
        data = parse_payload(JournalEntryRef, body)
        return found(await AccountingService.post_journal_entry(company_id, data.entry_id), "Entry")
    if name == "create-invoice":
        created(response)
        return await AccountingService.create_invoice(company_id, parse_payload(InvoiceCreate, body))
    if name == "send-invoice":
        data = parse_payload(InvoiceRef, body)
        return found(await AccountingService.send_invoice(company_id, data.invoice_id), "Invoice")
    if name == "mark-paid":
        data = parse_payload(InvoiceRef, body)
        return found(await AccountingService.mark_invoice_paid(company_id, data.invoice_id), "Invoice")
    raise invalid_action(name)
