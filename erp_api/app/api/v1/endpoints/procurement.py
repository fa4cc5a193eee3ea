"""
Procurement endpoints for API v1.

Lists purchase orders, goods receipts, vendor invoices and metrics.
``POST`` actions create and send purchase orders, record received
goods and create, approve or pay vendor invoices.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from erp_api.app.api.v1.dispatch import created, current_company, found, parse_payload, resolve_action
from erp_api.app.core.errors import invalid_action
from erp_api.app.schemas.procurement import (
    GoodsReceiptCreate,
    InvoiceRef,
    PurchaseOrderCreate,
    PurchaseOrderRef,
    VendorInvoiceCreate,
)
from erp_api.app.services.procurement_service import ProcurementService

router = APIRouter()


@router.get("")
async def read_procurement(
    action: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
    vendor_id: Optional[str] = Query(None, alias="vendorId"),
    po_id: Optional[str] = Query(None, alias="poId"),
    company_id: str = Depends(current_company),
) -> Any:
    if action == "purchase-orders":
        return await ProcurementService.get_purchase_orders(company_id, status=status_filter)
    if action == "receipts":
        return await ProcurementService.get_goods_receipts(company_id, po_id=po_id)
    if action == "invoices":
        return await ProcurementService.get_invoices(company_id, vendor_id=vendor_id, status=status_filter)
    if action == "metrics":
        return await ProcurementService.get_metrics(company_id)
    raise invalid_action(action)


@router.post("")
async def act_procurement(
    response: Response,
    action: Optional[str] = Query(None),
    payload: Optional[Dict[str, Any]] = Body(None),
    company_id: str = Depends(current_company),
) -> Any:
    name, body = resolve_action(action, payload)

    if name == "create-po":
        created(response)
        return await ProcurementService.create_purchase_order(company_id, parse_payload(PurchaseOrderCreate, body))
    if name == "send-po":
        data = parse_payload(PurchaseOrderRef, body)
        return found(await ProcurementService.send_purchase_order(company_id, data.po_id), "Purchase order")
    if name == "receive-goods":
        created(response)
        return await ProcurementService.receive_goods(company_id, parse_payload(GoodsReceiptCreate, body))
    if name == "create-invoice":
        created(response)
        return await ProcurementService.create_invoice(company_id, parse_payload(VendorInvoiceCreate, body))
    if name == "approve-invoice":
        data = parse_payload(InvoiceRef, body)
        return found(await ProcurementService.approve_invoice(company_id, data.invoice_id), "Invoice")
    if name == "pay-invoice":
        data = parse_payload(InvoiceRef, body)
        return found(await ProcurementService.pay_invoice(company_id, data.invoice_id), "Invoice")
    raise invalid_action(name)
