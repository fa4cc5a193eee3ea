"""
Service layer for procurement.

A purchase order starts as ``draft``, is ``sent`` to the vendor and
becomes ``received`` once a goods receipt is recorded against it.
Vendor invoices reference an order, default to the order's vendor and
move from ``pending`` to ``approved`` and then ``paid``.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from erp_api.app.core.errors import invalid_state, not_found
from erp_api.app.core.store import InMemoryStore, document_number
from erp_api.app.schemas.procurement import (
    GoodsReceipt,
    GoodsReceiptCreate,
    ProcurementMetrics,
    PurchaseOrder,
    PurchaseOrderCreate,
    VendorInvoice,
    VendorInvoiceCreate,
)
from erp_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)

purchase_orders: InMemoryStore[PurchaseOrder] = InMemoryStore("procurement.purchase_orders")
goods_receipts: InMemoryStore[GoodsReceipt] = InMemoryStore("procurement.goods_receipts")
invoices: InMemoryStore[VendorInvoice] = InMemoryStore("procurement.invoices")


class ProcurementService:
    """Service class for purchase orders, receipts and vendor invoices."""

    @classmethod
    async def create_purchase_order(cls, company_id: str, data: PurchaseOrderCreate) -> PurchaseOrder:
        po = purchase_orders.add(
            PurchaseOrder(
                company_id=company_id,
                po_number=data.po_number or document_number("PO"),
                vendor_id=data.vendor_id,
                items=data.items,
                total_amount=sum(item.total_price for item in data.items),
                delivery_date=data.delivery_date,
            )
        )
        logger.info("Purchase order created: %s (%s) total %.2f", po.po_number, po.id, po.total_amount)
        await AuditService.record("create", "purchase_order", po, total=po.total_amount)
        return po

    @classmethod
    async def send_purchase_order(cls, company_id: str, po_id: str) -> Optional[PurchaseOrder]:
        po = purchase_orders.get_owned(po_id, company_id)
        if po is None:
            return None
        if po.status != "draft":
            raise invalid_state(f"Purchase order is already {po.status}")
        po.status = "sent"
        logger.info("Purchase order sent: %s", po.po_number)
        await AuditService.record("send", "purchase_order", po)
        return po

    @classmethod
    async def receive_goods(cls, company_id: str, data: GoodsReceiptCreate) -> GoodsReceipt:
        po = purchase_orders.get_owned(data.po_id, company_id)
        if po is None:
            raise not_found("Purchase order not found")
        receipt = goods_receipts.add(
            GoodsReceipt(
                company_id=company_id,
                po_id=data.po_id,
                receipt_number=data.receipt_number or document_number("GR"),
                received_quantity=data.received_quantity,
            )
        )
        po.status = "received"
        logger.info("Goods received for %s: receipt %s", po.po_number, receipt.receipt_number)
        await AuditService.record("receive", "purchase_order", po, receipt=receipt.id)
        return receipt

    @classmethod
    async def get_purchase_orders(cls, company_id: str, status: Optional[str] = None) -> List[PurchaseOrder]:
        return purchase_orders.filter(company_id=company_id, status=status)

    @classmethod
    async def get_goods_receipts(cls, company_id: str, po_id: Optional[str] = None) -> List[GoodsReceipt]:
        return goods_receipts.filter(company_id=company_id, po_id=po_id)

    @classmethod
    async def create_invoice(cls, company_id: str, data: VendorInvoiceCreate) -> VendorInvoice:
        po = purchase_orders.get_owned(data.po_id, company_id)
        if po is None:
            raise not_found("Purchase order not found")
        invoice = invoices.add(
            VendorInvoice(
                company_id=company_id,
                po_id=po.id,
                invoice_number=data.invoice_number,
                vendor_id=data.vendor_id or po.vendor_id,
                amount=data.amount,
                due_date=data.due_date,
            )
        )
        logger.info("Vendor invoice created: %s for %s", invoice.invoice_number, po.po_number)
        await AuditService.record("create", "vendor_invoice", invoice, amount=invoice.amount)
        return invoice

    @classmethod
    async def approve_invoice(cls, company_id: str, invoice_id: str) -> Optional[VendorInvoice]:
        return await cls._set_invoice_status(company_id, invoice_id, "approved")

    @classmethod
    async def pay_invoice(cls, company_id: str, invoice_id: str) -> Optional[VendorInvoice]:
        return await cls._set_invoice_status(company_id, invoice_id, "paid")

    @classmethod
    async def get_invoices(
        cls, company_id: str, vendor_id: Optional[str] = None, status: Optional[str] = None
    ) -> List[VendorInvoice]:
        return invoices.filter(company_id=company_id, vendor_id=vendor_id, status=status)

    @classmethod
    async def get_metrics(cls, company_id: str) -> ProcurementMetrics:
        orders = purchase_orders.filter(company_id=company_id)
        company_invoices = invoices.filter(company_id=company_id)
        total_value = sum(o.total_amount for o in orders)
        return ProcurementMetrics(
            total_purchase_orders=len(orders),
            pending_orders=sum(1 for o in orders if o.status in ("draft", "sent")),
            received_orders=sum(1 for o in orders if o.status == "received"),
            total_order_value=total_value,
            average_order_value=total_value / len(orders) if orders else 0,
            total_invoices=len(company_invoices),
            pending_invoices=sum(1 for i in company_invoices if i.status == "pending"),
            paid_invoices=sum(1 for i in company_invoices if i.status == "paid"),
            total_invoice_amount=sum(i.amount for i in company_invoices),
        )

    @classmethod
    async def _set_invoice_status(cls, company_id: str, invoice_id: str, status: str) -> Optional[VendorInvoice]:
        invoice = invoices.get_owned(invoice_id, company_id)
        if invoice is None:
            return None
        invoice.status = status
        logger.info("Vendor invoice %s marked %s", invoice.invoice_number, status)
        await AuditService.record(status, "vendor_invoice", invoice)
        return invoice
