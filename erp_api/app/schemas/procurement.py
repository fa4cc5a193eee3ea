"""
Pydantic schemas for procurement.

Purchase orders sent to vendors, goods receipts recorded when the
ordered items arrive and the vendor invoices billed against an order.
"""

from datetime import date, datetime
from typing import List, Literal, Optional

from pydantic import Field, model_validator

from .base import CamelModel, Record
from ..core.store import new_id

POStatus = Literal["draft", "sent", "acknowledged", "received", "invoiced", "paid"]
InspectionStatus = Literal["pending", "passed", "failed"]
InvoiceStatus = Literal["pending", "approved", "paid", "rejected"]


class PurchaseOrderItem(CamelModel):
    id: str = Field(default_factory=new_id)
    description: str
    quantity: float = Field(..., gt=0)
    unit_price: float = Field(..., ge=0)
    total_price: Optional[float] = Field(None, ge=0, description="Defaults to quantity x unit price")

    @model_validator(mode="after")
    def fill_total_price(self) -> "PurchaseOrderItem":
        if self.total_price is None:
            self.total_price = self.quantity * self.unit_price
        return self


class PurchaseOrderCreate(CamelModel):
    po_number: Optional[str] = None
    vendor_id: str
    items: List[PurchaseOrderItem] = Field(..., min_length=1)
    delivery_date: Optional[date] = None


class PurchaseOrder(Record):
    po_number: str
    vendor_id: str
    items: List[PurchaseOrderItem]
    total_amount: float
    status: POStatus = "draft"
    order_date: datetime = Field(default_factory=datetime.utcnow)
    delivery_date: Optional[date] = None


class PurchaseOrderRef(CamelModel):
    po_id: str


class GoodsReceiptCreate(CamelModel):
    po_id: str
    receipt_number: str = ""
    received_quantity: float = Field(..., ge=0)


class GoodsReceipt(Record, GoodsReceiptCreate):
    received_date: datetime = Field(default_factory=datetime.utcnow)
    inspection_status: InspectionStatus = "pending"


class VendorInvoiceCreate(CamelModel):
    po_id: str
    invoice_number: str
    vendor_id: Optional[str] = None
    amount: float = Field(..., ge=0)
    due_date: date


class VendorInvoice(Record):
    po_id: str
    invoice_number: str
    vendor_id: str
    amount: float
    due_date: date
    status: InvoiceStatus = "pending"
    invoice_date: datetime = Field(default_factory=datetime.utcnow)


class InvoiceRef(CamelModel):
    invoice_id: str


class ProcurementMetrics(CamelModel):
    total_purchase_orders: int
    pending_orders: int
    received_orders: int
    total_order_value: float
    average_order_value: float
    total_invoices: int
    pending_invoices: int
    paid_invoices: int
    total_invoice_amount: float
