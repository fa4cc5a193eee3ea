"""Pydantic schemas for suppliers, supply orders and inbound shipments."""

from datetime import date, datetime
from typing import List, Literal, Optional

from pydantic import Field

from .base import CamelModel, Record

OrderStatus = Literal["draft", "sent", "confirmed", "delivered", "cancelled"]
ShipmentStatus = Literal["pending", "in-transit", "delivered", "delayed"]


class SupplierCreate(CamelModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+$")
    phone: str = ""
    address: str = ""
    city: str = ""
    country: str = ""
    lead_time: int = Field(0, ge=0, description="Days")


class Supplier(Record, SupplierCreate):
    rating: float = 5
    status: Literal["active", "inactive", "suspended"] = "active"


class OrderItem(CamelModel):
    product_id: str
    quantity: float = Field(..., gt=0)
    unit_price: float = Field(..., ge=0)


class SupplyOrderCreate(CamelModel):
    supplier_id: str
    items: List[OrderItem] = Field(..., min_length=1)
    expected_delivery: date


class SupplyOrder(Record, SupplyOrderCreate):
    order_number: str
    total_amount: float
    status: OrderStatus = "draft"
    order_date: datetime = Field(default_factory=datetime.utcnow)


class OrderRef(CamelModel):
    order_id: str


class OrderStatusUpdate(CamelModel):
    order_id: str
    status: OrderStatus


class ShipmentCreate(CamelModel):
    purchase_order_id: str
    tracking_number: str = ""
    carrier: str = Field(..., min_length=1)
    estimated_delivery: date


class Shipment(Record, ShipmentCreate):
    status: ShipmentStatus = "pending"
    shipped_date: datetime = Field(default_factory=datetime.utcnow)
    actual_delivery: Optional[datetime] = None


class ShipmentStatusUpdate(CamelModel):
    shipment_id: str
    status: ShipmentStatus


class SupplyChainMetrics(CamelModel):
    total_suppliers: int
    active_suppliers: int
    total_orders: int
    pending_orders: int
    total_spend: float
    total_shipments: int
    in_transit_shipments: int
    average_lead_time: float
