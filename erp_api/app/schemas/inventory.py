"""Pydantic schemas for inventory items, stock movements and adjustments."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from .base import CamelModel, Record, code_field

ItemStatus = Literal["active", "inactive", "discontinued"]
MovementType = Literal["inbound", "outbound", "adjustment", "return"]
AdjustmentType = Literal["increase", "decrease", "correction"]
AdjustmentStatus = Literal["pending", "approved", "rejected"]


class InventoryItemCreate(CamelModel):
    item_code: str = Field(..., min_length=1, examples=["SKU-001"])
    item_name: str = Field(..., min_length=1, examples=["Steel bolt M8"])
    category: str = ""
    quantity: int = Field(0, ge=0)
    reorder_level: int = Field(0, ge=0)
    unit_price: float = Field(..., ge=0)
    warehouse_location: str = ""


class InventoryItem(Record, InventoryItemCreate):
    status: ItemStatus = "active"


class StockMovementCreate(CamelModel):
    item_id: str
    movement_type: MovementType
    quantity: int = Field(..., gt=0)
    reference: str = ""
    reason: str = ""


class StockMovement(Record, StockMovementCreate):
    movement_date: datetime = Field(default_factory=datetime.utcnow)


class AdjustmentCreate(CamelModel):
    item_id: str
    adjustment_code: str = code_field("ADJ")
    adjustment_type: AdjustmentType
    quantity: int = Field(..., gt=0)
    reason: str = ""
    approved_by: Optional[str] = None


class InventoryAdjustment(Record, AdjustmentCreate):
    status: AdjustmentStatus = "pending"


class AdjustmentRef(CamelModel):
    adjustment_id: str


class InventoryMetrics(CamelModel):
    total_items: int
    active_items: int
    total_value: float
    low_stock_items: int
    out_of_stock_items: int
    average_inventory_turnover: float
    stock_accuracy: float
