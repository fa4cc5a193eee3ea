"""Pydantic schemas for warehouses, zones and pick/pack orders."""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field

from .base import CamelModel, Record, code_field

WarehouseStatus = Literal["active", "inactive", "maintenance"]
ZoneType = Literal["storage", "picking", "packing", "receiving", "shipping"]
PickingStatus = Literal["pending", "in-progress", "completed", "cancelled"]


class WarehouseCreate(CamelModel):
    warehouse_code: str = code_field("WH")
    warehouse_name: str = Field(..., min_length=1)
    location: str = ""
    capacity: float = Field(..., gt=0)
    manager: str = ""


class Warehouse(Record, WarehouseCreate):
    current_utilization: float = 0
    status: WarehouseStatus = "active"


class UtilizationUpdate(CamelModel):
    warehouse_id: str
    current_utilization: float = Field(..., ge=0)


class ZoneCreate(CamelModel):
    warehouse_id: str
    zone_code: str = code_field("ZONE")
    zone_name: str = Field(..., min_length=1)
    zone_type: ZoneType = "storage"
    capacity: float = Field(0, ge=0)


class WarehouseZone(Record, ZoneCreate):
    current_utilization: float = 0


class PickItem(CamelModel):
    item_id: str
    quantity: float = Field(..., gt=0)


class PickingOrderCreate(CamelModel):
    warehouse_id: str
    order_code: str = ""
    items: List[PickItem] = Field(..., min_length=1)
    picked_by: str = ""


class PickingOrder(Record, PickingOrderCreate):
    status: PickingStatus = "pending"
    completed_at: Optional[datetime] = None


class PickingOrderRef(CamelModel):
    picking_order_id: str


class PackingOrderCreate(CamelModel):
    picking_order_id: str
    packing_code: str = ""
    weight: float = Field(0, ge=0)
    dimensions: str = ""
    packed_by: str = ""


class PackingOrder(Record, PackingOrderCreate):
    warehouse_id: str
    status: Literal["pending", "in-progress", "completed"] = "pending"
    completed_at: Optional[datetime] = None


class PackingOrderRef(CamelModel):
    packing_order_id: str


class WarehouseMetrics(CamelModel):
    total_warehouses: int
    active_warehouses: int
    total_zones: int
    total_capacity: float
    total_utilization: float
    utilization_rate: float
    pending_picking_orders: int
    completed_picking_orders: int
    packing_orders: int
    average_picking_time: float
