"""Pydantic schemas for warehouses, delivery routes and deliveries."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from .base import CamelModel, Record

DeliveryStatus = Literal["pending", "in-progress", "completed", "failed"]


class WarehouseCreate(CamelModel):
    name: str = Field(..., min_length=1)
    location: str
    capacity: float = Field(..., gt=0)
    manager: str = ""


class Warehouse(Record, WarehouseCreate):
    current_utilization: float = 0
    status: Literal["active", "inactive", "maintenance"] = "active"


class UtilizationUpdate(CamelModel):
    warehouse_id: str
    current_utilization: float = Field(..., ge=0)


class RouteCreate(CamelModel):
    name: str = Field(..., min_length=1)
    origin: str
    destination: str
    distance: float = Field(..., ge=0)
    estimated_time: float = Field(0, ge=0, description="Hours")
    cost: float = Field(0, ge=0)


class Route(Record, RouteCreate):
    status: Literal["active", "inactive"] = "active"


class DeliveryCreate(CamelModel):
    order_id: str = ""
    route_id: str
    driver: str = ""
    vehicle: str = ""


class Delivery(Record, DeliveryCreate):
    tracking_number: str
    status: DeliveryStatus = "pending"
    pickup_time: Optional[datetime] = None
    delivery_time: Optional[datetime] = None


class DeliveryStatusUpdate(CamelModel):
    delivery_id: str
    status: DeliveryStatus


class LogisticsMetrics(CamelModel):
    total_warehouses: int
    warehouse_utilization: float
    total_routes: int
    total_deliveries: int
    completed_deliveries: int
    failed_deliveries: int
    cost_per_delivery: float
    average_delivery_time: float
