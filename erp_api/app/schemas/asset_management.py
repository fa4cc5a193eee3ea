"""Pydantic schemas for the asset register and its maintenance."""

from datetime import date, datetime
from typing import Literal, Optional

from pydantic import Field

from .base import CamelModel, Record

AssetStatus = Literal["active", "inactive", "maintenance", "retired"]
MaintenanceType = Literal["preventive", "corrective", "predictive"]
Frequency = Literal["daily", "weekly", "monthly", "quarterly", "yearly"]
ScheduleStatus = Literal["scheduled", "in-progress", "completed", "overdue"]


class AssetCreate(CamelModel):
    asset_code: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    category: str
    purchase_date: date
    purchase_price: float = Field(..., ge=0)
    location: str = ""


class Asset(Record, AssetCreate):
    current_value: float
    depreciation: float = 0
    status: AssetStatus = "active"


class AssetStatusUpdate(CamelModel):
    asset_id: str
    status: AssetStatus


class MaintenanceScheduleCreate(CamelModel):
    asset_id: str
    maintenance_type: MaintenanceType = "preventive"
    frequency: Frequency = "monthly"
    estimated_cost: float = Field(0, ge=0)


class MaintenanceSchedule(Record, MaintenanceScheduleCreate):
    last_maintenance_date: datetime = Field(default_factory=datetime.utcnow)
    next_maintenance_date: datetime
    status: ScheduleStatus = "scheduled"


class MaintenanceRecordCreate(CamelModel):
    asset_id: str
    schedule_id: Optional[str] = None
    description: str
    cost: float = Field(0, ge=0)
    duration: float = Field(0, ge=0, description="Hours spent")
    technician: str = ""


class MaintenanceRecord(Record, MaintenanceRecordCreate):
    completed_date: datetime = Field(default_factory=datetime.utcnow)


class AssetMetrics(CamelModel):
    total_assets: int
    active_assets: int
    total_asset_value: float
    total_depreciation: float
    maintenance_scheduled: int
    maintenance_overdue: int
    total_maintenance_cost: float
