"""Pydantic schemas for asset locations, depreciation and disposals."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from .base import CamelModel, Record

LocationStatus = Literal["in-use", "in-storage", "in-transit", "lost"]
DepreciationMethod = Literal["straight-line", "declining-balance", "units-of-production"]
DisposalMethod = Literal["sale", "donation", "scrap", "trade-in"]


class AssetLocationCreate(CamelModel):
    asset_id: str
    location: str
    department: str = ""
    assigned_to: str = ""
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)


class AssetLocation(Record, AssetLocationCreate):
    assigned_date: datetime = Field(default_factory=datetime.utcnow)
    status: LocationStatus = "in-use"


class LocationUpdate(CamelModel):
    asset_id: str
    location: str
    status: LocationStatus


class DepreciationCreate(CamelModel):
    asset_id: str
    depreciation_method: DepreciationMethod = "straight-line"
    useful_life: int = Field(..., gt=0, description="Years")
    salvage_value: float = Field(0, ge=0)
    asset_cost: float = Field(..., gt=0)


class DepreciationSchedule(Record):
    asset_id: str
    depreciation_method: DepreciationMethod
    useful_life: int
    salvage_value: float
    annual_depreciation: float
    accumulated_depreciation: float = 0
    book_value: float


class DepreciationRef(CamelModel):
    schedule_id: str


class DisposalCreate(CamelModel):
    asset_id: str
    disposal_method: DisposalMethod
    disposal_price: float = Field(0, ge=0)
    book_value: Optional[float] = Field(None, description="Defaults to the asset's current book value")


class AssetDisposal(Record):
    asset_id: str
    disposal_date: datetime = Field(default_factory=datetime.utcnow)
    disposal_method: DisposalMethod
    disposal_price: float
    book_value: float
    gain_loss: float


class AssetTrackingMetrics(CamelModel):
    total_locations: int
    assets_in_use: int
    assets_in_storage: int
    assets_in_transit: int
    assets_lost: int
    total_depreciation: float
    total_disposals: int
    total_disposal_value: float
