"""Pydantic schemas for waste records, green initiatives and carbon offsets."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from .base import CamelModel, Record

WasteType = Literal["organic", "recyclable", "hazardous", "general"]
DisposalMethod = Literal["landfill", "recycling", "incineration", "composting"]
InitiativeCategory = Literal["energy", "waste", "water", "emissions", "other"]
InitiativeStatus = Literal["planned", "in-progress", "completed"]
OffsetType = Literal["tree-planting", "renewable-energy", "carbon-credits", "other"]


class WasteCreate(CamelModel):
    waste_type: WasteType
    quantity: float = Field(..., gt=0)
    unit: Literal["kg", "tons", "liters"] = "kg"
    disposal_method: DisposalMethod
    date: datetime = Field(default_factory=datetime.utcnow)


class WasteRecord(Record, WasteCreate):
    pass


class InitiativeCreate(CamelModel):
    initiative_name: str = Field(..., min_length=1)
    description: str = ""
    category: InitiativeCategory = "other"
    expected_savings: float = Field(0, ge=0)


class GreenInitiative(Record, InitiativeCreate):
    status: InitiativeStatus = "planned"
    actual_savings: float = 0
    start_date: datetime = Field(default_factory=datetime.utcnow)
    end_date: Optional[datetime] = None


class InitiativeCompletion(CamelModel):
    initiative_id: str
    actual_savings: Optional[float] = Field(None, ge=0)


class OffsetCreate(CamelModel):
    offset_type: OffsetType
    quantity: float = Field(..., gt=0)
    unit: str = "tCO2e"
    cost: float = Field(0, ge=0)
    date: datetime = Field(default_factory=datetime.utcnow)


class CarbonOffset(Record, OffsetCreate):
    pass


class SustainabilityMetrics(CamelModel):
    total_waste: float
    recycled_waste: float
    waste_reduction_rate: float
    green_initiatives_completed: int
    total_carbon_offset: float
    estimated_carbon_reduction: float
    sustainability_score: float
