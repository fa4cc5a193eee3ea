"""Pydantic schemas for energy consumption, targets and sustainability readings."""

from datetime import date, datetime
from typing import Dict, Literal

from pydantic import Field

from .base import CamelModel, Record

EnergyType = Literal["electricity", "gas", "water", "renewable"]
EnergyUnit = Literal["kWh", "m3", "liters", "BTU"]
TargetType = Literal["reduction", "efficiency", "renewable"]
TargetStatus = Literal["active", "achieved", "missed"]
SustainabilityMetricType = Literal["carbon-footprint", "waste-reduction", "water-usage", "renewable-energy"]


class ConsumptionCreate(CamelModel):
    facility_id: str
    energy_type: EnergyType
    consumption: float = Field(..., ge=0)
    unit: EnergyUnit = "kWh"
    cost: float = Field(0, ge=0)


class EnergyConsumption(Record, ConsumptionCreate):
    date: datetime = Field(default_factory=datetime.utcnow)


class TargetCreate(CamelModel):
    target_type: TargetType
    target_value: float
    target_unit: str = ""
    deadline: date


class EnergyTarget(Record, TargetCreate):
    status: TargetStatus = "active"


class TargetStatusUpdate(CamelModel):
    target_id: str
    status: TargetStatus


class SustainabilityMetricCreate(CamelModel):
    metric_type: SustainabilityMetricType
    value: float
    unit: str = ""


class SustainabilityMetric(Record, SustainabilityMetricCreate):
    date: datetime = Field(default_factory=datetime.utcnow)


class EnergyMetrics(CamelModel):
    total_consumption: float
    electricity_usage: float
    gas_usage: float
    water_usage: float
    renewable_usage: float
    renewable_percentage: float
    total_cost: float
    average_cost: float
    targets_achieved: int
    carbon_footprint: float
    by_type: Dict[str, float]
