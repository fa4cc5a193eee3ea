"""Pydantic schemas for deals, sales activities and revenue forecasts."""

from datetime import date, datetime
from typing import Dict, Literal, Optional

from pydantic import Field

from .base import CamelModel, Record

DealStage = Literal["prospecting", "qualification", "proposal", "negotiation", "closed-won", "closed-lost"]
ActivityType = Literal["call", "email", "meeting", "task", "note"]


class DealCreate(CamelModel):
    name: str = Field(..., min_length=1)
    customer_id: str
    value: float = Field(..., ge=0)
    expected_close_date: date
    assigned_to: str = ""
    notes: str = ""


class Deal(Record, DealCreate):
    stage: DealStage = "prospecting"
    probability: float = 0
    actual_close_date: Optional[datetime] = None
    updated_at: datetime = Field(default_factory=datetime.utcnow)


class StageUpdate(CamelModel):
    deal_id: str
    stage: DealStage
    probability: Optional[float] = Field(None, ge=0, le=100, description="Defaults to the stage's usual probability")


class ActivityCreate(CamelModel):
    deal_id: str
    type: ActivityType
    description: str = ""
    due_date: Optional[date] = None
    created_by: str = ""


class SalesActivity(Record, ActivityCreate):
    completed: bool = False
    completed_date: Optional[datetime] = None


class ActivityRef(CamelModel):
    activity_id: str


class ForecastCreate(CamelModel):
    month: str = Field(..., pattern=r"^\d{4}-\d{2}$")
    forecasted_revenue: float = Field(..., gt=0)
    actual_revenue: float = Field(0, ge=0)


class SalesForecast(Record, ForecastCreate):
    accuracy: float = 0


class ForecastUpdate(CamelModel):
    forecast_id: str
    actual_revenue: float = Field(..., ge=0)


class PipelineMetrics(CamelModel):
    total_deals: int
    total_pipeline_value: float
    weighted_pipeline_value: float
    deals_by_stage: Dict[str, int]
    average_deal_value: float
    won_deals: int
    lost_deals: int
    win_rate: float
