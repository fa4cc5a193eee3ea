"""
Service layer for the sales pipeline.

Deals move through the stages in ``STAGE_PROBABILITIES``; a stage
change without an explicit probability takes the stage's default.
Closing a deal (won or lost) stamps ``actualCloseDate``.  Forecast
accuracy is ``round(actual / forecast * 100)`` once actual revenue is
known and 0 before that.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from erp_api.app.core.errors import invalid_state, not_found
from erp_api.app.core.store import InMemoryStore
from erp_api.app.schemas.sales_pipeline import (
    ActivityCreate,
    Deal,
    DealCreate,
    DealStage,
    ForecastCreate,
    PipelineMetrics,
    SalesActivity,
    SalesForecast,
)
from erp_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)

STAGE_PROBABILITIES = {
    "prospecting": 10,
    "qualification": 25,
    "proposal": 50,
    "negotiation": 75,
    "closed-won": 100,
    "closed-lost": 0,
}
CLOSED_STAGES = ("closed-won", "closed-lost")

deals: InMemoryStore[Deal] = InMemoryStore("sales.deals")
activities: InMemoryStore[SalesActivity] = InMemoryStore("sales.activities")
forecasts: InMemoryStore[SalesForecast] = InMemoryStore("sales.forecasts")


def forecast_accuracy(forecasted: float, actual: float) -> float:
    return round(actual / forecasted * 100) if actual > 0 else 0


class SalesPipelineService:
    @classmethod
    async def create_deal(cls, company_id: str, data: DealCreate) -> Deal:
        deal = deals.add(Deal(company_id=company_id, **data.model_dump()))
        logger.info("Deal created: %s (%.2f)", deal.name, deal.value)
        await AuditService.record("create", "deal", deal, value=deal.value)
        return deal

    @classmethod
    async def update_stage(
        cls, company_id: str, deal_id: str, stage: DealStage, probability: Optional[float] = None
    ) -> Optional[Deal]:
        deal = deals.get_owned(deal_id, company_id)
        if deal is None:
            return None
        if deal.stage in CLOSED_STAGES:
            raise invalid_state(f"Deal is already {deal.stage}")
        deal.stage = stage
        deal.probability = STAGE_PROBABILITIES[stage] if probability is None else probability
        if stage in CLOSED_STAGES:
            deal.actual_close_date = datetime.utcnow()
        deal.updated_at = datetime.utcnow()
        logger.info("Deal %s moved to %s", deal_id, stage)
        await AuditService.record("update-stage", "deal", deal, stage=stage)
        return deal

    @classmethod
    async def add_activity(cls, company_id: str, data: ActivityCreate) -> SalesActivity:
        if deals.get_owned(data.deal_id, company_id) is None:
            raise not_found("Deal not found")
        activity = activities.add(SalesActivity(company_id=company_id, **data.model_dump()))
        logger.info("Activity %s added to deal %s", activity.type, activity.deal_id)
        return activity

    @classmethod
    async def complete_activity(cls, company_id: str, activity_id: str) -> Optional[SalesActivity]:
        activity = activities.get_owned(activity_id, company_id)
        if activity is None:
            return None
        activity.completed = True
        activity.completed_date = datetime.utcnow()
        return activity

    @classmethod
    async def create_forecast(cls, company_id: str, data: ForecastCreate) -> SalesForecast:
        forecast = forecasts.add(
            SalesForecast(
                company_id=company_id,
                accuracy=forecast_accuracy(data.forecasted_revenue, data.actual_revenue),
                **data.model_dump(),
            )
        )
        logger.info("Forecast created for %s: %.2f", forecast.month, forecast.forecasted_revenue)
        return forecast

    @classmethod
    async def update_forecast(cls, company_id: str, forecast_id: str, actual_revenue: float) -> Optional[SalesForecast]:
        forecast = forecasts.get_owned(forecast_id, company_id)
        if forecast is None:
            return None
        forecast.actual_revenue = actual_revenue
        forecast.accuracy = forecast_accuracy(forecast.forecasted_revenue, actual_revenue)
        return forecast

    @classmethod
    async def get_deals(cls, company_id: str, stage: Optional[str] = None) -> List[Deal]:
        return deals.filter(company_id=company_id, stage=stage)

    @classmethod
    async def get_activities(cls, company_id: str, deal_id: Optional[str] = None) -> List[SalesActivity]:
        return activities.filter(company_id=company_id, deal_id=deal_id)

    @classmethod
    async def get_forecasts(cls, company_id: str, limit: int = 12) -> List[SalesForecast]:
        return forecasts.filter(company_id=company_id)[-limit:]

    @classmethod
    async def get_metrics(cls, company_id: str) -> PipelineMetrics:
        company_deals = deals.filter(company_id=company_id)
        total_value = sum(d.value for d in company_deals)
        by_stage = {stage: 0 for stage in STAGE_PROBABILITIES}
        for deal in company_deals:
            by_stage[deal.stage] += 1
        won, lost = by_stage["closed-won"], by_stage["closed-lost"]
        return PipelineMetrics(
            total_deals=len(company_deals),
            total_pipeline_value=total_value,
            weighted_pipeline_value=sum(d.value * d.probability / 100 for d in company_deals),
            deals_by_stage=by_stage,
            average_deal_value=total_value / len(company_deals) if company_deals else 0,
            won_deals=won,
            lost_deals=lost,
            win_rate=won / (won + lost) * 100 if won + lost else 0,
        )
