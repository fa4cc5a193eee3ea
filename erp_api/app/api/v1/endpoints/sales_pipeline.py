"""Sales pipeline endpoints for API v1."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from erp_api.app.api.v1.dispatch import created, current_company, found, parse_payload, resolve_action
from erp_api.app.core.errors import invalid_action
from erp_api.app.schemas.sales_pipeline import ActivityCreate, ActivityRef, DealCreate, ForecastCreate, ForecastUpdate, StageUpdate
from erp_api.app.services.sales_pipeline_service import SalesPipelineService

router = APIRouter()


@router.get("")
async def read_pipeline(
    action: Optional[str] = Query(None),
    stage: Optional[str] = Query(None),
    deal_id: Optional[str] = Query(None, alias="dealId"),
    limit: int = Query(12, ge=1, le=120),
    company_id: str = Depends(current_company),
) -> Any:
    if action == "deals":
        return await SalesPipelineService.get_deals(company_id, stage=stage)
    if action == "activities":
        return await SalesPipelineService.get_activities(company_id, deal_id=deal_id)
    if action == "forecasts":
        return await SalesPipelineService.get_forecasts(company_id, limit=limit)
    if action == "metrics":
        return await SalesPipelineService.get_metrics(company_id)
    raise invalid_action(action)


@router.post("")
async def act_pipeline(
    response: Response,
    action: Optional[str] = Query(None),
    payload: Optional[Dict[str, Any]] = Body(None),
    company_id: str = Depends(current_company),
) -> Any:
    name, body = resolve_action(action, payload)

    if name == "create-deal":
        created(response)
        return await SalesPipelineService.create_deal(company_id, parse_payload(DealCreate, body))
    if name == "update-stage":
        data = parse_payload(StageUpdate, body)
        return found(
            await SalesPipelineService.update_stage(company_id, data.deal_id, data.stage, data.probability), "Deal"
        )
    if name == "add-activity":
        created(response)
        return await SalesPipelineService.add_activity(company_id, parse_payload(ActivityCreate, body))
    if name == "complete-activity":
        data = parse_payload(ActivityRef, body)
        return found(await SalesPipelineService.complete_activity(company_id, data.activity_id), "Activity")
    if name == "create-forecast":
        created(response)
        return await SalesPipelineService.create_forecast(company_id, parse_payload(ForecastCreate, body))
    if name == "update-forecast":
        data = parse_payload(ForecastUpdate, body)
        return found(await SalesPipelineService.update_forecast(company_id, data.forecast_id, data.actual_revenue), "Forecast")
    raise invalid_action(name)
