"""Logistics endpoints for API v1."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from erp_api.app.api.v1.dispatch import created, current_company, found, parse_payload, resolve_action
from erp_api.app.core.errors import invalid_action
from erp_api.app.schemas.logistics import (
    DeliveryCreate,
    DeliveryStatusUpdate,
    RouteCreate,
    UtilizationUpdate,
    WarehouseCreate,
)
from erp_api.app.services.logistics_service import LogisticsService

router = APIRouter()


@router.get("")
async def read_logistics(
    action: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
    company_id: str = Depends(current_company),
) -> Any:
    if action == "warehouses":
        return await LogisticsService.get_warehouses(company_id)
    if action == "routes":
        return await LogisticsService.get_routes(company_id)
    if action == "deliveries":
        return await LogisticsService.get_deliveries(company_id, status=status_filter)
    if action == "metrics":
        return await LogisticsService.get_metrics(company_id)
    raise invalid_action(action)


@router.post("")
async def act_logistics(
    response: Response,
    action: Optional[str] = Query(None),
    payload: Optional[Dict[str, Any]] = Body(None),
    company_id: str = Depends(current_company),
) -> Any:
    name, body = resolve_action(action, payload)

    if name == "create-warehouse":
        created(response)
        return await LogisticsService.create_warehouse(company_id, parse_payload(WarehouseCreate, body))
    if name == "update-utilization":
        data = parse_payload(UtilizationUpdate, body)
        return found(
            await LogisticsService.update_utilization(company_id, data.warehouse_id, data.current_utilization),
            "Warehouse",
        )
    if name == "create-route":
        created(response)
        return await LogisticsService.create_route(company_id, parse_payload(RouteCreate, body))
    if name == "create-delivery":
        created(response)
        return await LogisticsService.create_delivery(company_id, parse_payload(DeliveryCreate, body))
    if name == "update-delivery-status":
        data = parse_payload(DeliveryStatusUpdate, body)
        return found(await LogisticsService.update_delivery_status(company_id, data.delivery_id, data.status), "Delivery")
    raise invalid_action(name)
