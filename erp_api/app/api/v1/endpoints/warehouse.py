"""Warehouse operations endpoints for API v1."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from erp_api.app.api.v1.dispatch import created, current_company, found, parse_payload, resolve_action
from erp_api.app.core.errors import invalid_action
from erp_api.app.schemas.warehouse import (
    PackingOrderCreate,
    PackingOrderRef,
    PickingOrderCreate,
    PickingOrderRef,
    UtilizationUpdate,
    WarehouseCreate,
    ZoneCreate,
)
from erp_api.app.services.warehouse_service import WarehouseService

router = APIRouter()


@router.get("")
async def read_warehouse(
    action: Optional[str] = Query(None),
    warehouse_id: Optional[str] = Query(None, alias="warehouseId"),
    picking_order_id: Optional[str] = Query(None, alias="pickingOrderId"),
    status_filter: Optional[str] = Query(None, alias="status"),
    company_id: str = Depends(current_company),
) -> Any:
    if action == "warehouses":
        return await WarehouseService.get_warehouses(company_id)
    if action == "zones":
        return await WarehouseService.get_zones(company_id, warehouse_id=warehouse_id)
    if action == "picking-orders":
        return await WarehouseService.get_picking_orders(company_id, warehouse_id=warehouse_id, status=status_filter)
    if action == "packing-orders":
        return await WarehouseService.get_packing_orders(company_id, picking_order_id=picking_order_id)
    if action == "metrics":
        return await WarehouseService.get_metrics(company_id)
    raise invalid_action(action)


@router.post("")
async def act_warehouse(
    response: Response,
    action: Optional[str] = Query(None),
    payload: Optional[Dict[str, Any]] = Body(None),
    company_id: str = Depends(current_company),
) -> Any:
    name, body = resolve_action(action, payload)

    if name == "create-warehouse":
        created(response)
        return await WarehouseService.create_warehouse(company_id, parse_payload(WarehouseCreate, body))
    if name == "update-utilization":
        data = parse_payload(UtilizationUpdate, body)
        return found(
            await WarehouseService.update_utilization(company_id, data.warehouse_id, data.current_utilization),
            "Warehouse",
        )
    if name == "create-zone":
        created(response)
        return await WarehouseService.create_zone(company_id, parse_payload(ZoneCreate, body))
    if name == "create-picking-order":
        created(response)
        return await WarehouseService.create_picking_order(company_id, parse_payload(PickingOrderCreate, body))
    if name == "complete-picking-order":
        data = parse_payload(PickingOrderRef, body)
        return found(await WarehouseService.complete_picking_order(company_id, data.picking_order_id), "Picking order")
    if name == "create-packing-order":
        created(response)
        return await WarehouseService.create_packing_order(company_id, parse_payload(PackingOrderCreate, body))
    if name == "complete-packing-order":
        data = parse_payload(PackingOrderRef, body)
        return found(await WarehouseService.complete_packing_order(company_id, data.packing_order_id), "Packing order")
    raise invalid_action(name)
