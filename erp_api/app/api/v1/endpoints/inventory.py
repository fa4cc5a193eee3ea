"""
Inventory endpoints for API v1.

Lists items (optionally by ``status``), stock movements (optionally by
``itemId``), adjustments and the inventory metrics.  ``POST`` actions
create items, record movements and create or approve adjustments.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from erp_api.app.api.v1.dispatch import created, current_company, found, parse_payload, resolve_action
from erp_api.app.core.errors import invalid_action
from erp_api.app.schemas.inventory import AdjustmentCreate, AdjustmentRef, InventoryItemCreate, StockMovementCreate
from erp_api.app.services.inventory_service import InventoryService

router = APIRouter()


@router.get("")
async def read_inventory(
    action: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
    item_id: Optional[str] = Query(None, alias="itemId"),
    company_id: str = Depends(current_company),
) -> Any:
    if action == "items":
        return await InventoryService.get_items(company_id, status=status_filter)
    if action == "movements":
        return await InventoryService.get_movements(company_id, item_id=item_id)
    if action == "adjustments":
        return await InventoryService.get_adjustments(company_id, status=status_filter)
    if action == "metrics":
        return await InventoryService.get_metrics(company_id)
    raise invalid_action(action)


@router.post("")
async def act_inventory(
    response: Response,
    action: Optional[str] = Query(None),
    payload: Optional[Dict[str, Any]] = Body(None),
    company_id: str = Depends(current_company),
) -> Any:
    name, body = resolve_action(action, payload)

    if name == "create-item":
        created(response)
        return await InventoryService.create_item(company_id, parse_payload(InventoryItemCreate, body))
    if name == "record-movement":
        created(response)
        return await InventoryService.record_movement(company_id, parse_payload(StockMovementCreate, body))
    if name == "create-adjustment":
        created(response)
        return await InventoryService.create_adjustment(company_id, parse_payload(AdjustmentCreate, body))
    if name == "approve-adjustment":
        data = parse_payload(AdjustmentRef, body)
        return found(await InventoryService.approve_adjustment(company_id, data.adjustment_id), "Adjustment")
    raise invalid_action(name)
