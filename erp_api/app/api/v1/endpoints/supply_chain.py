"""Supply chain endpoints for API v1."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from erp_api.app.api.v1.dispatch import created, current_company, found, parse_payload, resolve_action
from erp_api.app.core.errors import invalid_action
from erp_api.app.schemas.supply_chain import (
    OrderRef,
    OrderStatusUpdate,
    ShipmentCreate,
    ShipmentStatusUpdate,
    SupplierCreate,
    SupplyOrderCreate,
)
from erp_api.app.services.supply_chain_service import SupplyChainService

router = APIRouter()


@router.get("")
async def read_supply_chain(
    action: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
    company_id: str = Depends(current_company),
) -> Any:
    if action == "suppliers":
        return await SupplyChainService.get_suppliers(company_id)
    if action == "orders":
        return await SupplyChainService.get_orders(company_id, status=status_filter)
    if action == "shipments":
        return await SupplyChainService.get_shipments(company_id, status=status_filter)
    if action == "metrics":
        return await SupplyChainService.get_metrics(company_id)
    raise invalid_action(action)


@router.post("")
async def act_supply_chain(
    response: Response,
    action: Optional[str] = Query(None),
    payload: Optional[Dict[str, Any]] = Body(None),
    company_id: str = Depends(current_company),
) -> Any:
    name, body = resolve_action(action, payload)

    if name == "create-supplier":
        created(response)
        return await SupplyChainService.create_supplier(company_id, parse_payload(SupplierCreate, body))
    if name == "create-order":
        created(response)
        return await SupplyChainService.create_order(company_id, parse_payload(SupplyOrderCreate, body))
    if name == "confirm-order":
        data = parse_payload(OrderRef, body)
        return found(await SupplyChainService.update_order_status(company_id, data.order_id, "confirmed"), "Order")
    if name == "update-order-status":
        data = parse_payload(OrderStatusUpdate, body)
        return found(await SupplyChainService.update_order_status(company_id, data.order_id, data.status), "Order")
    if name == "create-shipment":
        created(response)
        return await SupplyChainService.create_shipment(company_id, parse_payload(ShipmentCreate, body))
    if name == "update-shipment-status":
        data = parse_payload(ShipmentStatusUpdate, body)
        return found(
            await SupplyChainService.update_shipment_status(company_id, data.shipment_id, data.status), "Shipment"
        )
    raise invalid_action(name)
