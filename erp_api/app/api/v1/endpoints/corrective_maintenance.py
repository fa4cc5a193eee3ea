"""Corrective maintenance endpoints for API v1."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from erp_api.app.api.v1.dispatch import created, current_company, found, parse_payload, resolve_action
from erp_api.app.core.errors import invalid_action
from erp_api.app.schemas.maintenance import (
    MaintenanceRequestCreate,
    RepairCreate,
    RepairRef,
    WorkOrderCreate,
    WorkOrderRef,
)
from erp_api.app.services.corrective_maintenance_service import CorrectiveMaintenanceService

router = APIRouter()


@router.get("")
async def read_corrective_maintenance(
    action: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
    request_id: Optional[str] = Query(None, alias="requestId"),
    work_order_id: Optional[str] = Query(None, alias="workOrderId"),
    company_id: str = Depends(current_company),
) -> Any:
    if action == "requests":
        return await CorrectiveMaintenanceService.get_requests(company_id, status=status_filter)
    if action == "work-orders":
        return await CorrectiveMaintenanceService.get_work_orders(company_id, request_id=request_id)
    if action == "repairs":
        return await CorrectiveMaintenanceService.get_repairs(company_id, work_order_id=work_order_id)
    if action == "metrics":
        return await CorrectiveMaintenanceService.get_metrics(company_id)
    raise invalid_action(action)


@router.post("")
async def act_corrective_maintenance(
    response: Response,
    action: Optional[str] = Query(None),
    payload: Optional[Dict[str, Any]] = Body(None),
    company_id: str = Depends(current_company),
) -> Any:
    name, body = resolve_action(action, payload)

    if name == "create-request":
        created(response)
        return await CorrectiveMaintenanceService.create_request(company_id, parse_payload(MaintenanceRequestCreate, body))
    if name == "create-work-order":
        created(response)
        return await CorrectiveMaintenanceService.create_work_order(company_id, parse_payload(WorkOrderCreate, body))
    if name == "create-repair":
        created(response)
        return await CorrectiveMaintenanceService.create_repair(company_id, parse_payload(RepairCreate, body))
    if name == "complete-repair":
        data = parse_payload(RepairRef, body)
        return found(await CorrectiveMaintenanceService.complete_repair(company_id, data.repair_id), "Repair")
    if name == "complete-work-order":
        data = parse_payload(WorkOrderRef, body)
        return found(await CorrectiveMaintenanceService.complete_work_order(company_id, data.work_order_id), "Work order")
    raise invalid_action(name)
