"""Asset register and maintenance endpoints for API v1."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from erp_api.app.api.v1.dispatch import created, current_company, found, parse_payload, resolve_action
from erp_api.app.core.errors import invalid_action
from erp_api.app.schemas.asset_management import (
    AssetCreate,
    AssetStatusUpdate,
    MaintenanceRecordCreate,
    MaintenanceScheduleCreate,
)
from erp_api.app.services.asset_management_service import AssetManagementService

router = APIRouter()


@router.get("")
async def read_assets(
    action: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
    asset_id: Optional[str] = Query(None, alias="assetId"),
    company_id: str = Depends(current_company),
) -> Any:
    if action == "assets":
        return await AssetManagementService.get_assets(company_id, status=status_filter)
    if action == "schedules":
        return await AssetManagementService.get_schedules(company_id, asset_id=asset_id)
    if action == "records":
        return await AssetManagementService.get_records(company_id, asset_id=asset_id)
    if action == "metrics":
        return await AssetManagementService.get_metrics(company_id)
    raise invalid_action(action)


@router.post("")
async def act_assets(
    response: Response,
    action: Optional[str] = Query(None),
    payload: Optional[Dict[str, Any]] = Body(None),
    company_id: str = Depends(current_company),
) -> Any:
    name, body = resolve_action(action, payload)

    if name == "create-asset":
        created(response)
        return await AssetManagementService.create_asset(company_id, parse_payload(AssetCreate, body))
    if name == "update-asset-status":
        data = parse_payload(AssetStatusUpdate, body)
        return found(await AssetManagementService.update_asset_status(company_id, data.asset_id, data.status), "Asset")
    if name == "schedule-maintenance":
        created(response)
        return await AssetManagementService.schedule_maintenance(company_id, parse_payload(MaintenanceScheduleCreate, body))
    if name == "record-maintenance":
        created(response)
        return await AssetManagementService.record_maintenance(company_id, parse_payload(MaintenanceRecordCreate, body))
    raise invalid_action(name)
