"""
Asset tracking endpoints for API v1.

``update-location`` addresses an asset by ``assetId`` rather than by
the tracking record id.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from erp_api.app.api.v1.dispatch import created, current_company, found, parse_payload, resolve_action
from erp_api.app.core.errors import invalid_action
from erp_api.app.schemas.asset_tracking import (
    AssetLocationCreate,
    DepreciationCreate,
    DepreciationRef,
    DisposalCreate,
    LocationUpdate,
)
from erp_api.app.services.asset_tracking_service import AssetTrackingService

router = APIRouter()


@router.get("")
async def read_asset_tracking(
    action: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
    asset_id: Optional[str] = Query(None, alias="assetId"),
    company_id: str = Depends(current_company),
) -> Any:
    if action == "locations":
        return await AssetTrackingService.get_locations(company_id, asset_id=asset_id, status=status_filter)
    if action == "depreciation":
        return await AssetTrackingService.get_depreciation(company_id, asset_id=asset_id)
    if action == "disposals":
        return await AssetTrackingService.get_disposals(company_id)
    if action == "metrics":
        return await AssetTrackingService.get_metrics(company_id)
    raise invalid_action(action)


@router.post("")
async def act_asset_tracking(
    response: Response,
    action: Optional[str] = Query(None),
    payload: Optional[Dict[str, Any]] = Body(None),
    company_id: str = Depends(current_company),
) -> Any:
    name, body = resolve_action(action, payload)

    if name == "track-location":
        created(response)
        return await AssetTrackingService.track_location(company_id, parse_payload(AssetLocationCreate, body))
    if name == "update-location":
        data = parse_payload(LocationUpdate, body)
        return found(
            await AssetTrackingService.update_location(company_id, data.asset_id, data.location, data.status),
            "Asset location",
        )
    if name == "create-depreciation":
        created(response)
        return await AssetTrackingService.create_depreciation(company_id, parse_payload(DepreciationCreate, body))
    if name == "record-depreciation":
        data = parse_payload(DepreciationRef, body)
        return found(await AssetTrackingService.record_depreciation(company_id, data.schedule_id), "Depreciation schedule")
    if name == "dispose-asset":
        created(response)
        return await AssetTrackingService.dispose_asset(company_id, parse_payload(DisposalCreate, body))
    raise invalid_action(name)
