"""
Energy management endpoints for API v1.

``consumptions`` may be narrowed with ``energyType``; ``sustainability``
lists the recorded sustainability readings.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from erp_api.app.api.v1.dispatch import created, current_company, found, parse_payload, resolve_action
from erp_api.app.core.errors import invalid_action
from erp_api.app.schemas.energy import ConsumptionCreate, SustainabilityMetricCreate, TargetCreate, TargetStatusUpdate
from erp_api.app.services.energy_service import EnergyService

router = APIRouter()


@router.get("")
async def read_energy(
    action: Optional[str] = Query(None),
    energy_type: Optional[str] = Query(None, alias="energyType"),
    facility_id: Optional[str] = Query(None, alias="facilityId"),
    company_id: str = Depends(current_company),
) -> Any:
    if action == "consumptions":
        return await EnergyService.get_consumptions(company_id, energy_type=energy_type, facility_id=facility_id)
    if action == "targets":
        return await EnergyService.get_targets(company_id)
    if action == "sustainability":
        return await EnergyService.get_sustainability_metrics(company_id)
    if action == "metrics":
        return await EnergyService.get_metrics(company_id)
    raise invalid_action(action)


@router.post("")
async def act_energy(
    response: Response,
    action: Optional[str] = Query(None),
    payload: Optional[Dict[str, Any]] = Body(None),
    company_id: str = Depends(current_company),
) -> Any:
    name, body = resolve_action(action, payload)

    if name == "record-consumption":
        created(response)
        return await EnergyService.record_consumption(company_id, parse_payload(ConsumptionCreate, body))
    if name == "set-target":
        created(response)
        return await EnergyService.set_target(company_id, parse_payload(TargetCreate, body))
    if name == "update-target-status":
        data = parse_payload(TargetStatusUpdate, body)
        return found(await EnergyService.update_target_status(company_id, data.target_id, data.status), "Target")
    if name == "record-metric":
        created(response)
        return await EnergyService.record_metric(company_id, parse_payload(SustainabilityMetricCreate, body))
    raise invalid_action(name)
