"""Sustainability endpoints for API v1."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from erp_api.app.api.v1.dispatch import created, current_company, found, parse_payload, resolve_action
from erp_api.app.core.errors import invalid_action
from erp_api.app.schemas.sustainability import InitiativeCompletion, InitiativeCreate, OffsetCreate, WasteCreate
from erp_api.app.services.sustainability_service import SustainabilityService

router = APIRouter()


@router.get("")
async def read_sustainability(
    action: Optional[str] = Query(None),
    waste_type: Optional[str] = Query(None, alias="wasteType"),
    company_id: str = Depends(current_company),
) -> Any:
    if action == "waste":
        return await SustainabilityService.get_waste_records(company_id, waste_type=waste_type)
    if action == "initiatives":
        return await SustainabilityService.get_initiatives(company_id)
    if action == "offsets":
        return await SustainabilityService.get_offsets(company_id)
    if action == "metrics":
        return await SustainabilityService.get_metrics(company_id)
    raise invalid_action(action)


@router.post("")
async def act_sustainability(
    response: Response,
    action: Optional[str] = Query(None),
    payload: Optional[Dict[str, Any]] = Body(None),
    company_id: str = Depends(current_company),
) -> Any:
    name, body = resolve_action(action, payload)

    if name == "record-waste":
        created(response)
        return await SustainabilityService.record_waste(company_id, parse_payload(WasteCreate, body))
    if name == "create-initiative":
        created(response)
        return await SustainabilityService.create_initiative(company_id, parse_payload(InitiativeCreate, body))
    if name == "start-initiative":
        data = parse_payload(InitiativeCompletion, body)
        return found(
            await SustainabilityService.update_initiative_status(company_id, data.initiative_id, "in-progress"),
            "Initiative",
        )
    if name == "complete-initiative":
        data = parse_payload(InitiativeCompletion, body)
        return found(
            await SustainabilityService.update_initiative_status(
                company_id, data.initiative_id, "completed", data.actual_savings
            ),
            "Initiative",
        )
    if name == "record-offset":
        created(response)
        return await SustainabilityService.record_offset(company_id, parse_payload(OffsetCreate, body))
    raise invalid_action(name)
