"""Quality management endpoints for API v1."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from erp_api.app.api.v1.dispatch import created, current_company, found, parse_payload, resolve_action
from erp_api.app.core.errors import invalid_action
from erp_api.app.schemas.quality import InspectionCreate, QualityDefectCreate, QualityDefectRef, StandardCreate
from erp_api.app.services.quality_service import QualityService

router = APIRouter()


@router.get("")
async def read_quality(
    action: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
    result: Optional[str] = Query(None),
    company_id: str = Depends(current_company),
) -> Any:
    if action == "standards":
        return await QualityService.get_standards(company_id)
    if action == "inspections":
        return await QualityService.get_inspections(company_id, result=result)
    if action == "defects":
        return await QualityService.get_defects(company_id, status=status_filter)
    if action == "metrics":
        return await QualityService.get_metrics(company_id)
    raise invalid_action(action)


@router.post("")
async def act_quality(
    response: Response,
    action: Optional[str] = Query(None),
    payload: Optional[Dict[str, Any]] = Body(None),
    company_id: str = Depends(current_company),
) -> Any:
    name, body = resolve_action(action, payload)

    if name == "create-standard":
        created(response)
        return await QualityService.create_standard(company_id, parse_payload(StandardCreate, body))
    if name == "create-inspection":
        created(response)
        return await QualityService.create_inspection(company_id, parse_payload(InspectionCreate, body))
    if name == "create-defect":
        created(response)
        return await QualityService.create_defect(company_id, parse_payload(QualityDefectCreate, body))
    if name == "resolve-defect":
        data = parse_payload(QualityDefectRef, body)
        return found(await QualityService.resolve_defect(company_id, data.defect_id), "Defect")
    raise invalid_action(name)
