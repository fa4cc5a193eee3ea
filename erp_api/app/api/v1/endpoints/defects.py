"""Defect tracking endpoints for API v1."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from erp_api.app.api.v1.dispatch import created, current_company, found, parse_payload, resolve_action
from erp_api.app.core.errors import invalid_action
from erp_api.app.schemas.defects import DefectActionCreate, DefectActionRef, DefectReportCreate, DefectStatusUpdate
from erp_api.app.services.defect_service import DefectService

router = APIRouter()


@router.get("")
async def read_defects(
    action: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
    report_id: Optional[str] = Query(None, alias="reportId"),
    company_id: str = Depends(current_company),
) -> Any:
    if action == "reports":
        return await DefectService.get_reports(company_id, status=status_filter)
    if action == "actions":
        return await DefectService.get_actions(company_id, report_id=report_id)
    if action == "metrics":
        return await DefectService.get_metrics(company_id)
    raise invalid_action(action)


@router.post("")
async def act_defects(
    response: Response,
    action: Optional[str] = Query(None),
    payload: Optional[Dict[str, Any]] = Body(None),
    company_id: str = Depends(current_company),
) -> Any:
    name, body = resolve_action(action, payload)

    if name == "create-report":
        created(response)
        return await DefectService.create_report(company_id, parse_payload(DefectReportCreate, body))
    if name == "create-action":
        created(response)
        return await DefectService.create_action(company_id, parse_payload(DefectActionCreate, body))
    if name == "update-status":
        data = parse_payload(DefectStatusUpdate, body)
        return found(await DefectService.update_status(company_id, data.report_id, data.status), "Defect report")
    if name == "complete-action":
        data = parse_payload(DefectActionRef, body)
        return found(await DefectService.complete_action(company_id, data.action_id), "Defect action")
    raise invalid_action(name)
