"""Risk management endpoints for API v1."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from erp_api.app.api.v1.dispatch import created, current_company, found, parse_payload, resolve_action
from erp_api.app.core.errors import invalid_action
from erp_api.app.schemas.risks import AssessmentCreate, MitigationCreate, MitigationRef, RiskCreate, RiskStatusUpdate
from erp_api.app.services.risk_service import RiskService

router = APIRouter()


@router.get("")
async def read_risks(
    action: Optional[str] = Query(None),
    risk_type: Optional[str] = Query(None, alias="riskType"),
    risk_id: Optional[str] = Query(None, alias="riskId"),
    company_id: str = Depends(current_company),
) -> Any:
    if action == "risks":
        return await RiskService.get_risks(company_id, risk_type=risk_type)
    if action == "assessments":
        return await RiskService.get_assessments(company_id, risk_id=risk_id)
    if action == "mitigations":
        return await RiskService.get_mitigations(company_id, risk_id=risk_id)
    if action == "metrics":
        return await RiskService.get_metrics(company_id)
    raise invalid_action(action)


@router.post("")
async def act_risks(
    response: Response,
    action: Optional[str] = Query(None),
    payload: Optional[Dict[str, Any]] = Body(None),
    company_id: str = Depends(current_company),
) -> Any:
    name, body = resolve_action(action, payload)

    if name == "create-risk":
        created(response)
        return await RiskService.create_risk(company_id, parse_payload(RiskCreate, body))
    if name == "update-risk-status":
        data = parse_payload(RiskStatusUpdate, body)
        return found(await RiskService.update_risk_status(company_id, data.risk_id, data.status), "Risk")
    if name == "assess-risk":
        created(response)
        return await RiskService.assess_risk(company_id, parse_payload(AssessmentCreate, body))
    if name == "create-mitigation":
        created(response)
        return await RiskService.create_mitigation(company_id, parse_payload(MitigationCreate, body))
    if name == "complete-mitigation":
        data = parse_payload(MitigationRef, body)
        return found(await RiskService.complete_mitigation(company_id, data.mitigation_id), "Mitigation")
    raise invalid_action(name)
