"""Test automation endpoints for API v1."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from erp_api.app.api.v1.dispatch import created, current_company, parse_payload, resolve_action
from erp_api.app.core.errors import invalid_action
from erp_api.app.schemas.qa import ReportCreate, RunCreate, ScriptCreate
from erp_api.app.services.test_automation_service import REPORT_HISTORY, RUN_HISTORY, TestAutomationService

router = APIRouter()


@router.get("")
async def read_automation(
    action: Optional[str] = Query(None),
    framework: Optional[str] = Query(None),
    script_id: Optional[str] = Query(None, alias="scriptId"),
    limit: Optional[int] = Query(None, ge=1, le=100),
    company_id: str = Depends(current_company),
) -> Any:
    if action == "scripts":
        return await TestAutomationService.get_scripts(company_id, framework=framework)
    if action == "runs":
        return await TestAutomationService.get_runs(company_id, script_id=script_id, limit=limit or RUN_HISTORY)
    if action == "reports":
        return await TestAutomationService.get_reports(company_id, limit=limit or REPORT_HISTORY)
    if action == "metrics":
        return await TestAutomationService.get_metrics(company_id)
    raise invalid_action(action)


@router.post("")
async def act_automation(
    response: Response,
    action: Optional[str] = Query(None),
    payload: Optional[Dict[str, Any]] = Body(None),
    company_id: str = Depends(current_company),
) -> Any:
    name, body = resolve_action(action, payload)

    if name == "create-script":
        created(response)
        return await TestAutomationService.create_script(company_id, parse_payload(ScriptCreate, body))
    if name == "run-script":
        created(response)
        return await TestAutomationService.run_script(company_id, parse_payload(RunCreate, body))
    if name == "generate-report":
        created(response)
        return await TestAutomationService.generate_report(company_id, parse_payload(ReportCreate, body))
    raise invalid_action(name)
