"""Compliance management endpoints for API v1."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from erp_api.app.api.v1.dispatch import created, current_company, found, parse_payload, resolve_action
from erp_api.app.core.errors import invalid_action
from erp_api.app.schemas.compliance import (
    AuditCompletion,
    ComplianceAuditCreate,
    IssueCreate,
    IssueRef,
    PolicyCreate,
    PolicyStatusUpdate,
)
from erp_api.app.services.compliance_service import ComplianceService

router = APIRouter()


@router.get("")
async def read_compliance(
    action: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
    severity: Optional[str] = Query(None),
    company_id: str = Depends(current_company),
) -> Any:
    if action == "policies":
        return await ComplianceService.get_policies(company_id, status=status_filter)
    if action == "audits":
        return await ComplianceService.get_audits(company_id, status=status_filter)
    if action == "issues":
        return await ComplianceService.get_issues(company_id, severity=severity)
    if action == "metrics":
        return await ComplianceService.get_metrics(company_id)
    raise invalid_action(action)


@router.post("")
async def act_compliance(
    response: Response,
    action: Optional[str] = Query(None),
    payload: Optional[Dict[str, Any]] = Body(None),
    company_id: str = Depends(current_company),
) -> Any:
    name, body = resolve_action(action, payload)

    if name == "create-policy":
        created(response)
        return await ComplianceService.create_policy(company_id, parse_payload(PolicyCreate, body))
    if name == "update-policy-status":
        data = parse_payload(PolicyStatusUpdate, body)
        return found(await ComplianceService.update_policy_status(company_id, data.policy_id, data.status), "Policy")
    if name == "create-audit":
        created(response)
        return await ComplianceService.create_audit(company_id, parse_payload(ComplianceAuditCreate, body))
    if name == "complete-audit":
        data = parse_payload(AuditCompletion, body)
        return found(await ComplianceService.complete_audit(company_id, data.audit_id, data.findings), "Audit")
    if name == "create-issue":
        created(response)
        return await ComplianceService.create_issue(company_id, parse_payload(IssueCreate, body))
    if name == "resolve-issue":
        data = parse_payload(IssueRef, body)
        return found(await ComplianceService.resolve_issue(company_id, data.issue_id), "Issue")
    raise invalid_action(name)
