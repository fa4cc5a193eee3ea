"""Insurance management endpoints for API v1."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from erp_api.app.api.v1.dispatch import created, current_company, found, parse_payload, resolve_action
from erp_api.app.core.errors import invalid_action
from erp_api.app.schemas.insurance import ClaimApproval, ClaimCreate, ClaimRef, PolicyCreate
from erp_api.app.services.insurance_service import InsuranceService

router = APIRouter()


@router.get("")
async def read_insurance(
    action: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
    policy_id: Optional[str] = Query(None, alias="policyId"),
    company_id: str = Depends(current_company),
) -> Any:
    if action == "policies":
        return await InsuranceService.get_policies(company_id, status=status_filter)
    if action == "claims":
        return await InsuranceService.get_claims(company_id, policy_id=policy_id, status=status_filter)
    if action == "metrics":
        return await InsuranceService.get_metrics(company_id)
    raise invalid_action(action)


@router.post("")
async def act_insurance(
    response: Response,
    action: Optional[str] = Query(None),
    payload: Optional[Dict[str, Any]] = Body(None),
    company_id: str = Depends(current_company),
) -> Any:
    name, body = resolve_action(action, payload)

    if name == "create-policy":
        created(response)
        return await InsuranceService.create_policy(company_id, parse_payload(PolicyCreate, body))
    if name == "file-claim":
        created(response)
        return await InsuranceService.file_claim(company_id, parse_payload(ClaimCreate, body))
    if name == "approve-claim":
        data = parse_payload(ClaimApproval, body)
        return found(await InsuranceService.approve_claim(company_id, data.claim_id, data.approved_amount), "Claim")
    if name == "reject-claim":
        data = parse_payload(ClaimRef, body)
        return found(await InsuranceService.reject_claim(company_id, data.claim_id), "Claim")
    raise invalid_action(name)
