"""Contract management endpoints for API v1."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from erp_api.app.api.v1.dispatch import created, current_company, found, parse_payload, resolve_action
from erp_api.app.core.errors import invalid_action
from erp_api.app.core.security import get_current_user
from erp_api.app.schemas.contracts import ClauseCreate, ContractCreate, ContractRef, RenewalCreate, RenewalDecision
from erp_api.app.services.contract_service import ContractService

router = APIRouter()


@router.get("")
async def read_contracts(
    action: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
    contract_id: Optional[str] = Query(None, alias="contractId"),
    company_id: str = Depends(current_company),
) -> Any:
    if action == "contracts":
        return await ContractService.get_contracts(company_id, status=status_filter)
    if action == "clauses":
        return await ContractService.get_clauses(company_id, contract_id=contract_id)
    if action == "renewals":
        return await ContractService.get_renewals(company_id, status=status_filter)
    if action == "metrics":
        return await ContractService.get_metrics(company_id)
    raise invalid_action(action)


@router.post("")
async def act_contracts(
    response: Response,
    action: Optional[str] = Query(None),
    payload: Optional[Dict[str, Any]] = Body(None),
    current_user: Dict[str, Any] = Depends(get_current_user),
) -> Any:
    name, body = resolve_action(action, payload)
    company_id = current_user["company_id"]

    if name == "create-contract":
        created(response)
        return await ContractService.create_contract(company_id, parse_payload(ContractCreate, body))
    if name == "activate-contract":
        data = parse_payload(ContractRef, body)
        return found(await ContractService.activate_contract(company_id, data.contract_id), "Contract")
    if name == "terminate-contract":
        data = parse_payload(ContractRef, body)
        return found(await ContractService.terminate_contract(company_id, data.contract_id), "Contract")
    if name == "add-clause":
        created(response)
        return await ContractService.add_clause(company_id, parse_payload(ClauseCreate, body))
    if name == "create-renewal":
        created(response)
        return await ContractService.create_renewal(company_id, parse_payload(RenewalCreate, body))
    if name == "approve-renewal":
        data = parse_payload(RenewalDecision, body)
        approver = data.approved_by or current_user.get("user_id")
        return found(await ContractService.approve_renewal(company_id, data.renewal_id, approver), "Renewal")
    raise invalid_action(name)
