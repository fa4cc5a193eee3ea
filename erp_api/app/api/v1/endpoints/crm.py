"""
CRM endpoints for API v1.

Lists customers, leads and interactions and returns CRM metrics.
``POST`` actions manage customers, record interactions and move leads
through their lifecycle up to conversion into a customer.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from erp_api.app.api.v1.dispatch import created, current_company, found, parse_payload, resolve_action
from erp_api.app.core.errors import invalid_action, not_found
from erp_api.app.schemas.crm import (
    CustomerCreate,
    CustomerRef,
    CustomerUpdate,
    InteractionCreate,
    LeadCreate,
    LeadRef,
    LeadStatusUpdate,
)
from erp_api.app.services.crm_service import CRMService

router = APIRouter()


@router.get("")
async def read_crm(
    action: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
    customer_id: Optional[str] = Query(None, alias="customerId"),
    company_id: str = Depends(current_company),
) -> Any:
    if action == "customers":
        return await CRMService.get_customers(company_id, status=status_filter)
    if action == "customer":
        return found(await CRMService.get_customer(company_id, customer_id or ""), "Customer")
    if action == "leads":
        return await CRMService.get_leads(company_id, status=status_filter)
    if action == "interactions":
        return await CRMService.get_interactions(company_id, customer_id=customer_id)
    if action == "metrics":
        return await CRMService.get_metrics(company_id)
    raise invalid_action(action)


@router.post("")
async def act_crm(
    response: Response,
    action: Optional[str] = Query(None),
    payload: Optional[Dict[str, Any]] = Body(None),
    company_id: str = Depends(current_company),
) -> Any:
    name, body = resolve_action(action, payload)

    if name == "create-customer":
        created(response)
        return await CRMService.create_customer(company_id, parse_payload(CustomerCreate, body))
    if name == "update-customer":
        return found(await CRMService.update_customer(company_id, parse_payload(CustomerUpdate, body)), "Customer")
    if name == "delete-customer":
        data = parse_payload(CustomerRef, body)
        if not await CRMService.delete_customer(company_id, data.customer_id):
            raise not_found("Customer not found")
        return {"success": True}
    if name == "record-interaction":
        created(response)
        return await CRMService.record_interaction(company_id, parse_payload(InteractionCreate, body))
    if name == "create-lead":
        created(response)
        return await CRMService.create_lead(company_id, parse_payload(LeadCreate, body))
    if name == "update-lead-status":
        data = parse_payload(LeadStatusUpdate, body)
        return found(
            await CRMService.update_lead_status(company_id, data.lead_id, data.status, data.probability),
            "Lead",
        )
    if name == "convert-lead":
        data = parse_payload(LeadRef, body)
        customer = found(await CRMService.convert_lead_to_customer(company_id, data.lead_id), "Lead")
        created(response)
        return customer
    raise invalid_action(name)
