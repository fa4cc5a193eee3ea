"""Resource planning endpoints for API v1."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from erp_api.app.api.v1.dispatch import created, current_company, found, parse_payload, resolve_action
from erp_api.app.core.errors import invalid_action
from erp_api.app.schemas.resource_planning import (
    AllocationCreate,
    AllocationStatusUpdate,
    ResourceCreate,
    ScheduleCreate,
)
from erp_api.app.services.resource_planning_service import ResourcePlanningService

router = APIRouter()


@router.get("")
async def read_resources(
    action: Optional[str] = Query(None),
    resource_type: Optional[str] = Query(None, alias="resourceType"),
    project_id: Optional[str] = Query(None, alias="projectId"),
    resource_id: Optional[str] = Query(None, alias="resourceId"),
    company_id: str = Depends(current_company),
) -> Any:
    if action == "resources":
        return await ResourcePlanningService.get_resources(company_id, resource_type=resource_type)
    if action == "allocations":
        return await ResourcePlanningService.get_allocations(company_id, project_id=project_id)
    if action == "schedules":
        return await ResourcePlanningService.get_schedules(company_id, resource_id=resource_id)
    if action == "metrics":
        return await ResourcePlanningService.get_metrics(company_id)
    raise invalid_action(action)


@router.post("")
async def act_resources(
    response: Response,
    action: Optional[str] = Query(None),
    payload: Optional[Dict[str, Any]] = Body(None),
    company_id: str = Depends(current_company),
) -> Any:
    name, body = resolve_action(action, payload)

    if name == "create-resource":
        created(response)
        return await ResourcePlanningService.create_resource(company_id, parse_payload(ResourceCreate, body))
    if name == "allocate-resource":
        created(response)
        return await ResourcePlanningService.allocate_resource(company_id, parse_payload(AllocationCreate, body))
    if name == "update-allocation-status":
        data = parse_payload(AllocationStatusUpdate, body)
        return found(
            await ResourcePlanningService.update_allocation_status(company_id, data.allocation_id, data.status),
            "Allocation",
        )
    if name == "create-schedule":
        created(response)
        return await ResourcePlanningService.create_schedule(company_id, parse_payload(ScheduleCreate, body))
    raise invalid_action(name)
