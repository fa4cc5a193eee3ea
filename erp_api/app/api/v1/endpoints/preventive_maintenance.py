"""Preventive maintenance endpoints for API v1."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from erp_api.app.api.v1.dispatch import created, current_company, found, parse_payload, resolve_action
from erp_api.app.core.errors import invalid_action
from erp_api.app.schemas.maintenance import (
    MaintenancePlanCreate,
    MaintenanceTaskCreate,
    MaintenanceTaskRef,
    PlanScheduleCreate,
    PlanScheduleRef,
)
from erp_api.app.services.preventive_maintenance_service import PreventiveMaintenanceService

router = APIRouter()


@router.get("")
async def read_preventive_maintenance(
    action: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
    plan_id: Optional[str] = Query(None, alias="planId"),
    schedule_id: Optional[str] = Query(None, alias="scheduleId"),
    company_id: str = Depends(current_company),
) -> Any:
    if action == "plans":
        return await PreventiveMaintenanceService.get_plans(company_id, status=status_filter)
    if action == "schedules":
        return await PreventiveMaintenanceService.get_schedules(company_id, plan_id=plan_id)
    if action == "tasks":
        return await PreventiveMaintenanceService.get_tasks(company_id, schedule_id=schedule_id)
    if action == "metrics":
        return await PreventiveMaintenanceService.get_metrics(company_id)
    raise invalid_action(action)


@router.post("")
async def act_preventive_maintenance(
    response: Response,
    action: Optional[str] = Query(None),
    payload: Optional[Dict[str, Any]] = Body(None),
    company_id: str = Depends(current_company),
) -> Any:
    name, body = resolve_action(action, payload)

    if name == "create-plan":
        created(response)
        return await PreventiveMaintenanceService.create_plan(company_id, parse_payload(MaintenancePlanCreate, body))
    if name == "create-schedule":
        created(response)
        return await PreventiveMaintenanceService.create_schedule(company_id, parse_payload(PlanScheduleCreate, body))
    if name == "create-task":
        created(response)
        return await PreventiveMaintenanceService.create_task(company_id, parse_payload(MaintenanceTaskCreate, body))
    if name == "complete-task":
        data = parse_payload(MaintenanceTaskRef, body)
        return found(await PreventiveMaintenanceService.complete_task(company_id, data.task_id), "Task")
    if name == "complete-schedule":
        data = parse_payload(PlanScheduleRef, body)
        return found(await PreventiveMaintenanceService.complete_schedule(company_id, data.schedule_id), "Schedule")
    raise invalid_action(name)
