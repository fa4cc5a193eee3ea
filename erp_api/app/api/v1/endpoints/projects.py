"""Project management endpoints for API v1."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from erp_api.app.api.v1.dispatch import created, current_company, found, parse_payload, resolve_action
from erp_api.app.core.errors import invalid_action
from erp_api.app.schemas.projects import (
    MilestoneCreate,
    MilestoneStatusUpdate,
    ProjectCreate,
    ProjectStatusUpdate,
    ProjectTaskCreate,
    TaskProgress,
)
from erp_api.app.services.project_service import ProjectService

router = APIRouter()


@router.get("")
async def read_projects(
    action: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
    project_id: Optional[str] = Query(None, alias="projectId"),
    company_id: str = Depends(current_company),
) -> Any:
    if action == "projects":
        return await ProjectService.get_projects(company_id, status=status_filter)
    if action == "tasks":
        return await ProjectService.get_tasks(company_id, project_id=project_id)
    if action == "milestones":
        return await ProjectService.get_milestones(company_id, project_id=project_id)
    if action == "metrics":
        return await ProjectService.get_metrics(company_id)
    raise invalid_action(action)


@router.post("")
async def act_projects(
    response: Response,
    action: Optional[str] = Query(None),
    payload: Optional[Dict[str, Any]] = Body(None),
    company_id: str = Depends(current_company),
) -> Any:
    name, body = resolve_action(action, payload)

    if name == "create-project":
        created(response)
        return await ProjectService.create_project(company_id, parse_payload(ProjectCreate, body))
    if name == "update-project-status":
        data = parse_payload(ProjectStatusUpdate, body)
        return found(await ProjectService.update_project_status(company_id, data.project_id, data.status), "Project")
    if name == "create-task":
        created(response)
        return await ProjectService.create_task(company_id, parse_payload(ProjectTaskCreate, body))
    if name == "update-task-progress":
        data = parse_payload(TaskProgress, body)
        return found(await ProjectService.update_task_progress(company_id, data.task_id, data.completion_percentage), "Task")
    if name == "create-milestone":
        created(response)
        return await ProjectService.create_milestone(company_id, parse_payload(MilestoneCreate, body))
    if name == "update-milestone-status":
        data = parse_payload(MilestoneStatusUpdate, body)
        return found(await ProjectService.update_milestone_status(company_id, data.milestone_id, data.status), "Milestone")
    raise invalid_action(name)
