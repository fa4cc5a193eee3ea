"""Learning resources endpoints for API v1."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from erp_api.app.api.v1.dispatch import created, current_company, found, parse_payload, resolve_action
from erp_api.app.core.errors import invalid_action
from erp_api.app.schemas.learning import (
    EnrollmentCreate,
    LearningPathCreate,
    LearningProgress,
    LearningRef,
    LearningResourceCreate,
)
from erp_api.app.services.learning_service import LearningService

router = APIRouter()


@router.get("")
async def read_learning(
    action: Optional[str] = Query(None),
    resource_type: Optional[str] = Query(None, alias="resourceType"),
    user_id: Optional[str] = Query(None, alias="userId"),
    company_id: str = Depends(current_company),
) -> Any:
    if action == "resources":
        return await LearningService.get_resources(company_id, resource_type=resource_type)
    if action == "paths":
        return await LearningService.get_paths(company_id)
    if action == "enrollments":
        return await LearningService.get_enrollments(company_id, user_id=user_id)
    if action == "metrics":
        return await LearningService.get_metrics(company_id)
    raise invalid_action(action)


@router.post("")
async def act_learning(
    response: Response,
    action: Optional[str] = Query(None),
    payload: Optional[Dict[str, Any]] = Body(None),
    company_id: str = Depends(current_company),
) -> Any:
    name, body = resolve_action(action, payload)

    if name == "create-resource":
        created(response)
        return await LearningService.create_resource(company_id, parse_payload(LearningResourceCreate, body))
    if name == "create-path":
        created(response)
        return await LearningService.create_path(company_id, parse_payload(LearningPathCreate, body))
    if name == "enroll-user":
        created(response)
        return await LearningService.enroll_user(company_id, parse_payload(EnrollmentCreate, body))
    if name == "update-progress":
        data = parse_payload(LearningProgress, body)
        return found(await LearningService.update_progress(company_id, data.learning_id, data.progress), "Enrollment")
    if name == "complete-learning":
        data = parse_payload(LearningRef, body)
        return found(await LearningService.complete_learning(company_id, data.learning_id), "Enrollment")
    raise invalid_action(name)
