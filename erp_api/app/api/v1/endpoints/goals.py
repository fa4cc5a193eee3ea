"""Goal tracking endpoints for API v1."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from erp_api.app.api.v1.dispatch import created, current_company, found, parse_payload, resolve_action
from erp_api.app.core.errors import invalid_action
from erp_api.app.schemas.goals import KeyResultCreate, KeyResultRef, ObjectiveCreate, ProgressCreate
from erp_api.app.services.goal_service import GoalService

router = APIRouter()


@router.get("")
async def read_goals(
    action: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
    objective_id: Optional[str] = Query(None, alias="objectiveId"),
    key_result_id: Optional[str] = Query(None, alias="keyResultId"),
    company_id: str = Depends(current_company),
) -> Any:
    if action == "objectives":
        return await GoalService.get_objectives(company_id, status=status_filter)
    if action == "key-results":
        return await GoalService.get_key_results(company_id, objective_id=objective_id)
    if action == "progress":
        return await GoalService.get_progress(company_id, key_result_id=key_result_id)
    if action == "metrics":
        return await GoalService.get_metrics(company_id)
    raise invalid_action(action)


@router.post("")
async def act_goals(
    response: Response,
    action: Optional[str] = Query(None),
    payload: Optional[Dict[str, Any]] = Body(None),
    company_id: str = Depends(current_company),
) -> Any:
    name, body = resolve_action(action, payload)

    if name == "create-objective":
        created(response)
        return await GoalService.create_objective(company_id, parse_payload(ObjectiveCreate, body))
    if name == "create-key-result":
        created(response)
        return await GoalService.create_key_result(company_id, parse_payload(KeyResultCreate, body))
    if name == "update-progress":
        created(response)
        return await GoalService.update_progress(company_id, parse_payload(ProgressCreate, body))
    if name == "complete-key-result":
        data = parse_payload(KeyResultRef, body)
        return found(await GoalService.complete_key_result(company_id, data.key_result_id), "Key result")
    raise invalid_action(name)
