"""Performance evaluation endpoints for API v1."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from erp_api.app.api.v1.dispatch import created, current_company, found, parse_payload, resolve_action
from erp_api.app.core.errors import invalid_action
from erp_api.app.schemas.performance import (
    EvaluationCompletion,
    EvaluationCreate,
    GoalProgress,
    GoalRef,
    MetricCreate,
    PerformanceGoalCreate,
)
from erp_api.app.services.performance_service import PerformanceService

router = APIRouter()


@router.get("")
async def read_performance(
    action: Optional[str] = Query(None),
    employee_id: Optional[str] = Query(None, alias="employeeId"),
    evaluation_id: Optional[str] = Query(None, alias="evaluationId"),
    company_id: str = Depends(current_company),
) -> Any:
    if action == "evaluations":
        return await PerformanceService.get_evaluations(company_id, employee_id=employee_id)
    if action == "evaluation-metrics":
        return await PerformanceService.get_evaluation_metrics(company_id, evaluation_id=evaluation_id)
    if action == "goals":
        return await PerformanceService.get_goals(company_id, employee_id=employee_id)
    if action == "metrics":
        return await PerformanceService.get_metrics(company_id)
    raise invalid_action(action)


@router.post("")
async def act_performance(
    response: Response,
    action: Optional[str] = Query(None),
    payload: Optional[Dict[str, Any]] = Body(None),
    company_id: str = Depends(current_company),
) -> Any:
    name, body = resolve_action(action, payload)

    if name == "create-evaluation":
        created(response)
        return await PerformanceService.create_evaluation(company_id, parse_payload(EvaluationCreate, body))
    if name == "add-metric":
        created(response)
        return await PerformanceService.add_metric(company_id, parse_payload(MetricCreate, body))
    if name == "complete-evaluation":
        data = parse_payload(EvaluationCompletion, body)
        return found(
            await PerformanceService.complete_evaluation(company_id, data.evaluation_id, data.overall_score),
            "Evaluation",
        )
    if name == "create-goal":
        created(response)
        return await PerformanceService.create_goal(company_id, parse_payload(PerformanceGoalCreate, body))
    if name == "update-goal-progress":
        data = parse_payload(GoalProgress, body)
        return found(await PerformanceService.update_goal_progress(company_id, data.goal_id, data.actual_value), "Goal")
    if name == "complete-goal":
        data = parse_payload(GoalRef, body)
        return found(await PerformanceService.complete_goal(company_id, data.goal_id), "Goal")
    raise invalid_action(name)
