"""
Service layer for goal tracking (objectives and key results).

A progress check-in sets the key result's current value; reaching the
target completes it.  An objective's progress is the mean completion
percentage of its key results, each capped at 100, and an objective
whose key results are all completed is completed too.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from erp_api.app.core.errors import not_found
from erp_api.app.core.store import InMemoryStore
from erp_api.app.schemas.goals import (
    GoalTrackingMetrics,
    KeyResult,
    KeyResultCreate,
    Objective,
    ObjectiveCreate,
    ProgressCreate,
    ProgressUpdate,
)
from erp_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)

GOAL_TRACKING_SCORE = 79.3

objectives: InMemoryStore[Objective] = InMemoryStore("goals.objectives")
key_results: InMemoryStore[KeyResult] = InMemoryStore("goals.key_results")
progress_updates: InMemoryStore[ProgressUpdate] = InMemoryStore("goals.progress")


def _refresh_objective(company_id: str, objective_id: str) -> None:
    objective = objectives.get_owned(objective_id, company_id)
    if objective is None:
        return
    results = key_results.filter(company_id=company_id, objective_id=objective_id)
    if not results:
        return
    objective.progress = sum(min(100.0, kr.current_value / kr.target_value * 100) for kr in results) / len(results)
    if all(kr.status == "completed" for kr in results):
        objective.status = "completed"


class GoalService:
    @classmethod
    async def create_objective(cls, company_id: str, data: ObjectiveCreate) -> Objective:
        objective = objectives.add(Objective(company_id=company_id, **data.model_dump()))
        logger.info("Objective created: %s (%s)", objective.objective_name, objective.id)
        await AuditService.record("create", "objective", objective)
        return objective

    @classmethod
    async def create_key_result(cls, company_id: str, data: KeyResultCreate) -> KeyResult:
        if objectives.get_owned(data.objective_id, company_id) is None:
            raise not_found("Objective not found")
        key_result = key_results.add(KeyResult(company_id=company_id, **data.model_dump()))
        _refresh_objective(company_id, key_result.objective_id)
        logger.info("Key result created: %s target %s %s", key_result.key_result_name, key_result.target_value, key_result.unit)
        return key_result

    @classmethod
    async def update_progress(cls, company_id: str, data: ProgressCreate) -> ProgressUpdate:
        key_result = key_results.get_owned(data.key_result_id, company_id)
        if key_result is None:
            raise not_found("Key result not found")
        update = progress_updates.add(ProgressUpdate(company_id=company_id, **data.model_dump()))
        key_result.current_value = update.progress_value
        if key_result.current_value >= key_result.target_value:
            key_result.status = "completed"
        elif key_result.status == "pending":
            key_result.status = "in-progress"
        _refresh_objective(company_id, key_result.objective_id)
        logger.info("Progress on key result %s: %s/%s", key_result.id, key_result.current_value, key_result.target_value)
        return update

    @classmethod
    async def complete_key_result(cls, company_id: str, key_result_id: str) -> Optional[KeyResult]:
        key_result = key_results.get_owned(key_result_id, company_id)
        if key_result is None:
            return None
        key_result.status = "completed"
        _refresh_objective(company_id, key_result.objective_id)
        logger.info("Key result completed: %s", key_result_id)
        await AuditService.record("complete", "key_result", key_result)
        return key_result

    @classmethod
    async def get_objectives(cls, company_id: str, status: Optional[str] = None) -> List[Objective]:
        return objectives.filter(company_id=company_id, status=status)

    @classmethod
    async def get_key_results(cls, company_id: str, objective_id: Optional[str] = None) -> List[KeyResult]:
        return key_results.filter(company_id=company_id, objective_id=objective_id)

    @classmethod
    async def get_progress(cls, company_id: str, key_result_id: Optional[str] = None) -> List[ProgressUpdate]:
        return progress_updates.filter(company_id=company_id, key_result_id=key_result_id)

    @classmethod
    async def get_metrics(cls, company_id: str) -> GoalTrackingMetrics:
        company_objectives = objectives.filter(company_id=company_id)
        results = key_results.filter(company_id=company_id)
        completed = sum(1 for kr in results if kr.status == "completed")
        return GoalTrackingMetrics(
            total_objectives=len(company_objectives),
            active_objectives=sum(1 for o in company_objectives if o.status == "active"),
            completed_objectives=sum(1 for o in company_objectives if o.status == "completed"),
            total_key_results=len(results),
            completed_key_results=completed,
            key_result_completion_rate=completed / len(results) * 100 if results else 0,
            goal_tracking_score=GOAL_TRACKING_SCORE,
        )
