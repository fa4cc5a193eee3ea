"""
Service layer for performance evaluation.

Completing an evaluation fixes its overall score: the score given, or
else the weighted average of the scored criteria
``sum(score * weight) / sum(weight)``.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from erp_api.app.core.errors import invalid_state, not_found
from erp_api.app.core.store import InMemoryStore
from erp_api.app.schemas.performance import (
    EvaluationCreate,
    MetricCreate,
    PerformanceEvaluation,
    PerformanceGoal,
    PerformanceGoalCreate,
    PerformanceMetric,
    PerformanceMetrics,
)
from erp_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)

PERFORMANCE_INDEX = 82.5

evaluations: InMemoryStore[PerformanceEvaluation] = InMemoryStore("performance.evaluations")
criteria: InMemoryStore[PerformanceMetric] = InMemoryStore("performance.metrics")
goals: InMemoryStore[PerformanceGoal] = InMemoryStore("performance.goals")


class PerformanceService:
    @classmethod
    async def create_evaluation(cls, company_id: str, data: EvaluationCreate) -> PerformanceEvaluation:
        evaluation = evaluations.add(PerformanceEvaluation(company_id=company_id, **data.model_dump()))
        logger.info("Evaluation created for employee %s (%s)", evaluation.employee_id, evaluation.evaluation_period)
        await AuditService.record("create", "evaluation", evaluation)
        return evaluation

    @classmethod
    async def add_metric(cls, company_id: str, data: MetricCreate) -> PerformanceMetric:
        evaluation = evaluations.get_owned(data.evaluation_id, company_id)
        if evaluation is None:
            raise not_found("Evaluation not found")
        if evaluation.status == "completed":
            raise invalid_state("Evaluation is already completed")
        metric = criteria.add(PerformanceMetric(company_id=company_id, **data.model_dump()))
        logger.info("Metric %s scored %.1f on evaluation %s", metric.metric_name, metric.score, evaluation.id)
        return metric

    @classmethod
    async def complete_evaluation(
        cls, company_id: str, evaluation_id: str, overall_score: Optional[float] = None
    ) -> Optional[PerformanceEvaluation]:
        evaluation = evaluations.get_owned(evaluation_id, company_id)
        if evaluation is None:
            return None
        if overall_score is None:
            scored = criteria.filter(company_id=company_id, evaluation_id=evaluation_id)
            total_weight = sum(m.weight for m in scored)
            overall_score = sum(m.score * m.weight for m in scored) / total_weight if total_weight else 0
        evaluation.overall_score = overall_score
        evaluation.status = "completed"
        logger.info("Evaluation completed: %s score %.1f", evaluation_id, overall_score)
        await AuditService.record("complete", "evaluation", evaluation, score=overall_score)
        return evaluation

    @classmethod
    async def create_goal(cls, company_id: str, data: PerformanceGoalCreate) -> PerformanceGoal:
        goal = goals.add(PerformanceGoal(company_id=company_id, **data.model_dump()))
        logger.info("Performance goal created for employee %s: %s", goal.employee_id, goal.goal_name)
        return goal

    @classmethod
    async def update_goal_progress(cls, company_id: str, goal_id: str, actual_value: float) -> Optional[PerformanceGoal]:
        goal = goals.get_owned(goal_id, company_id)
        if goal is None:
            return None
        goal.actual_value = actual_value
        goal.status = "completed" if actual_value >= goal.target_value else "in-progress"
        return goal

    @classmethod
    async def complete_goal(cls, company_id: str, goal_id: str) -> Optional[PerformanceGoal]:
        goal = goals.get_owned(goal_id, company_id)
        if goal is None:
            return None
        goal.status = "completed"
        logger.info("Performance goal completed: %s", goal_id)
        return goal

    @classmethod
    async def get_evaluations(cls, company_id: str, employee_id: Optional[str] = None) -> List[PerformanceEvaluation]:
        return evaluations.filter(company_id=company_id, employee_id=employee_id)

    @classmethod
    async def get_evaluation_metrics(cls, company_id: str, evaluation_id: Optional[str] = None) -> List[PerformanceMetric]:
        return criteria.filter(company_id=company_id, evaluation_id=evaluation_id)

    @classmethod
    async def get_goals(cls, company_id: str, employee_id: Optional[str] = None) -> List[PerformanceGoal]:
        return goals.filter(company_id=company_id, employee_id=employee_id)

    @classmethod
    async def get_metrics(cls, company_id: str) -> PerformanceMetrics:
        company_evaluations = evaluations.filter(company_id=company_id)
        company_goals = goals.filter(company_id=company_id)
        completed_goals = sum(1 for g in company_goals if g.status == "completed")
        return PerformanceMetrics(
            total_evaluations=len(company_evaluations),
            completed_evaluations=sum(1 for e in company_evaluations if e.status == "completed"),
            average_score=(
                sum(e.overall_score for e in company_evaluations) / len(company_evaluations) if company_evaluations else 0
            ),
            total_goals=len(company_goals),
            completed_goals=completed_goals,
            goal_completion_rate=completed_goals / len(company_goals) * 100 if company_goals else 0,
            performance_index=PERFORMANCE_INDEX,
        )
