"""Pydantic schemas for performance evaluations, scored criteria and employee goals."""

from typing import Literal, Optional

from pydantic import Field

from .base import CamelModel, Record, code_field

EvaluationStatus = Literal["draft", "submitted", "approved", "completed"]
MetricType = Literal["productivity", "quality", "teamwork", "communication", "leadership"]
GoalStatus = Literal["pending", "in-progress", "completed", "missed"]


class EvaluationCreate(CamelModel):
    evaluation_code: str = code_field("EVAL")
    evaluation_name: str = ""
    employee_id: str
    evaluator_id: str
    evaluation_period: str


class PerformanceEvaluation(Record, EvaluationCreate):
    overall_score: float = 0
    status: EvaluationStatus = "draft"


class EvaluationCompletion(CamelModel):
    evaluation_id: str
    overall_score: Optional[float] = Field(None, ge=0, le=100, description="Defaults to the weighted metric score")


class MetricCreate(CamelModel):
    evaluation_id: str
    metric_code: str = code_field("MET")
    metric_name: str = Field(..., min_length=1)
    metric_type: MetricType
    score: float = Field(..., ge=0, le=100)
    weight: float = Field(1, gt=0)


class PerformanceMetric(Record, MetricCreate):
    pass


class PerformanceGoalCreate(CamelModel):
    goal_code: str = code_field("GOAL")
    goal_name: str = Field(..., min_length=1)
    employee_id: str
    goal_description: str = ""
    target_value: float = Field(..., gt=0)


class PerformanceGoal(Record, PerformanceGoalCreate):
    actual_value: float = 0
    status: GoalStatus = "pending"


class GoalProgress(CamelModel):
    goal_id: str
    actual_value: float = Field(..., ge=0)


class GoalRef(CamelModel):
    goal_id: str


class PerformanceMetrics(CamelModel):
    total_evaluations: int
    completed_evaluations: int
    average_score: float
    total_goals: int
    completed_goals: int
    goal_completion_rate: float
    performance_index: float
