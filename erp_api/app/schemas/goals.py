"""Pydantic schemas for objectives, key results and progress check-ins."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from .base import CamelModel, Record, code_field

Priority = Literal["high", "medium", "low"]
ObjectiveStatus = Literal["active", "inactive", "completed"]
KeyResultStatus = Literal["pending", "in-progress", "completed", "missed"]


class ObjectiveCreate(CamelModel):
    objective_code: str = code_field("OBJ")
    objective_name: str = Field(..., min_length=1)
    objective_description: str = ""
    owner_id: str = ""
    period: str = ""
    priority: Priority = "medium"


class Objective(Record, ObjectiveCreate):
    status: ObjectiveStatus = "active"
    progress: float = 0


class KeyResultCreate(CamelModel):
    objective_id: str
    key_result_code: str = code_field("KR")
    key_result_name: str = Field(..., min_length=1)
    target_value: float = Field(..., gt=0)
    unit: str = ""


class KeyResult(Record, KeyResultCreate):
    current_value: float = 0
    status: KeyResultStatus = "pending"


class KeyResultRef(CamelModel):
    key_result_id: str


class ProgressCreate(CamelModel):
    key_result_id: str
    progress_code: str = code_field("PRG")
    progress_value: float
    notes: str = ""


class ProgressUpdate(Record, ProgressCreate):
    progress_date: datetime = Field(default_factory=datetime.utcnow)


class GoalTrackingMetrics(CamelModel):
    total_objectives: int
    active_objectives: int
    completed_objectives: int
    total_key_results: int
    completed_key_results: int
    key_result_completion_rate: float
    goal_tracking_score: float
