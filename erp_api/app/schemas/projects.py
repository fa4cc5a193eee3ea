"""Pydantic schemas for projects, their tasks and milestones."""

from datetime import date
from typing import List, Literal, Optional

from pydantic import Field

from .base import CamelModel, Record, code_field

ProjectStatus = Literal["planning", "active", "on-hold", "completed", "cancelled"]
TaskStatus = Literal["pending", "in-progress", "completed", "blocked"]
MilestoneStatus = Literal["pending", "achieved", "delayed"]


class ProjectCreate(CamelModel):
    project_code: str = code_field("PRJ")
    project_name: str = Field(..., min_length=1)
    description: str = ""
    start_date: date
    end_date: date
    budget: float = Field(0, ge=0)
    manager: str = ""
    priority: Literal["low", "medium", "high", "critical"] = "medium"


class Project(Record, ProjectCreate):
    status: ProjectStatus = "planning"


class ProjectStatusUpdate(CamelModel):
    project_id: str
    status: ProjectStatus


class ProjectTaskCreate(CamelModel):
    project_id: str
    task_code: str = code_field("TASK")
    task_name: str = Field(..., min_length=1)
    description: str = ""
    assigned_to: Optional[str] = None
    priority: Literal["low", "medium", "high"] = "medium"
    start_date: Optional[date] = None
    due_date: Optional[date] = None


class ProjectTask(Record, ProjectTaskCreate):
    status: TaskStatus = "pending"
    completion_percentage: float = 0


class TaskProgress(CamelModel):
    task_id: str
    completion_percentage: float = Field(..., ge=0, le=100)


class MilestoneCreate(CamelModel):
    project_id: str
    milestone_code: str = code_field("MS")
    milestone_name: str = Field(..., min_length=1)
    description: str = ""
    target_date: date
    deliverables: List[str] = Field(default_factory=list)


class ProjectMilestone(Record, MilestoneCreate):
    status: MilestoneStatus = "pending"


class MilestoneStatusUpdate(CamelModel):
    milestone_id: str
    status: MilestoneStatus = "achieved"


class ProjectMetrics(CamelModel):
    total_projects: int
    active_projects: int
    completed_projects: int
    total_tasks: int
    completed_tasks: int
    task_completion_rate: float
    total_budget: float
    budget_utilization: float
    on_time_delivery_rate: float
