"""
Service layer for learning resources.

Users enrol in a single resource or a whole path.  Progress of 100
completes the enrolment; completing it directly sets progress to 100.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from erp_api.app.core.errors import not_found
from erp_api.app.core.store import InMemoryStore
from erp_api.app.schemas.learning import (
    EnrollmentCreate,
    LearningMetrics,
    LearningPath,
    LearningPathCreate,
    LearningResource,
    LearningResourceCreate,
    UserLearning,
)
from erp_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)

LEARNING_ENGAGEMENT = 85.4

resources: InMemoryStore[LearningResource] = InMemoryStore("learning.resources")
paths: InMemoryStore[LearningPath] = InMemoryStore("learning.paths")
enrollments: InMemoryStore[UserLearning] = InMemoryStore("learning.enrollments")


def _complete(learning: UserLearning) -> None:
    learning.progress = 100
    learning.status = "completed"
    learning.completion_date = datetime.utcnow()


class LearningService:
    @classmethod
    async def create_resource(cls, company_id: str, data: LearningResourceCreate) -> LearningResource:
        resource = resources.add(LearningResource(company_id=company_id, **data.model_dump()))
        logger.info("Learning resource created: %s (%s)", resource.resource_name, resource.resource_type)
        return resource

    @classmethod
    async def create_path(cls, company_id: str, data: LearningPathCreate) -> LearningPath:
        missing = [rid for rid in data.resource_ids if resources.get_owned(rid, company_id) is None]
        if missing:
            raise not_found(f"Resource not found: {', '.join(missing)}")
        path = paths.add(LearningPath(company_id=company_id, **data.model_dump()))
        logger.info("Learning path created: %s with %d resources", path.path_name, len(path.resource_ids))
        return path

    @classmethod
    async def enroll_user(cls, company_id: str, data: EnrollmentCreate) -> UserLearning:
        if data.resource_id and resources.get_owned(data.resource_id, company_id) is None:
            raise not_found("Resource not found")
        if data.path_id and paths.get_owned(data.path_id, company_id) is None:
            raise not_found("Path not found")
        learning = enrollments.add(UserLearning(company_id=company_id, **data.model_dump()))
        logger.info("User %s enrolled (%s)", learning.user_id, learning.path_id or learning.resource_id)
        await AuditService.record("enroll", "learning", learning, user=learning.user_id)
        return learning

    @classmethod
    async def update_progress(cls, company_id: str, learning_id: str, progress: float) -> Optional[UserLearning]:
        learning = enrollments.get_owned(learning_id, company_id)
        if learning is None:
            return None
        if progress >= 100:
            _complete(learning)
        else:
            learning.progress = progress
            learning.status = "in-progress" if progress > 0 else "started"
        return learning

    @classmethod
    async def complete_learning(cls, company_id: str, learning_id: str) -> Optional[UserLearning]:
        learning = enrollments.get_owned(learning_id, company_id)
        if learning is None:
            return None
        _complete(learning)
        logger.info("Learning completed: %s by %s", learning_id, learning.user_id)
        await AuditService.record("complete", "learning", learning)
        return learning

    @classmethod
    async def get_resources(cls, company_id: str, resource_type: Optional[str] = None) -> List[LearningResource]:
        return resources.filter(company_id=company_id, resource_type=resource_type)

    @classmethod
    async def get_paths(cls, company_id: str) -> List[LearningPath]:
        return paths.filter(company_id=company_id)

    @classmethod
    async def get_enrollments(cls, company_id: str, user_id: Optional[str] = None) -> List[UserLearning]:
        return enrollments.filter(company_id=company_id, user_id=user_id)

    @classmethod
    async def get_metrics(cls, company_id: str) -> LearningMetrics:
        company_resources = resources.filter(company_id=company_id)
        company_paths = paths.filter(company_id=company_id)
        learnings = enrollments.filter(company_id=company_id)
        completed = sum(1 for learning in learnings if learning.status == "completed")
        return LearningMetrics(
            total_resources=len(company_resources),
            active_resources=sum(1 for r in company_resources if r.status == "active"),
            total_paths=len(company_paths),
            active_paths=sum(1 for p in company_paths if p.status == "active"),
            total_learners=len({learning.user_id for learning in learnings}),
            completed_learnings=completed,
            completion_rate=completed / len(learnings) * 100 if learnings else 0,
            average_progress=sum(learning.progress for learning in learnings) / len(learnings) if learnings else 0,
            learning_engagement=LEARNING_ENGAGEMENT,
        )
