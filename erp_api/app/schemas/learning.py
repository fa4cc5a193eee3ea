"""Pydantic schemas for learning resources, learning paths and learner progress."""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field, model_validator

from .base import CamelModel, Record, code_field

ResourceType = Literal["video", "document", "course", "webinar", "tutorial"]
LearningStatus = Literal["started", "in-progress", "completed", "abandoned"]


class LearningResourceCreate(CamelModel):
    resource_code: str = code_field("LR")
    resource_name: str = Field(..., min_length=1)
    resource_type: ResourceType
    description: str = ""
    url: Optional[str] = None
    author: str = ""
    duration: float = Field(0, ge=0, description="Minutes")


class LearningResource(Record, LearningResourceCreate):
    status: Literal["active", "inactive", "archived"] = "active"


class LearningPathCreate(CamelModel):
    path_code: str = code_field("LP")
    path_name: str = Field(..., min_length=1)
    description: str = ""
    resource_ids: List[str] = Field(default_factory=list)
    target_audience: str = ""


class LearningPath(Record, LearningPathCreate):
    status: Literal["active", "inactive"] = "active"


class EnrollmentCreate(CamelModel):
    user_id: str
    resource_id: Optional[str] = None
    path_id: Optional[str] = None
    learning_code: str = code_field("LE")

    @model_validator(mode="after")
    def check_target(self) -> "EnrollmentCreate":
        if not self.resource_id and not self.path_id:
            raise ValueError("resourceId or pathId is required")
        return self


class UserLearning(Record, EnrollmentCreate):
    start_date: datetime = Field(default_factory=datetime.utcnow)
    completion_date: Optional[datetime] = None
    progress: float = 0
    status: LearningStatus = "started"


class LearningProgress(CamelModel):
    learning_id: str
    progress: float = Field(..., ge=0, le=100)


class LearningRef(CamelModel):
    learning_id: str


class LearningMetrics(CamelModel):
    total_resources: int
    active_resources: int
    total_paths: int
    active_paths: int
    total_learners: int
    completed_learnings: int
    completion_rate: float
    average_progress: float
    learning_engagement: float
