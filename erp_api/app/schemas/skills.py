"""Pydantic schemas for skills, employee proficiencies, skill gaps and development plans."""

from datetime import date, datetime
from typing import List, Literal

from pydantic import Field

from .base import CamelModel, Record

ProficiencyLevel = Literal["beginner", "intermediate", "advanced", "expert"]


class SkillCreate(CamelModel):
    skill_name: str = Field(..., min_length=1)
    category: str = ""
    proficiency_level: ProficiencyLevel = "beginner"
    description: str = ""


class Skill(Record, SkillCreate):
    pass


class EmployeeSkillCreate(CamelModel):
    employee_id: str
    skill_id: str
    proficiency_level: ProficiencyLevel
    years_of_experience: float = Field(0, ge=0)


class EmployeeSkill(Record, EmployeeSkillCreate):
    last_assessment_date: datetime = Field(default_factory=datetime.utcnow)
    status: Literal["active", "inactive"] = "active"


class SkillGapCreate(CamelModel):
    employee_id: str
    required_skill_id: str
    current_level: ProficiencyLevel
    required_level: ProficiencyLevel


class SkillGap(Record, SkillGapCreate):
    gap_level: int = 0
    training_recommended: Literal["Yes", "No"] = "No"


class DevelopmentPlanCreate(CamelModel):
    employee_id: str
    plan_name: str = Field(..., min_length=1)
    objectives: List[str] = Field(default_factory=list)
    target_skills: List[str] = Field(default_factory=list)
    start_date: date
    end_date: date


class DevelopmentPlan(Record, DevelopmentPlanCreate):
    status: Literal["draft", "active", "completed"] = "draft"
    progress_percentage: float = 0


class PlanProgress(CamelModel):
    plan_id: str
    progress_percentage: float = Field(..., ge=0, le=100)


class SkillsMetrics(CamelModel):
    total_skills: int
    employees_with_skills: int
    average_proficiency: float
    skill_gaps_identified: int
    development_plans_active: int
    completed_plans: int
    average_gap_level: float
