"""
Service layer for skills development.

Proficiency levels rank ``beginner`` (1) through ``expert`` (4).  A skill
gap is the distance from the current to the required level, never
negative; training is recommended whenever it is positive.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from erp_api.app.core.errors import not_found
from erp_api.app.core.store import InMemoryStore
from erp_api.app.schemas.skills import (
    DevelopmentPlan,
    DevelopmentPlanCreate,
    EmployeeSkill,
    EmployeeSkillCreate,
    Skill,
    SkillCreate,
    SkillGap,
    SkillGapCreate,
    SkillsMetrics,
)

logger = logging.getLogger(__name__)

LEVELS = {"beginner": 1, "intermediate": 2, "advanced": 3, "expert": 4}

skills: InMemoryStore[Skill] = InMemoryStore("skills.skills")
employee_skills: InMemoryStore[EmployeeSkill] = InMemoryStore("skills.employee_skills")
skill_gaps: InMemoryStore[SkillGap] = InMemoryStore("skills.gaps")
plans: InMemoryStore[DevelopmentPlan] = InMemoryStore("skills.plans")


class SkillService:
    @classmethod
    async def create_skill(cls, company_id: str, data: SkillCreate) -> Skill:
        skill = skills.add(Skill(company_id=company_id, **data.model_dump()))
        logger.info("Skill created: %s", skill.skill_name)
        return skill

    @classmethod
    async def assign_employee_skill(cls, company_id: str, data: EmployeeSkillCreate) -> EmployeeSkill:
        cls._require_skill(company_id, data.skill_id)
        record = employee_skills.add(EmployeeSkill(company_id=company_id, **data.model_dump()))
        logger.info("Skill %s assigned to employee %s at %s", record.skill_id, record.employee_id, record.proficiency_level)
        return record

    @classmethod
    async def identify_skill_gap(cls, company_id: str, data: SkillGapCreate) -> SkillGap:
        cls._require_skill(company_id, data.required_skill_id)
        distance = LEVELS[data.required_level] - LEVELS[data.current_level]
        gap = skill_gaps.add(
            SkillGap(
                company_id=company_id,
                gap_level=max(0, distance),
                training_recommended="Yes" if distance > 0 else "No",
                **data.model_dump(),
            )
        )
        logger.info("Skill gap identified for employee %s: %d level(s)", gap.employee_id, gap.gap_level)
        return gap

    @classmethod
    async def create_development_plan(cls, company_id: str, data: DevelopmentPlanCreate) -> DevelopmentPlan:
        for skill_id in data.target_skills:
            cls._require_skill(company_id, skill_id)
        plan = plans.add(DevelopmentPlan(company_id=company_id, **data.model_dump()))
        logger.info("Development plan created: %s", plan.plan_name)
        return plan

    @classmethod
    async def update_plan_progress(cls, company_id: str, plan_id: str, percentage: float) -> Optional[DevelopmentPlan]:
        """Record plan progress; any progress activates a draft plan and 100 completes it."""
        plan = plans.get_owned(plan_id, company_id)
        if plan is None:
            return None
        plan.progress_percentage = percentage
        if percentage == 100:
            plan.status = "completed"
        elif percentage > 0:
            plan.status = "active"
        return plan

    @classmethod
    async def get_skills(cls, company_id: str) -> List[Skill]:
        return skills.filter(company_id=company_id)

    @classmethod
    async def get_employee_skills(cls, company_id: str, employee_id: Optional[str] = None) -> List[EmployeeSkill]:
        return employee_skills.filter(company_id=company_id, employee_id=employee_id)

    @classmethod
    async def get_skill_gaps(cls, company_id: str, employee_id: Optional[str] = None) -> List[SkillGap]:
        return skill_gaps.filter(company_id=company_id, employee_id=employee_id)

    @classmethod
    async def get_development_plans(cls, company_id: str, employee_id: Optional[str] = None) -> List[DevelopmentPlan]:
        return plans.filter(company_id=company_id, employee_id=employee_id)

    @classmethod
    async def get_metrics(cls, company_id: str) -> SkillsMetrics:
        proficiencies = employee_skills.filter(company_id=company_id)
        gaps = skill_gaps.filter(company_id=company_id)
        company_plans = plans.filter(company_id=company_id)
        return SkillsMetrics(
            total_skills=len(skills.filter(company_id=company_id)),
            employees_with_skills=len({p.employee_id for p in proficiencies}),
            average_proficiency=(
                sum(LEVELS[p.proficiency_level] for p in proficiencies) / len(proficiencies) if proficiencies else 0
            ),
            skill_gaps_identified=len(gaps),
            development_plans_active=sum(1 for p in company_plans if p.status == "active"),
            completed_plans=sum(1 for p in company_plans if p.status == "completed"),
            average_gap_level=sum(g.gap_level for g in gaps) / len(gaps) if gaps else 0,
        )

    @classmethod
    def _require_skill(cls, company_id: str, skill_id: str) -> Skill:
        skill = skills.get_owned(skill_id, company_id)
        if skill is None:
            raise not_found("Skill not found")
        return skill
