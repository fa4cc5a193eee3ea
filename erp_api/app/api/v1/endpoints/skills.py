"""Skills development endpoints for API v1."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from erp_api.app.api.v1.dispatch import created, current_company, found, parse_payload, resolve_action
from erp_api.app.core.errors import invalid_action
from erp_api.app.schemas.skills import DevelopmentPlanCreate, EmployeeSkillCreate, PlanProgress, SkillCreate, SkillGapCreate
from erp_api.app.services.skill_service import SkillService

router = APIRouter()


@router.get("")
async def read_skills(
    action: Optional[str] = Query(None),
    employee_id: Optional[str] = Query(None, alias="employeeId"),
    company_id: str = Depends(current_company),
) -> Any:
    if action == "skills":
        return await SkillService.get_skills(company_id)
    if action == "employee-skills":
        return await SkillService.get_employee_skills(company_id, employee_id=employee_id)
    if action == "skill-gaps":
        return await SkillService.get_skill_gaps(company_id, employee_id=employee_id)
    if action == "development-plans":
        return await SkillService.get_development_plans(company_id, employee_id=employee_id)
    if action == "metrics":
        return await SkillService.get_metrics(company_id)
    raise invalid_action(action)


@router.post("")
async def act_skills(
    response: Response,
    action: Optional[str] = Query(None),
    payload: Optional[Dict[str, Any]] = Body(None),
    company_id: str = Depends(current_company),
) -> Any:
    name, body = resolve_action(action, payload)

    if name == "create-skill":
        created(response)
        return await SkillService.create_skill(company_id, parse_payload(SkillCreate, body))
    if name == "assign-employee-skill":
        created(response)
        return await SkillService.assign_employee_skill(company_id, parse_payload(EmployeeSkillCreate, body))
    if name == "identify-skill-gap":
        created(response)
        return await SkillService.identify_skill_gap(company_id, parse_payload(SkillGapCreate, body))
    if name == "create-development-plan":
        created(response)
        return await SkillService.create_development_plan(company_id, parse_payload(DevelopmentPlanCreate, body))
    if name == "update-plan-progress":
        data = parse_payload(PlanProgress, body)
        return found(await SkillService.update_plan_progress(company_id, data.plan_id, data.progress_percentage), "Plan")
    raise invalid_action(name)
