"""Training management endpoints for API v1."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from erp_api.app.api.v1.dispatch import created, current_company, found, parse_payload, resolve_action
from erp_api.app.core.errors import invalid_action
from erp_api.app.schemas.training import (
    EnrollmentCreate,
    ProgramCreate,
    ProgramStatusUpdate,
    SessionCreate,
    SessionStatusUpdate,
    TrainingResult,
)
from erp_api.app.services.training_service import TrainingService

router = APIRouter()


@router.get("")
async def read_training(
    action: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
    program_id: Optional[str] = Query(None, alias="programId"),
    employee_id: Optional[str] = Query(None, alias="employeeId"),
    company_id: str = Depends(current_company),
) -> Any:
    if action == "programs":
        return await TrainingService.get_programs(company_id, status=status_filter)
    if action == "sessions":
        return await TrainingService.get_sessions(company_id, program_id=program_id)
    if action == "enrollments":
        return await TrainingService.get_enrollments(company_id, employee_id=employee_id)
    if action == "metrics":
        return await TrainingService.get_metrics(company_id)
    raise invalid_action(action)


@router.post("")
async def act_training(
    response: Response,
    action: Optional[str] = Query(None),
    payload: Optional[Dict[str, Any]] = Body(None),
    company_id: str = Depends(current_company),
) -> Any:
    name, body = resolve_action(action, payload)

    if name == "create-program":
        created(response)
        return await TrainingService.create_program(company_id, parse_payload(ProgramCreate, body))
    if name == "update-program-status":
        data = parse_payload(ProgramStatusUpdate, body)
        return found(await TrainingService.update_program_status(company_id, data.program_id, data.status), "Program")
    if name == "create-session":
        created(response)
        return await TrainingService.create_session(company_id, parse_payload(SessionCreate, body))
    if name == "update-session-status":
        data = parse_payload(SessionStatusUpdate, body)
        return found(await TrainingService.update_session_status(company_id, data.session_id, data.status), "Session")
    if name == "enroll-employee":
        created(response)
        return await TrainingService.enroll_employee(company_id, parse_payload(EnrollmentCreate, body))
    if name == "complete-training":
        data = parse_payload(TrainingResult, body)
        return found(await TrainingService.complete_training(company_id, data.enrollment_id, data.score), "Enrollment")
    raise invalid_action(name)
