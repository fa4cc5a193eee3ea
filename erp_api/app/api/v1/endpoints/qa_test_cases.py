"""QA test case and bug tracking endpoints for API v1."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from erp_api.app.api.v1.dispatch import created, current_company, found, parse_payload, resolve_action
from erp_api.app.core.errors import invalid_action
from erp_api.app.schemas.qa import BugAssignment, BugCreate, BugRef, ExecutionCreate, TestCaseCreate, TestCaseStatusUpdate
from erp_api.app.services.qa_service import QAService

router = APIRouter()


@router.get("")
async def read_test_cases(
    action: Optional[str] = Query(None),
    module: Optional[str] = Query(None),
    test_case_id: Optional[str] = Query(None, alias="testCaseId"),
    status_filter: Optional[str] = Query(None, alias="status"),
    company_id: str = Depends(current_company),
) -> Any:
    if action == "test-cases":
        return await QAService.get_test_cases(company_id, module=module)
    if action == "executions":
        return await QAService.get_executions(company_id, test_case_id=test_case_id)
    if action == "bugs":
        return await QAService.get_bugs(company_id, status=status_filter)
    if action == "metrics":
        return await QAService.get_metrics(company_id)
    raise invalid_action(action)


@router.post("")
async def act_test_cases(
    response: Response,
    action: Optional[str] = Query(None),
    payload: Optional[Dict[str, Any]] = Body(None),
    company_id: str = Depends(current_company),
) -> Any:
    name, body = resolve_action(action, payload)

    if name == "create-test-case":
        created(response)
        return await QAService.create_test_case(company_id, parse_payload(TestCaseCreate, body))
    if name == "update-test-case-status":
        data = parse_payload(TestCaseStatusUpdate, body)
        return found(await QAService.update_test_case_status(company_id, data.test_case_id, data.status), "Test case")
    if name == "execute-test":
        created(response)
        return await QAService.execute_test(company_id, parse_payload(ExecutionCreate, body))
    if name == "report-bug":
        created(response)
        return await QAService.report_bug(company_id, parse_payload(BugCreate, body))
    if name == "assign-bug":
        data = parse_payload(BugAssignment, body)
        return found(await QAService.assign_bug(company_id, data.bug_id, data.assigned_to), "Bug")
    if name == "resolve-bug":
        data = parse_payload(BugRef, body)
        return found(await QAService.resolve_bug(company_id, data.bug_id), "Bug")
    raise invalid_action(name)
