"""Survey and feedback endpoints for API v1."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from erp_api.app.api.v1.dispatch import created, current_company, found, parse_payload, resolve_action
from erp_api.app.core.errors import invalid_action
from erp_api.app.schemas.feedback import (
    FeedbackCreate,
    FeedbackStatusUpdate,
    QuestionCreate,
    SurveyCreate,
    SurveyResponseCreate,
    SurveyStatusUpdate,
)
from erp_api.app.services.feedback_service import FeedbackService

router = APIRouter()


@router.get("")
async def read_feedback(
    action: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
    survey_id: Optional[str] = Query(None, alias="surveyId"),
    company_id: str = Depends(current_company),
) -> Any:
    if action == "surveys":
        return await FeedbackService.get_surveys(company_id, status=status_filter)
    if action == "questions":
        return await FeedbackService.get_questions(company_id, survey_id=survey_id)
    if action == "responses":
        return await FeedbackService.get_responses(company_id, survey_id=survey_id)
    if action == "feedback":
        return await FeedbackService.get_feedback(company_id, status=status_filter)
    if action == "metrics":
        return await FeedbackService.get_metrics(company_id)
    raise invalid_action(action)


@router.post("")
async def act_feedback(
    response: Response,
    action: Optional[str] = Query(None),
    payload: Optional[Dict[str, Any]] = Body(None),
    company_id: str = Depends(current_company),
) -> Any:
    name, body = resolve_action(action, payload)

    if name == "create-survey":
        created(response)
        return await FeedbackService.create_survey(company_id, parse_payload(SurveyCreate, body))
    if name == "update-survey-status":
        data = parse_payload(SurveyStatusUpdate, body)
        return found(await FeedbackService.update_survey_status(company_id, data.survey_id, data.status), "Survey")
    if name == "add-question":
        created(response)
        return await FeedbackService.add_question(company_id, parse_payload(QuestionCreate, body))
    if name == "submit-response":
        created(response)
        return await FeedbackService.submit_response(company_id, parse_payload(SurveyResponseCreate, body))
    if name == "submit-feedback":
        created(response)
        return await FeedbackService.submit_feedback(company_id, parse_payload(FeedbackCreate, body))
    if name == "update-feedback-status":
        data = parse_payload(FeedbackStatusUpdate, body)
        return found(await FeedbackService.update_feedback_status(company_id, data.feedback_id, data.status), "Feedback")
    raise invalid_action(name)
