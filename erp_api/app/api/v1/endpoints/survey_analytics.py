"""Survey analytics endpoints for API v1."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from erp_api.app.api.v1.dispatch import created, current_company, found, parse_payload, resolve_action
from erp_api.app.core.errors import invalid_action
from erp_api.app.schemas.survey_analytics import (
    FeedbackTrendCreate,
    QuestionAnalysisCreate,
    SurveyAnalysisCreate,
    SurveyReportCreate,
    SurveyReportRef,
)
from erp_api.app.services.survey_analytics_service import SurveyAnalyticsService

router = APIRouter()


@router.get("")
async def read_survey_analytics(
    action: Optional[str] = Query(None),
    survey_id: Optional[str] = Query(None, alias="surveyId"),
    company_id: str = Depends(current_company),
) -> Any:
    if action == "analyses":
        return await SurveyAnalyticsService.get_analyses(company_id, survey_id=survey_id)
    if action == "question-analyses":
        return await SurveyAnalyticsService.get_question_analyses(company_id, survey_id=survey_id)
    if action == "trends":
        return await SurveyAnalyticsService.get_trends(company_id)
    if action == "reports":
        return await SurveyAnalyticsService.get_reports(company_id, survey_id=survey_id)
    if action == "metrics":
        return await SurveyAnalyticsService.get_metrics(company_id)
    raise invalid_action(action)


@router.post("")
async def act_survey_analytics(
    response: Response,
    action: Optional[str] = Query(None),
    payload: Optional[Dict[str, Any]] = Body(None),
    company_id: str = Depends(current_company),
) -> Any:
    name, body = resolve_action(action, payload)

    if name == "analyze-survey":
        created(response)
        return await SurveyAnalyticsService.analyze_survey(company_id, parse_payload(SurveyAnalysisCreate, body))
    if name == "analyze-question":
        created(response)
        return await SurveyAnalyticsService.analyze_question(company_id, parse_payload(QuestionAnalysisCreate, body))
    if name == "track-trend":
        created(response)
        return await SurveyAnalyticsService.track_trend(company_id, parse_payload(FeedbackTrendCreate, body))
    if name == "generate-report":
        created(response)
        return await SurveyAnalyticsService.generate_report(company_id, parse_payload(SurveyReportCreate, body))
    if name == "publish-report":
        data = parse_payload(SurveyReportRef, body)
        return found(await SurveyAnalyticsService.publish_report(company_id, data.report_id), "Report")
    raise invalid_action(name)
