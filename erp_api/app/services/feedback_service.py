"""
Service layer for surveys and customer feedback.

Responses are accepted only while a survey is ``draft`` or ``active``.
The satisfaction score rescales the average feedback rating (1 to 5)
to a percentage.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from erp_api.app.core.errors import invalid_state, not_found
from erp_api.app.core.store import InMemoryStore, document_number
from erp_api.app.schemas.feedback import (
    Feedback,
    FeedbackCreate,
    FeedbackMetrics,
    FeedbackStatus,
    QuestionCreate,
    Survey,
    SurveyCreate,
    SurveyQuestion,
    SurveyResponse,
    SurveyResponseCreate,
    SurveyStatus,
)
from erp_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)

surveys: InMemoryStore[Survey] = InMemoryStore("feedback.surveys")
questions: InMemoryStore[SurveyQuestion] = InMemoryStore("feedback.questions")
responses: InMemoryStore[SurveyResponse] = InMemoryStore("feedback.responses")
feedback_items: InMemoryStore[Feedback] = InMemoryStore("feedback.feedback")


class FeedbackService:
    @classmethod
    async def create_survey(cls, company_id: str, data: SurveyCreate) -> Survey:
        fields = data.model_dump()
        fields["survey_code"] = data.survey_code or document_number("SRV")
        survey = surveys.add(Survey(company_id=company_id, **fields))
        logger.info("Survey created: %s (%s)", survey.title, survey.id)
        await AuditService.record("create", "survey", survey)
        return survey

    @classmethod
    async def update_survey_status(cls, company_id: str, survey_id: str, status: SurveyStatus) -> Optional[Survey]:
        survey = surveys.get_owned(survey_id, company_id)
        if survey is None:
            return None
        survey.status = status
        logger.info("Survey %s is now %s", survey_id, status)
        return survey

    @classmethod
    async def add_question(cls, company_id: str, data: QuestionCreate) -> SurveyQuestion:
        cls._require_survey(company_id, data.survey_id)
        question = questions.add(SurveyQuestion(company_id=company_id, **data.model_dump()))
        logger.info("Question added to survey %s at position %d", question.survey_id, question.order)
        return question

    @classmethod
    async def submit_response(cls, company_id: str, data: SurveyResponseCreate) -> SurveyResponse:
        survey = cls._require_survey(company_id, data.survey_id)
        if survey.status not in ("draft", "active"):
            raise invalid_state(f"Survey is {survey.status} and no longer accepts responses")
        response = responses.add(SurveyResponse(company_id=company_id, **data.model_dump()))
        logger.info("Survey response submitted for %s", response.survey_id)
        return response

    @classmethod
    async def submit_feedback(cls, company_id: str, data: FeedbackCreate) -> Feedback:
        fields = data.model_dump()
        fields["feedback_code"] = data.feedback_code or document_number("FB")
        feedback = feedback_items.add(Feedback(company_id=company_id, **fields))
        logger.info("Feedback submitted: %s rating %d", feedback.feedback_code, feedback.rating)
        await AuditService.record("create", "feedback", feedback, rating=feedback.rating)
        return feedback

    @classmethod
    async def update_feedback_status(cls, company_id: str, feedback_id: str, status: FeedbackStatus) -> Optional[Feedback]:
        feedback = feedback_items.get_owned(feedback_id, company_id)
        if feedback is None:
            return None
        feedback.status = status
        logger.info("Feedback %s status changed to %s", feedback_id, status)
        await AuditService.record("update-status", "feedback", feedback, status=status)
        return feedback

    @classmethod
    async def get_surveys(cls, company_id: str, status: Optional[str] = None) -> List[Survey]:
        return surveys.filter(company_id=company_id, status=status)

    @classmethod
    async def get_questions(cls, company_id: str, survey_id: Optional[str] = None) -> List[SurveyQuestion]:
        """Questions of a survey in display order."""
        return sorted(questions.filter(company_id=company_id, survey_id=survey_id), key=lambda q: q.order)

    @classmethod
    async def get_responses(cls, company_id: str, survey_id: Optional[str] = None) -> List[SurveyResponse]:
        return responses.filter(company_id=company_id, survey_id=survey_id)

    @classmethod
    async def get_feedback(cls, company_id: str, status: Optional[str] = None) -> List[Feedback]:
        return feedback_items.filter(company_id=company_id, status=status)

    @classmethod
    async def get_metrics(cls, company_id: str) -> FeedbackMetrics:
        company_surveys = surveys.filter(company_id=company_id)
        total_responses = len(responses.filter(company_id=company_id))
        items = feedback_items.filter(company_id=company_id)
        average_rating = sum(f.rating for f in items) / len(items) if items else 0
        return FeedbackMetrics(
            total_surveys=len(company_surveys),
            active_surveys=sum(1 for s in company_surveys if s.status == "active"),
            total_responses=total_responses,
            average_response_rate=total_responses / len(company_surveys) * 100 if company_surveys else 0,
            total_feedback=len(items),
            pending_feedback=sum(1 for f in items if f.status in ("new", "in-progress")),
            resolved_feedback=sum(1 for f in items if f.status == "resolved"),
            average_rating=average_rating,
            satisfaction_score=average_rating / 5 * 100,
        )

    @classmethod
    def _require_survey(cls, company_id: str, survey_id: str) -> Survey:
        survey = surveys.get_owned(survey_id, company_id)
        if survey is None:
            raise not_found("Survey not found")
        return survey
