"""Pydantic schemas for surveys, their questions and responses, and customer feedback."""

from datetime import date, datetime
from typing import Dict, List, Literal, Optional, Union

from pydantic import Field

from .base import CamelModel, Record

SurveyStatus = Literal["draft", "active", "closed", "archived"]
QuestionType = Literal["text", "multiple-choice", "rating", "yes-no"]
FeedbackStatus = Literal["new", "in-progress", "resolved", "closed"]
Priority = Literal["low", "medium", "high", "critical"]


class SurveyCreate(CamelModel):
    survey_code: str = ""
    title: str = Field(..., min_length=1)
    description: str = ""
    category: str = ""
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    target_audience: str = ""


class Survey(Record, SurveyCreate):
    status: SurveyStatus = "draft"


class SurveyStatusUpdate(CamelModel):
    survey_id: str
    status: SurveyStatus


class QuestionCreate(CamelModel):
    survey_id: str
    question_text: str = Field(..., min_length=1)
    question_type: QuestionType = "text"
    options: Optional[List[str]] = None
    required: bool = False
    order: int = 0


class SurveyQuestion(Record, QuestionCreate):
    pass


class SurveyResponseCreate(CamelModel):
    survey_id: str
    respondent_id: Optional[str] = None
    responses: Dict[str, Union[int, float, str]] = Field(default_factory=dict, description="Answers keyed by question id")


class SurveyResponse(Record, SurveyResponseCreate):
    submitted_at: datetime = Field(default_factory=datetime.utcnow)
    status: Literal["draft", "submitted"] = "submitted"


class FeedbackCreate(CamelModel):
    feedback_code: str = ""
    customer_id: Optional[str] = None
    subject: str = ""
    message: str = Field(..., min_length=1)
    category: str = "general"
    rating: int = Field(..., ge=1, le=5)
    priority: Priority = "medium"


class Feedback(Record, FeedbackCreate):
    status: FeedbackStatus = "new"


class FeedbackStatusUpdate(CamelModel):
    feedback_id: str
    status: FeedbackStatus


class FeedbackMetrics(CamelModel):
    total_surveys: int
    active_surveys: int
    total_responses: int
    average_response_rate: float
    total_feedback: int
    pending_feedback: int
    resolved_feedback: int
    average_rating: float
    satisfaction_score: float
