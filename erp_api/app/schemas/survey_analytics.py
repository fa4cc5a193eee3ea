"""Pydantic schemas for survey analyses, feedback trends and survey reports."""

from datetime import datetime
from typing import Dict, List, Literal, Optional

from pydantic import Field

from .base import CamelModel, Record

Sentiment = Literal["positive", "neutral", "negative"]
TrendDirection = Literal["improving", "stable", "declining"]


class SurveyAnalysisCreate(CamelModel):
    survey_id: str
    total_responses: int = Field(..., ge=0)
    response_rate: float = Field(0, ge=0, le=100)
    completion_rate: float = Field(0, ge=0, le=100)
    average_completion_time: float = Field(0, ge=0, description="Minutes")
    sentiment_score: float
    key_insights: List[str] = Field(default_factory=list)


class SurveyAnalysis(Record, SurveyAnalysisCreate):
    pass


class QuestionAnalysisCreate(CamelModel):
    survey_id: Optional[str] = None
    question_id: str
    total_responses: int = Field(..., ge=0)
    response_distribution: Dict[str, int] = Field(default_factory=dict)
    average_score: Optional[float] = None
    sentiment: Optional[Sentiment] = None


class QuestionAnalysis(Record, QuestionAnalysisCreate):
    pass


class FeedbackTrendCreate(CamelModel):
    period: str = Field(..., min_length=1)
    total_feedback: int = Field(0, ge=0)
    resolved_count: int = Field(0, ge=0)
    average_resolution_time: float = Field(0, ge=0)
    top_categories: List[str] = Field(default_factory=list)
    sentiment_trend: TrendDirection = "stable"


class FeedbackTrend(Record, FeedbackTrendCreate):
    pass


class SurveyReportCreate(CamelModel):
    survey_id: str
    report_name: str = Field(..., min_length=1)
    total_respondents: int = Field(0, ge=0)
    demographics: Dict[str, int] = Field(default_factory=dict)
    key_findings: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)


class SurveyReport(Record, SurveyReportCreate):
    generated_date: datetime = Field(default_factory=datetime.utcnow)
    status: Literal["draft", "published", "archived"] = "draft"


class SurveyReportRef(CamelModel):
    report_id: str


class AnalyticsMetrics(CamelModel):
    total_analyses: int
    average_sentiment_score: float
    top_insights: List[str]
    feedback_trend_direction: str
    report_count: int
    published_reports: int
