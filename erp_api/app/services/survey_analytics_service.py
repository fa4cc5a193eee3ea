"""
Service layer for survey analytics.

Analyses arrive pre-computed from the survey tooling and are stored as
given.  The metrics summary reports the first five insights across all
analyses and the direction of the most recently tracked trend.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from erp_api.app.core.errors import invalid_state
from erp_api.app.core.store import InMemoryStore
from erp_api.app.schemas.survey_analytics import (
    AnalyticsMetrics,
    FeedbackTrend,
    FeedbackTrendCreate,
    QuestionAnalysis,
    QuestionAnalysisCreate,
    SurveyAnalysis,
    SurveyAnalysisCreate,
    SurveyReport,
    SurveyReportCreate,
)
from erp_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)

TOP_INSIGHTS = 5

analyses: InMemoryStore[SurveyAnalysis] = InMemoryStore("survey_analytics.analyses")
question_analyses: InMemoryStore[QuestionAnalysis] = InMemoryStore("survey_analytics.questions")
trends: InMemoryStore[FeedbackTrend] = InMemoryStore("survey_analytics.trends")
reports: InMemoryStore[SurveyReport] = InMemoryStore("survey_analytics.reports")


class SurveyAnalyticsService:
    @classmethod
    async def analyze_survey(cls, company_id: str, data: SurveyAnalysisCreate) -> SurveyAnalysis:
        analysis = analyses.add(SurveyAnalysis(company_id=company_id, **data.model_dump()))
        logger.info("Survey analyzed: %s (%d responses)", analysis.survey_id, analysis.total_responses)
        return analysis

    @classmethod
    async def analyze_question(cls, company_id: str, data: QuestionAnalysisCreate) -> QuestionAnalysis:
        analysis = question_analyses.add(QuestionAnalysis(company_id=company_id, **data.model_dump()))
        logger.info("Question analyzed: %s", analysis.question_id)
        return analysis

    @classmethod
    async def track_trend(cls, company_id: str, data: FeedbackTrendCreate) -> FeedbackTrend:
        trend = trends.add(FeedbackTrend(company_id=company_id, **data.model_dump()))
        logger.info("Feedback trend tracked for %s: %s", trend.period, trend.sentiment_trend)
        return trend

    @classmethod
    async def generate_report(cls, company_id: str, data: SurveyReportCreate) -> SurveyReport:
        report = reports.add(SurveyReport(company_id=company_id, **data.model_dump()))
        logger.info("Survey report generated: %s", report.report_name)
        return report

    @classmethod
    async def publish_report(cls, company_id: str, report_id: str) -> Optional[SurveyReport]:
        report = reports.get_owned(report_id, company_id)
        if report is None:
            return None
        if report.status == "archived":
            raise invalid_state("Archived reports cannot be published")
        report.status = "published"
        logger.info("Survey report published: %s", report.report_name)
        await AuditService.record("publish", "survey_report", report)
        return report

    @classmethod
    async def get_analyses(cls, company_id: str, survey_id: Optional[str] = None) -> List[SurveyAnalysis]:
        return analyses.filter(company_id=company_id, survey_id=survey_id)

    @classmethod
    async def get_question_analyses(cls, company_id: str, survey_id: Optional[str] = None) -> List[QuestionAnalysis]:
        return question_analyses.filter(company_id=company_id, survey_id=survey_id)

    @classmethod
    async def get_trends(cls, company_id: str) -> List[FeedbackTrend]:
        return trends.filter(company_id=company_id)

    @classmethod
    async def get_reports(cls, company_id: str, survey_id: Optional[str] = None) -> List[SurveyReport]:
        return reports.filter(company_id=company_id, survey_id=survey_id)

    @classmethod
    async def get_metrics(cls, company_id: str) -> AnalyticsMetrics:
        company_analyses = analyses.filter(company_id=company_id)
        company_trends = trends.filter(company_id=company_id)
        company_reports = reports.filter(company_id=company_id)
        insights = [insight for a in company_analyses for insight in a.key_insights]
        return AnalyticsMetrics(
            total_analyses=len(company_analyses),
            average_sentiment_score=(
                sum(a.sentiment_score for a in company_analyses) / len(company_analyses) if company_analyses else 0
            ),
            top_insights=insights[:TOP_INSIGHTS],
            feedback_trend_direction=company_trends[-1].sentiment_trend if company_trends else "stable",
            report_count=len(company_reports),
            published_reports=sum(1 for r in company_reports if r.status == "published"),
        )
