"""
Service layer for risk management.

A risk moves from ``identified`` to ``assessed`` with its first
assessment and to ``mitigated`` when a mitigation for it completes.
``highRisks`` and ``criticalRisks`` count a risk when either its
probability or its impact reaches that level.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from erp_api.app.core.errors import invalid_state, not_found
from erp_api.app.core.store import InMemoryStore
from erp_api.app.schemas.risks import (
    AssessmentCreate,
    MitigationCreate,
    Risk,
    RiskAssessment,
    RiskCreate,
    RiskMetrics,
    RiskMitigation,
    RiskStatus,
)
from erp_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)

RISK_TREND = "Stable"
COMPLIANCE_RISK_RATE = 12.5

risks: InMemoryStore[Risk] = InMemoryStore("risks.risks")
assessments: InMemoryStore[RiskAssessment] = InMemoryStore("risks.assessments")
mitigations: InMemoryStore[RiskMitigation] = InMemoryStore("risks.mitigations")


class RiskService:
    @classmethod
    async def create_risk(cls, company_id: str, data: RiskCreate) -> Risk:
        risk = risks.add(Risk(company_id=company_id, **data.model_dump()))
        logger.info("Risk created: %s (%s/%s)", risk.risk_name, risk.probability, risk.impact)
        await AuditService.record("create", "risk", risk, risk_type=risk.risk_type)
        return risk

    @classmethod
    async def update_risk_status(cls, company_id: str, risk_id: str, status: RiskStatus) -> Optional[Risk]:
        risk = risks.get_owned(risk_id, company_id)
        if risk is None:
            return None
        risk.status = status
        await AuditService.record("update-status", "risk", risk, status=status)
        return risk

    @classmethod
    async def assess_risk(cls, company_id: str, data: AssessmentCreate) -> RiskAssessment:
        risk = cls._require_risk(company_id, data.risk_id)
        assessment = assessments.add(RiskAssessment(company_id=company_id, **data.model_dump()))
        if risk.status == "identified":
            risk.status = "assessed"
        logger.info("Risk assessed: %s score %.1f", risk.id, assessment.risk_score)
        return assessment

    @classmethod
    async def create_mitigation(cls, company_id: str, data: MitigationCreate) -> RiskMitigation:
        cls._require_risk(company_id, data.risk_id)
        mitigation = mitigations.add(RiskMitigation(company_id=company_id, **data.model_dump()))
        logger.info("Mitigation created: %s", mitigation.mitigation_name)
        return mitigation

    @classmethod
    async def complete_mitigation(cls, company_id: str, mitigation_id: str) -> Optional[RiskMitigation]:
        mitigation = mitigations.get_owned(mitigation_id, company_id)
        if mitigation is None:
            return None
        if mitigation.status == "completed":
            raise invalid_state("Mitigation is already completed")
        mitigation.status = "completed"
        risk = risks.get_owned(mitigation.risk_id, company_id)
        if risk is not None:
            risk.status = "mitigated"
            await AuditService.record("mitigate", "risk", risk, mitigation_id=mitigation_id)
        logger.info("Mitigation completed: %s", mitigation_id)
        return mitigation

    @classmethod
    async def get_risks(cls, company_id: str, risk_type: Optional[str] = None) -> List[Risk]:
        return risks.filter(company_id=company_id, risk_type=risk_type)

    @classmethod
    async def get_assessments(cls, company_id: str, risk_id: Optional[str] = None) -> List[RiskAssessment]:
        return assessments.filter(company_id=company_id, risk_id=risk_id)

    @classmethod
    async def get_mitigations(cls, company_id: str, risk_id: Optional[str] = None) -> List[RiskMitigation]:
        return mitigations.filter(company_id=company_id, risk_id=risk_id)

    @classmethod
    async def get_metrics(cls, company_id: str) -> RiskMetrics:
        company_risks = risks.filter(company_id=company_id)
        scores = [a.risk_score for a in assessments.filter(company_id=company_id)]
        return RiskMetrics(
            total_risks=len(company_risks),
            high_risks=sum(1 for r in company_risks if "high" in (r.probability, r.impact)),
            critical_risks=sum(1 for r in company_risks if "critical" in (r.probability, r.impact)),
            mitigated_risks=sum(1 for r in company_risks if r.status == "mitigated"),
            average_risk_score=sum(scores) / len(scores) if scores else 0,
            risk_trend=RISK_TREND,
            compliance_risk_rate=COMPLIANCE_RISK_RATE,
        )

    @classmethod
    def _require_risk(cls, company_id: str, risk_id: str) -> Risk:
        risk = risks.get_owned(risk_id, company_id)
        if risk is None:
            raise not_found("Risk not found")
        return risk
