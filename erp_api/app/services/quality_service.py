"""Service layer for quality management."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from erp_api.app.core.errors import not_found
from erp_api.app.core.store import InMemoryStore
from erp_api.app.schemas.quality import (
    Inspection,
    InspectionCreate,
    QualityDefect,
    QualityDefectCreate,
    QualityMetrics,
    QualityStandard,
    StandardCreate,
)
from erp_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)

QUALITY_SCORE = 94.5

standards: InMemoryStore[QualityStandard] = InMemoryStore("quality.standards")
inspections: InMemoryStore[Inspection] = InMemoryStore("quality.inspections")
defects: InMemoryStore[QualityDefect] = InMemoryStore("quality.defects")


class QualityService:
    @classmethod
    async def create_standard(cls, company_id: str, data: StandardCreate) -> QualityStandard:
        standard = standards.add(QualityStandard(company_id=company_id, **data.model_dump()))
        logger.info("Quality standard created: %s (%s)", standard.standard_name, standard.standard_type)
        return standard

    @classmethod
    async def create_inspection(cls, company_id: str, data: InspectionCreate) -> Inspection:
        if data.standard_id and standards.get_owned(data.standard_id, company_id) is None:
            raise not_found("Standard not found")
        inspection = inspections.add(Inspection(company_id=company_id, **data.model_dump()))
        logger.info("Inspection recorded: %s result %s", inspection.id, inspection.result)
        await AuditService.record("create", "inspection", inspection, result=inspection.result)
        return inspection

    @classmethod
    async def create_defect(cls, company_id: str, data: QualityDefectCreate) -> QualityDefect:
        if data.inspection_id and inspections.get_owned(data.inspection_id, company_id) is None:
            raise not_found("Inspection not found")
        defect = defects.add(QualityDefect(company_id=company_id, **data.model_dump()))
        logger.info("Quality defect logged: %s (%s)", defect.defect_name, defect.defect_type)
        return defect

    @classmethod
    async def resolve_defect(cls, company_id: str, defect_id: str) -> Optional[QualityDefect]:
        defect = defects.get_owned(defect_id, company_id)
        if defect is None:
            return None
        defect.status = "resolved"
        defect.resolved_at = datetime.utcnow()
        logger.info("Quality defect resolved: %s", defect_id)
        await AuditService.record("resolve", "quality_defect", defect)
        return defect

    @classmethod
    async def get_standards(cls, company_id: str) -> List[QualityStandard]:
        return standards.filter(company_id=company_id)

    @classmethod
    async def get_inspections(cls, company_id: str, result: Optional[str] = None) -> List[Inspection]:
        return inspections.filter(company_id=company_id, result=result)

    @classmethod
    async def get_defects(cls, company_id: str, status: Optional[str] = None) -> List[QualityDefect]:
        return defects.filter(company_id=company_id, status=status)

    @classmethod
    async def get_metrics(cls, company_id: str) -> QualityMetrics:
        company_standards = standards.filter(company_id=company_id)
        company_inspections = inspections.filter(company_id=company_id)
        company_defects = defects.filter(company_id=company_id)
        passed = sum(1 for i in company_inspections if i.result == "pass")
        return QualityMetrics(
            total_standards=len(company_standards),
            active_standards=sum(1 for s in company_standards if s.status == "active"),
            total_inspections=len(company_inspections),
            passed_inspections=passed,
            failed_inspections=sum(1 for i in company_inspections if i.result == "fail"),
            pass_rate=passed / len(company_inspections) * 100 if company_inspections else 0,
            total_defects=len(company_defects),
            open_defects=sum(1 for d in company_defects if d.status == "open"),
            quality_score=QUALITY_SCORE,
        )
