"""Pydantic schemas for quality standards, inspections and quality defects."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from .base import CamelModel, Record, code_field

StandardType = Literal["iso", "internal", "industry", "regulatory"]
InspectionType = Literal["incoming", "in-process", "final", "audit"]
InspectionResult = Literal["pass", "fail", "conditional"]
DefectType = Literal["critical", "major", "minor"]


class StandardCreate(CamelModel):
    standard_code: str = code_field("STD")
    standard_name: str = Field(..., min_length=1)
    standard_type: StandardType = "internal"
    description: str = ""


class QualityStandard(Record, StandardCreate):
    status: Literal["active", "inactive", "archived"] = "active"


class InspectionCreate(CamelModel):
    inspection_code: str = code_field("INSP")
    inspection_name: str = ""
    inspection_type: InspectionType = "final"
    standard_id: Optional[str] = None
    product_id: str = ""
    inspector_id: str
    result: InspectionResult
    notes: str = ""


class Inspection(Record, InspectionCreate):
    inspection_date: datetime = Field(default_factory=datetime.utcnow)
    status: Literal["pending", "completed", "rejected"] = "completed"


class QualityDefectCreate(CamelModel):
    inspection_id: Optional[str] = None
    defect_code: str = code_field("QD")
    defect_name: str = Field(..., min_length=1)
    defect_type: DefectType = "minor"
    severity: int = Field(1, ge=1, le=10)
    description: str = ""


class QualityDefect(Record, QualityDefectCreate):
    status: Literal["open", "in-progress", "resolved", "closed"] = "open"
    resolved_at: Optional[datetime] = None


class QualityDefectRef(CamelModel):
    defect_id: str


class QualityMetrics(CamelModel):
    total_standards: int
    active_standards: int
    total_inspections: int
    passed_inspections: int
    failed_inspections: int
    pass_rate: float
    total_defects: int
    open_defects: int
    quality_score: float
