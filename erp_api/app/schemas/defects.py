"""Pydantic schemas for defect reports and the actions taken on them."""

from datetime import date, datetime
from typing import Literal, Optional

from pydantic import Field

from .base import CamelModel, Record, code_field

DefectType = Literal["design", "manufacturing", "material", "assembly", "other"]
Severity = Literal["critical", "high", "medium", "low"]
DefectStatus = Literal["open", "assigned", "in-progress", "resolved", "closed"]
ActionType = Literal["corrective", "preventive", "containment"]


class DefectReportCreate(CamelModel):
    report_code: str = ""
    report_name: str = Field(..., min_length=1)
    defect_type: DefectType = "other"
    severity: Severity
    description: str = ""
    reported_by: Optional[str] = None
    product_id: Optional[str] = None


class DefectReport(Record, DefectReportCreate):
    report_date: datetime = Field(default_factory=datetime.utcnow)
    status: DefectStatus = "open"
    resolved_at: Optional[datetime] = None


class DefectStatusUpdate(CamelModel):
    report_id: str
    status: DefectStatus


class DefectActionCreate(CamelModel):
    defect_report_id: str
    action_code: str = code_field("CA")
    action_name: str = Field(..., min_length=1)
    action_type: ActionType = "corrective"
    assigned_to: str
    due_date: Optional[date] = None


class DefectAction(Record, DefectActionCreate):
    status: Literal["pending", "in-progress", "completed"] = "pending"


class DefectActionRef(CamelModel):
    action_id: str


class DefectMetrics(CamelModel):
    total_defects: int
    open_defects: int
    critical_defects: int
    resolved_defects: int
    closed_defects: int
    total_actions: int
    completed_actions: int
    average_resolution_time: float
    defect_trend_score: float
