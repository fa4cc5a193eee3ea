"""Pydantic schemas for the risk register, assessments and mitigations."""

from datetime import date
from typing import Literal

from pydantic import Field

from .base import CamelModel, Record, code_field

RiskType = Literal["operational", "financial", "strategic", "compliance", "reputational"]
RiskLevel = Literal["low", "medium", "high", "critical"]
RiskStatus = Literal["identified", "assessed", "mitigated", "monitored", "closed"]


class RiskCreate(CamelModel):
    risk_code: str = code_field("RISK")
    risk_name: str = Field(..., min_length=1)
    risk_type: RiskType
    probability: RiskLevel
    impact: RiskLevel
    description: str = ""
    mitigation: str = ""


class Risk(Record, RiskCreate):
    status: RiskStatus = "identified"


class RiskStatusUpdate(CamelModel):
    risk_id: str
    status: RiskStatus


class AssessmentCreate(CamelModel):
    risk_id: str
    assessment_code: str = code_field("RA")
    assessment_date: date = Field(default_factory=date.today)
    risk_score: float = Field(..., ge=0)
    residual_risk: float = Field(0, ge=0)
    assessor: str = ""
    findings: str = ""


class RiskAssessment(Record, AssessmentCreate):
    status: Literal["pending", "completed", "approved"] = "completed"


class MitigationCreate(CamelModel):
    risk_id: str
    mitigation_code: str = code_field("MIT")
    mitigation_name: str = Field(..., min_length=1)
    description: str = ""
    owner: str = ""
    due_date: date


class RiskMitigation(Record, MitigationCreate):
    status: Literal["planned", "in-progress", "completed", "on-hold"] = "planned"


class MitigationRef(CamelModel):
    mitigation_id: str


class RiskMetrics(CamelModel):
    total_risks: int
    high_risks: int
    critical_risks: int
    mitigated_risks: int
    average_risk_score: float
    risk_trend: str
    compliance_risk_rate: float
