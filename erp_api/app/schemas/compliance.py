"""Pydantic schemas for compliance policies, audits and issues."""

from datetime import date, datetime
from typing import Literal, Optional

from pydantic import Field

from .base import CamelModel, Record, code_field

PolicyType = Literal["data-protection", "labor", "environmental", "financial", "health-safety"]
PolicyStatus = Literal["draft", "active", "inactive", "archived"]
AuditType = Literal["internal", "external", "regulatory"]
IssueSeverity = Literal["low", "medium", "high", "critical"]


class PolicyCreate(CamelModel):
    policy_code: str = code_field("CP")
    policy_name: str = Field(..., min_length=1)
    description: str = ""
    policy_type: PolicyType
    version: str = "1.0"
    effective_date: date


class CompliancePolicy(Record, PolicyCreate):
    status: PolicyStatus = "active"


class PolicyStatusUpdate(CamelModel):
    policy_id: str
    status: PolicyStatus


class ComplianceAuditCreate(CamelModel):
    policy_id: Optional[str] = None
    audit_code: str = code_field("AUD")
    audit_name: str = Field(..., min_length=1)
    audit_type: AuditType = "internal"
    audit_date: date
    auditor: str = Field(..., min_length=1)


class ComplianceAudit(Record, ComplianceAuditCreate):
    findings: str = ""
    status: Literal["scheduled", "in-progress", "completed", "closed"] = "scheduled"


class AuditCompletion(CamelModel):
    audit_id: str
    findings: str = ""


class IssueCreate(CamelModel):
    audit_id: Optional[str] = None
    issue_code: str = code_field("ISS")
    issue_name: str = Field(..., min_length=1)
    severity: IssueSeverity = "medium"
    description: str = ""
    due_date: Optional[date] = None
    assigned_to: Optional[str] = None


class ComplianceIssue(Record, IssueCreate):
    status: Literal["open", "in-progress", "resolved", "closed"] = "open"
    resolved_at: Optional[datetime] = None


class IssueRef(CamelModel):
    issue_id: str


class ComplianceMetrics(CamelModel):
    total_policies: int
    active_policies: int
    total_audits: int
    completed_audits: int
    total_issues: int
    open_issues: int
    resolved_issues: int
    compliance_score: float
    risk_level: str
