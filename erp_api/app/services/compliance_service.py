"""Service layer for compliance management."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from erp_api.app.core.errors import invalid_state, not_found
from erp_api.app.core.store import InMemoryStore
from erp_api.app.schemas.compliance import (
    ComplianceAudit,
    ComplianceAuditCreate,
    ComplianceIssue,
    ComplianceMetrics,
    CompliancePolicy,
    IssueCreate,
    PolicyCreate,
    PolicyStatus,
)
from erp_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)

COMPLIANCE_SCORE = 88.5
RISK_LEVEL = "Low"

policies: InMemoryStore[CompliancePolicy] = InMemoryStore("compliance.policies")
audits: InMemoryStore[ComplianceAudit] = InMemoryStore("compliance.audits")
issues: InMemoryStore[ComplianceIssue] = InMemoryStore("compliance.issues")


class ComplianceService:
    @classmethod
    async def create_policy(cls, company_id: str, data: PolicyCreate) -> CompliancePolicy:
        policy = policies.add(CompliancePolicy(company_id=company_id, **data.model_dump()))
        logger.info("Compliance policy created: %s", policy.policy_name)
        await AuditService.record("create", "compliance_policy", policy)
        return policy

    @classmethod
    async def update_policy_status(cls, company_id: str, policy_id: str, status: PolicyStatus) -> Optional[CompliancePolicy]:
        policy = policies.get_owned(policy_id, company_id)
        if policy is None:
            return None
        policy.status = status
        await AuditService.record("update-status", "compliance_policy", policy, status=status)
        return policy

    @classmethod
    async def create_audit(cls, company_id: str, data: ComplianceAuditCreate) -> ComplianceAudit:
        if data.policy_id and policies.get_owned(data.policy_id, company_id) is None:
            raise not_found("Policy not found")
        audit = audits.add(ComplianceAudit(company_id=company_id, **data.model_dump()))
        logger.info("Compliance audit scheduled: %s by %s", audit.audit_name, audit.auditor)
        return audit

    @classmethod
    async def complete_audit(cls, company_id: str, audit_id: str, findings: str) -> Optional[ComplianceAudit]:
        audit = audits.get_owned(audit_id, company_id)
        if audit is None:
            return None
        if audit.status in ("completed", "closed"):
            raise invalid_state(f"Audit is already {audit.status}")
        audit.status = "completed"
        audit.findings = findings
        logger.info("Compliance audit completed: %s", audit_id)
        await AuditService.record("complete", "compliance_audit", audit)
        return audit

    @classmethod
    async def create_issue(cls, company_id: str, data: IssueCreate) -> ComplianceIssue:
        if data.audit_id and audits.get_owned(data.audit_id, company_id) is None:
            raise not_found("Audit not found")
        issue = issues.add(ComplianceIssue(company_id=company_id, **data.model_dump()))
        logger.info("Compliance issue raised: %s (%s)", issue.issue_name, issue.severity)
        return issue

    @classmethod
    async def resolve_issue(cls, company_id: str, issue_id: str) -> Optional[ComplianceIssue]:
        issue = issues.get_owned(issue_id, company_id)
        if issue is None:
            return None
        if issue.status in ("resolved", "closed"):
            raise invalid_state(f"Issue is already {issue.status}")
        issue.status = "resolved"
        issue.resolved_at = datetime.utcnow()
        logger.info("Compliance issue resolved: %s", issue_id)
        await AuditService.record("resolve", "compliance_issue", issue)
        return issue

    @classmethod
    async def get_policies(cls, company_id: str, status: Optional[str] = None) -> List[CompliancePolicy]:
        return policies.filter(company_id=company_id, status=status)

    @classmethod
    async def get_audits(cls, company_id: str, status: Optional[str] = None) -> List[ComplianceAudit]:
        return audits.filter(company_id=company_id, status=status)

    @classmethod
    async def get_issues(cls, company_id: str, severity: Optional[str] = None) -> List[ComplianceIssue]:
        return issues.filter(company_id=company_id, severity=severity)

    @classmethod
    async def get_metrics(cls, company_id: str) -> ComplianceMetrics:
        company_policies = policies.filter(company_id=company_id)
        company_audits = audits.filter(company_id=company_id)
        company_issues = issues.filter(company_id=company_id)
        return ComplianceMetrics(
            total_policies=len(company_policies),
            active_policies=sum(1 for p in company_policies if p.status == "active"),
            total_audits=len(company_audits),
            completed_audits=sum(1 for a in company_audits if a.status == "completed"),
            total_issues=len(company_issues),
            open_issues=sum(1 for i in company_issues if i.status in ("open", "in-progress")),
            resolved_issues=sum(1 for i in company_issues if i.status == "resolved"),
            compliance_score=COMPLIANCE_SCORE,
            risk_level=RISK_LEVEL,
        )
