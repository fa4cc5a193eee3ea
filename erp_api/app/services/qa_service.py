"""
Service layer for QA test cases, executions and bug reports.

Deprecated test cases cannot be executed.  Assigning a bug moves it to
``in-progress``; the pass rate counts ``passed`` executions over all
executions of the company's test cases.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from erp_api.app.core.errors import invalid_state, not_found
from erp_api.app.core.store import InMemoryStore
from erp_api.app.schemas.qa import (
    BugCreate,
    BugReport,
    ExecutionCreate,
    QAMetrics,
    TestCase,
    TestCaseCreate,
    TestCaseStatus,
    TestExecution,
)
from erp_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)

test_cases: InMemoryStore[TestCase] = InMemoryStore("qa.test_cases")
executions: InMemoryStore[TestExecution] = InMemoryStore("qa.executions")
bugs: InMemoryStore[BugReport] = InMemoryStore("qa.bugs")


class QAService:
    @classmethod
    async def create_test_case(cls, company_id: str, data: TestCaseCreate) -> TestCase:
        test_case = test_cases.add(TestCase(company_id=company_id, **data.model_dump()))
        logger.info("Test case created: %s", test_case.name)
        return test_case

    @classmethod
    async def update_test_case_status(cls, company_id: str, test_case_id: str, status: TestCaseStatus) -> Optional[TestCase]:
        test_case = test_cases.get_owned(test_case_id, company_id)
        if test_case is None:
            return None
        test_case.status = status
        test_case.updated_at = datetime.utcnow()
        return test_case

    @classmethod
    async def execute_test(cls, company_id: str, data: ExecutionCreate) -> TestExecution:
        test_case = test_cases.get_owned(data.test_case_id, company_id)
        if test_case is None:
            raise not_found("Test case not found")
        if test_case.status == "deprecated":
            raise invalid_state("Test case is deprecated")
        execution = executions.add(TestExecution(company_id=company_id, **data.model_dump()))
        logger.info("Test executed: %s - %s", test_case.name, execution.result)
        return execution

    @classmethod
    async def report_bug(cls, company_id: str, data: BugCreate) -> BugReport:
        if data.test_case_id and test_cases.get_owned(data.test_case_id, company_id) is None:
            raise not_found("Test case not found")
        bug = bugs.add(BugReport(company_id=company_id, **data.model_dump()))
        logger.info("Bug reported: %s (%s)", bug.title, bug.severity)
        await AuditService.record("report", "bug", bug, severity=bug.severity)
        return bug

    @classmethod
    async def assign_bug(cls, company_id: str, bug_id: str, assigned_to: str) -> Optional[BugReport]:
        bug = bugs.get_owned(bug_id, company_id)
        if bug is None:
            return None
        if bug.status in ("resolved", "closed"):
            raise invalid_state(f"Bug is already {bug.status}")
        bug.assigned_to = assigned_to
        bug.status = "in-progress"
        bug.updated_at = datetime.utcnow()
        logger.info("Bug %s assigned to %s", bug_id, assigned_to)
        return bug

    @classmethod
    async def resolve_bug(cls, company_id: str, bug_id: str) -> Optional[BugReport]:
        bug = bugs.get_owned(bug_id, company_id)
        if bug is None:
            return None
        if bug.status in ("resolved", "closed"):
            raise invalid_state(f"Bug is already {bug.status}")
        bug.status = "resolved"
        bug.updated_at = datetime.utcnow()
        logger.info("Bug resolved: %s", bug_id)
        await AuditService.record("resolve", "bug", bug)
        return bug

    @classmethod
    async def get_test_cases(cls, company_id: str, module: Optional[str] = None) -> List[TestCase]:
        return test_cases.filter(company_id=company_id, module=module)

    @classmethod
    async def get_executions(cls, company_id: str, test_case_id: Optional[str] = None) -> List[TestExecution]:
        return executions.filter(company_id=company_id, test_case_id=test_case_id)

    @classmethod
    async def get_bugs(cls, company_id: str, status: Optional[str] = None) -> List[BugReport]:
        return bugs.filter(company_id=company_id, status=status)

    @classmethod
    async def get_metrics(cls, company_id: str) -> QAMetrics:
        company_cases = test_cases.filter(company_id=company_id)
        company_executions = executions.filter(company_id=company_id)
        company_bugs = bugs.filter(company_id=company_id)
        passed = sum(1 for e in company_executions if e.result == "passed")
        return QAMetrics(
            total_test_cases=len(company_cases),
            active_test_cases=sum(1 for c in company_cases if c.status == "active"),
            total_executions=len(company_executions),
            pass_rate=passed * 100 / len(company_executions) if company_executions else 0,
            open_bugs=sum(1 for b in company_bugs if b.status == "open"),
            resolved_bugs=sum(1 for b in company_bugs if b.status == "resolved"),
            critical_bugs=sum(1 for b in company_bugs if b.severity == "critical"),
        )
