"""
Service layer for test automation.

A run passes only when every test in it passed.  Reports summarise the
company's runs at the moment they are generated.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from erp_api.app.core.errors import invalid_state, not_found
from erp_api.app.core.store import InMemoryStore
from erp_api.app.schemas.qa import (
    AutomationMetrics,
    AutomationRun,
    AutomationScript,
    ReportCreate,
    RunCreate,
    ScriptCreate,
    TestReport,
)

logger = logging.getLogger(__name__)

RUN_HISTORY = 10
REPORT_HISTORY = 12

scripts: InMemoryStore[AutomationScript] = InMemoryStore("qa_automation.scripts")
runs: InMemoryStore[AutomationRun] = InMemoryStore("qa_automation.runs")
reports: InMemoryStore[TestReport] = InMemoryStore("qa_automation.reports")


class TestAutomationService:
    @classmethod
    async def create_script(cls, company_id: str, data: ScriptCreate) -> AutomationScript:
        script = scripts.add(AutomationScript(company_id=company_id, **data.model_dump()))
        logger.info("Automation script created: %s (%s)", script.name, script.framework)
        return script

    @classmethod
    async def run_script(cls, company_id: str, data: RunCreate) -> AutomationRun:
        script = scripts.get_owned(data.script_id, company_id)
        if script is None:
            raise not_found("Script not found")
        if script.status == "deprecated":
            raise invalid_state("Script is deprecated")
        success_rate = data.passed_tests * 100 / data.total_tests if data.total_tests else 0
        run = runs.add(
            AutomationRun(
                company_id=company_id,
                failed_tests=data.total_tests - data.passed_tests,
                success_rate=success_rate,
                status="passed" if success_rate == 100 else "failed",
                **data.model_dump(),
            )
        )
        logger.info("Automation run completed for %s: %s (%.1f%%)", script.name, run.status, success_rate)
        return run

    @classmethod
    async def generate_report(cls, company_id: str, data: ReportCreate) -> TestReport:
        company_runs = runs.filter(company_id=company_id)
        passed = sum(1 for r in company_runs if r.status == "passed")
        report = reports.add(
            TestReport(
                company_id=company_id,
                total_runs=len(company_runs),
                passed_runs=passed,
                failed_runs=len(company_runs) - passed,
                pass_rate=passed * 100 / len(company_runs) if company_runs else 0,
                **data.model_dump(),
            )
        )
        logger.info("Test report generated for %s: %d run(s)", report.period, report.total_runs)
        return report

    @classmethod
    async def get_scripts(cls, company_id: str, framework: Optional[str] = None) -> List[AutomationScript]:
        return scripts.filter(company_id=company_id, framework=framework)

    @classmethod
    async def get_runs(cls, company_id: str, script_id: Optional[str] = None, limit: int = RUN_HISTORY) -> List[AutomationRun]:
        return runs.filter(company_id=company_id, script_id=script_id)[-limit:]

    @classmethod
    async def get_reports(cls, company_id: str, limit: int = REPORT_HISTORY) -> List[TestReport]:
        return reports.filter(company_id=company_id)[-limit:]

    @classmethod
    async def get_metrics(cls, company_id: str) -> AutomationMetrics:
        company_scripts = scripts.filter(company_id=company_id)
        company_runs = runs.filter(company_id=company_id)
        passed = sum(1 for r in company_runs if r.status == "passed")
        return AutomationMetrics(
            total_scripts=len(company_scripts),
            active_scripts=sum(1 for s in company_scripts if s.status == "active"),
            total_runs=len(company_runs),
            passed_runs=passed,
            failed_runs=len(company_runs) - passed,
            average_success_rate=sum(r.success_rate for r in company_runs) / len(company_runs) if company_runs else 0,
            total_reports=len(reports.filter(company_id=company_id)),
        )
