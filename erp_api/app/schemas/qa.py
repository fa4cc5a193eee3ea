"""Pydantic schemas for QA test cases, executions, bug reports and test automation."""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field, model_validator

from .base import CamelModel, Record

Priority = Literal["low", "medium", "high", "critical"]
TestCaseStatus = Literal["draft", "active", "deprecated"]
ExecutionResult = Literal["passed", "failed", "blocked", "skipped"]
BugStatus = Literal["open", "in-progress", "resolved", "closed"]
ScriptType = Literal["selenium", "cypress", "playwright", "appium"]


class TestCaseCreate(CamelModel):
    name: str = Field(..., min_length=1)
    description: str = ""
    module: str = ""
    priority: Priority = "medium"
    steps: List[str] = []
    expected_result: str = ""
    created_by: str = ""


class TestCase(Record, TestCaseCreate):
    status: TestCaseStatus = "active"
    updated_at: datetime = Field(default_factory=datetime.utcnow)


class TestCaseStatusUpdate(CamelModel):
    test_case_id: str
    status: TestCaseStatus


class ExecutionCreate(CamelModel):
    test_case_id: str
    executed_by: str = ""
    result: ExecutionResult
    notes: str = ""
    duration: float = Field(0, ge=0, description="Seconds")
    environment: str = ""


class TestExecution(Record, ExecutionCreate):
    execution_date: datetime = Field(default_factory=datetime.utcnow)


class BugCreate(CamelModel):
    title: str = Field(..., min_length=1)
    description: str = ""
    severity: Priority = "medium"
    test_case_id: Optional[str] = None
    reported_by: str = ""


class BugReport(Record, BugCreate):
    status: BugStatus = "open"
    assigned_to: Optional[str] = None
    updated_at: datetime = Field(default_factory=datetime.utcnow)


class BugAssignment(CamelModel):
    bug_id: str
    assigned_to: str


class BugRef(CamelModel):
    bug_id: str


class QAMetrics(CamelModel):
    total_test_cases: int
    active_test_cases: int
    total_executions: int
    pass_rate: float
    open_bugs: int
    resolved_bugs: int
    critical_bugs: int


class ScriptCreate(CamelModel):
    name: str = Field(..., min_length=1)
    description: str = ""
    framework: ScriptType = "playwright"
    test_case_ids: List[str] = []
    script_content: str = ""
    created_by: str = ""


class AutomationScript(Record, ScriptCreate):
    status: TestCaseStatus = "active"


class RunCreate(CamelModel):
    script_id: str
    total_tests: int = Field(..., ge=0)
    passed_tests: int = Field(..., ge=0)
    logs: str = ""
    duration: float = Field(0, ge=0, description="Seconds")

    @model_validator(mode="after")
    def check_counts(self) -> "RunCreate":
        if self.passed_tests > self.total_tests:
            raise ValueError("passedTests must not exceed totalTests")
        return self


class AutomationRun(Record, RunCreate):
    failed_tests: int
    success_rate: float
    status: Literal["running", "passed", "failed", "error"]
    start_time: datetime = Field(default_factory=datetime.utcnow)


class ReportCreate(CamelModel):
    name: str = ""
    period: str = Field(..., min_length=1)
    environment: str = ""


class TestReport(Record, ReportCreate):
    total_runs: int
    passed_runs: int
    failed_runs: int
    pass_rate: float
    execution_date: datetime = Field(default_factory=datetime.utcnow)


class AutomationMetrics(CamelModel):
    total_scripts: int
    active_scripts: int
    total_runs: int
    passed_runs: int
    failed_runs: int
    average_success_rate: float
    total_reports: int
