"""Tests for the QA test case route."""

import pytest

PATH = "/api/qa/test-cases"


@pytest.fixture
def test_case(api):
    return api.create(
        PATH,
        "create-test-case",
        {"name": "Login works", "module": "auth", "priority": "high", "steps": ["open", "submit"], "expectedResult": "Dashboard"},
    )


def test_executions_drive_pass_rate(api, test_case):
    assert test_case["status"] == "active"
    for result in ("passed", "passed", "passed", "failed"):
        api.create(PATH, "execute-test", {"testCaseId": test_case["id"], "result": result, "executedBy": "qa-1"})

    metrics = api.fetch(PATH, "metrics")
    assert metrics["totalExecutions"] == 4
    assert metrics["passRate"] == 75
    assert len(api.fetch(PATH, "executions", testCaseId=test_case["id"])) == 4


def test_deprecated_case_cannot_run(api, test_case):
    api.ok(PATH, "update-test-case-status", {"testCaseId": test_case["id"], "status": "deprecated"})
    response = api.post(PATH, "execute-test", {"testCaseId": test_case["id"], "result": "passed"})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_STATE"
    assert api.post(PATH, "execute-test", {"testCaseId": "x", "result": "passed"}).status_code == 404


def test_bug_lifecycle(api, test_case):
    """Test assignment and resolution of a reported bug."""
    bug = api.create(PATH, "report-bug", {"title": "500 on login", "severity": "critical", "testCaseId": test_case["id"]})
    assert bug["status"] == "open"

    assigned = api.ok(PATH, "assign-bug", {"bugId": bug["id"], "assignedTo": "dev-1"})
    assert assigned["status"] == "in-progress"
    assert assigned["assignedTo"] == "dev-1"
    assert api.ok(PATH, "resolve-bug", {"bugId": bug["id"]})["status"] == "resolved"
    assert api.post(PATH, "resolve-bug", {"bugId": bug["id"]}).status_code == 400

    metrics = api.fetch(PATH, "metrics")
    assert metrics["openBugs"] == 0
    assert metrics["resolvedBugs"] == 1
    assert metrics["criticalBugs"] == 1
    assert len(api.fetch(PATH, "bugs", status="resolved")) == 1


def test_filter_by_module(api, test_case):
    api.create(PATH, "create-test-case", {"name": "Invoice totals", "module": "billing"})
    assert [c["name"] for c in api.fetch(PATH, "test-cases", module="auth")] == ["Login works"]
