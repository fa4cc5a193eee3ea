"""Tests for the test automation route."""

import pytest

PATH = "/api/qa/automation"


@pytest.fixture
def script(api):
    return api.create(PATH, "create-script", {"name": "Checkout flow", "framework": "cypress", "testCaseIds": ["tc-1"]})


def test_run_status_follows_success_rate(api, script):
    """Test that only a fully passing run is marked passed."""
    green = api.create(PATH, "run-script", {"scriptId": script["id"], "totalTests": 8, "passedTests": 8})
    red = api.create(PATH, "run-script", {"scriptId": script["id"], "totalTests": 8, "passedTests": 6})
    assert green["status"] == "passed"
    assert red["status"] == "failed"
    assert red["successRate"] == 75
    assert red["failedTests"] == 2

    metrics = api.fetch(PATH, "metrics")
    assert metrics["totalRuns"] == 2
    assert metrics["passedRuns"] == 1
    assert metrics["failedRuns"] == 1
    assert metrics["averageSuccessRate"] == 87.5


def test_run_validation(api, script):
    assert api.post(PATH, "run-script", {"scriptId": script["id"], "totalTests": 2, "passedTests": 3}).status_code == 400
    assert api.post(PATH, "run-script", {"scriptId": "x", "totalTests": 1, "passedTests": 1}).status_code == 404


def test_runs_listing_keeps_last_ten(api, script):
    for passed in range(12):
        api.create(PATH, "run-script", {"scriptId": script["id"], "totalTests": 20, "passedTests": passed})
    listed = api.fetch(PATH, "runs", scriptId=script["id"])
    assert len(listed) == 10
    assert listed[-1]["passedTests"] == 11


def test_report_summarises_runs(api, script):
    api.create(PATH, "run-script", {"scriptId": script["id"], "totalTests": 4, "passedTests": 4})
    api.create(PATH, "run-script", {"scriptId": script["id"], "totalTests": 4, "passedTests": 1})
    report = api.create(PATH, "generate-report", {"name": "Nightly", "period": "2024-05"})
    assert report["totalRuns"] == 2
    assert report["passRate"] == 50
    assert len(api.fetch(PATH, "reports")) == 1
    assert api.fetch(PATH, "scripts", framework="cypress")[0]["testCaseIds"] == ["tc-1"]
