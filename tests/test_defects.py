"""Tests for the defect tracking route."""

PATH = "/api/defects/tracking"


def create_report(api, **overrides):
    body = {"reportName": "Cracked housing", "defectType": "manufacturing", "severity": "critical"}
    body.update(overrides)
    return api.create(PATH, "create-report", body)


def test_report_and_action_flow(api):
    report = create_report(api)
    assert report["status"] == "open"
    assert report["reportCode"].startswith("DEF-")

    action = api.create(
        PATH, "create-action", {"defectReportId": report["id"], "actionName": "Replace mould", "assignedTo": "qa-1"}
    )
    assert action["status"] == "pending"
    assert api.fetch(PATH, "reports")[0]["status"] == "assigned"

    api.ok(PATH, "complete-action", {"actionId": action["id"]})
    resolved = api.ok(PATH, "update-status", {"reportId": report["id"], "status": "resolved"})
    assert resolved["resolvedAt"] is not None
    assert len(api.fetch(PATH, "actions", reportId=report["id"])) == 1


def test_metrics(api):
    create_report(api)
    low = create_report(api, severity="low")
    api.ok(PATH, "update-status", {"reportId": low["id"], "status": "closed"})

    metrics = api.fetch(PATH, "metrics")
    assert metrics["totalDefects"] == 2
    assert metrics["openDefects"] == 1
    assert metrics["criticalDefects"] == 1
    assert metrics["closedDefects"] == 1
    assert metrics["averageResolutionTime"] == 4.5
    assert metrics["defectTrendScore"] == 92.3


def test_filter_by_status(api):
    create_report(api)
    assert api.fetch(PATH, "reports", status="resolved") == []


def test_action_on_unknown_report(api):
    response = api.post(PATH, "create-action", {"defectReportId": "x", "actionName": "a", "assignedTo": "b"})
    assert response.status_code == 404


def test_invalid_severity(api):
    response = api.post(PATH, "create-report", {"reportName": "X", "severity": "catastrophic"})
    assert response.status_code == 400
