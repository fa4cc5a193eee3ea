"""Tests for the compliance management route."""

PATH = "/api/compliance/management"


def test_audit_and_issue_lifecycle(api):
    """Test completing an audit and resolving an issue it raised."""
    policy = api.create(
        PATH,
        "create-policy",
        {"policyName": "GDPR", "policyType": "data-protection", "effectiveDate": "2024-01-01"},
    )
    assert policy["status"] == "active"
    audit = api.create(
        PATH,
        "create-audit",
        {"policyId": policy["id"], "auditName": "Annual", "auditDate": "2024-06-01", "auditor": "Eve"},
    )
    assert audit["status"] == "scheduled"

    completed = api.ok(PATH, "complete-audit", {"auditId": audit["id"], "findings": "Two gaps"})
    assert completed["findings"] == "Two gaps"
    assert api.post(PATH, "complete-audit", {"auditId": audit["id"]}).status_code == 400

    issue = api.create(PATH, "create-issue", {"auditId": audit["id"], "issueName": "Retention", "severity": "high"})
    resolved = api.ok(PATH, "resolve-issue", {"issueId": issue["id"]})
    assert resolved["status"] == "resolved"
    assert resolved["resolvedAt"] is not None


def test_unknown_references(api):
    response = api.post(PATH, "create-audit", {"policyId": "x", "auditName": "A", "auditDate": "2024-06-01", "auditor": "E"})
    assert response.status_code == 404
    assert api.post(PATH, "create-issue", {"auditId": "x", "issueName": "I"}).status_code == 404
    assert api.post(PATH, "resolve-issue", {"issueId": "x"}).status_code == 404


def test_metrics(api):
    policy = api.create(PATH, "create-policy", {"policyName": "Safety", "policyType": "health-safety", "effectiveDate": "2024-01-01"})
    api.create(PATH, "create-policy", {"policyName": "Tax", "policyType": "financial", "effectiveDate": "2024-01-01"})
    api.ok(PATH, "update-policy-status", {"policyId": policy["id"], "status": "archived"})
    first = api.create(PATH, "create-issue", {"issueName": "A", "severity": "critical"})
    api.create(PATH, "create-issue", {"issueName": "B"})
    api.ok(PATH, "resolve-issue", {"issueId": first["id"]})

    metrics = api.fetch(PATH, "metrics")
    assert metrics == {
        "totalPolicies": 2,
        "activePolicies": 1,
        "totalAudits": 0,
        "completedAudits": 0,
        "totalIssues": 2,
        "openIssues": 1,
        "resolvedIssues": 1,
        "complianceScore": 88.5,
        "riskLevel": "Low",
    }
    assert len(api.fetch(PATH, "issues", severity="critical")) == 1
    assert len(api.fetch(PATH, "policies", status="active")) == 1
