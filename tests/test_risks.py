"""Tests for the risk management route."""

import pytest

PATH = "/api/risks/management"


def risk_payload(**overrides):
    payload = {"riskName": "Supplier default", "riskType": "operational", "probability": "medium", "impact": "high"}
    payload.update(overrides)
    return payload


@pytest.fixture
def risk(api):
    return api.create(PATH, "create-risk", risk_payload())


def test_risk_lifecycle(api, risk):
    """Test assessment and mitigation moving the risk through its states."""
    assert risk["status"] == "identified"

    api.create(PATH, "assess-risk", {"riskId": risk["id"], "riskScore": 12, "assessor": "cro"})
    assert api.fetch(PATH, "risks")[0]["status"] == "assessed"

    mitigation = api.create(
        PATH, "create-mitigation", {"riskId": risk["id"], "mitigationName": "Second supplier", "dueDate": "2024-09-01"}
    )
    assert mitigation["status"] == "planned"
    assert api.ok(PATH, "complete-mitigation", {"mitigationId": mitigation["id"]})["status"] == "completed"
    assert api.fetch(PATH, "risks")[0]["status"] == "mitigated"
    assert api.post(PATH, "complete-mitigation", {"mitigationId": mitigation["id"]}).status_code == 400


def test_metrics(api, risk):
    api.create(PATH, "create-risk", risk_payload(probability="critical", impact="low", riskType="financial"))
    api.create(PATH, "create-risk", risk_payload(probability="low", impact="low"))
    api.create(PATH, "assess-risk", {"riskId": risk["id"], "riskScore": 10})
    api.create(PATH, "assess-risk", {"riskId": risk["id"], "riskScore": 20})

    metrics = api.fetch(PATH, "metrics")
    assert metrics == {
        "totalRisks": 3,
        "highRisks": 1,
        "criticalRisks": 1,
        "mitigatedRisks": 0,
        "averageRiskScore": 15,
        "riskTrend": "Stable",
        "complianceRiskRate": 12.5,
    }
    assert len(api.fetch(PATH, "risks", riskType="financial")) == 1
    assert len(api.fetch(PATH, "assessments", riskId=risk["id"])) == 2


def test_children_need_risk(api):
    assert api.post(PATH, "assess-risk", {"riskId": "x", "riskScore": 1}).status_code == 404
    response = api.post(PATH, "create-mitigation", {"riskId": "x", "mitigationName": "M", "dueDate": "2024-01-01"})
    assert response.json()["error"]["message"] == "Risk not found"


def test_invalid_probability(api):
    assert api.post(PATH, "create-risk", risk_payload(probability="extreme")).status_code == 400


def test_omitted_codes_are_generated(api, risk):
    assert risk["riskCode"].startswith("RISK-")
    named = api.create(PATH, "create-risk", risk_payload(riskCode="R-7"))
    assert named["riskCode"] == "R-7"
    mitigation = api.create(PATH, "create-mitigation", {"riskId": risk["id"], "mitigationName": "Dual source", "dueDate": "2024-10-01"})
    assert mitigation["mitigationCode"].startswith("MIT-")
