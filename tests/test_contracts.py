"""Tests for the contract management route."""

from datetime import date, timedelta

import pytest

PATH = "/api/contracts/management"


def contract_payload(**overrides):
    payload = {
        "contractCode": "C-001",
        "contractName": "Cleaning services",
        "contractType": "service",
        "counterparty": "CleanCo",
        "startDate": "2024-01-01",
        "endDate": "2024-12-31",
        "value": 12000,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def contract(api):
    return api.create(PATH, "create-contract", contract_payload())


def test_contract_lifecycle(api, contract):
    assert contract["status"] == "draft"
    active = api.ok(PATH, "activate-contract", {"contractId": contract["id"]})
    assert active["status"] == "active"
    assert api.post(PATH, "activate-contract", {"contractId": contract["id"]}).status_code == 400
    assert api.ok(PATH, "terminate-contract", {"contractId": contract["id"]})["status"] == "terminated"


def test_end_date_before_start_is_invalid(api):
    response = api.post(PATH, "create-contract", contract_payload(endDate="2023-01-01"))
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


def test_clauses_listed_by_contract(api, contract):
    api.create(PATH, "add-clause", {"contractId": contract["id"], "clauseName": "Net 30", "clauseType": "payment"})
    assert len(api.fetch(PATH, "clauses", contractId=contract["id"])) == 1
    assert api.fetch(PATH, "clauses", contractId="other") == []
    assert api.post(PATH, "add-clause", {"contractId": "missing", "clauseName": "x"}).status_code == 404


def test_approved_renewal_extends_contract(api, contract):
    """Test that approving a renewal applies the new end date and value."""
    renewal = api.create(
        PATH,
        "create-renewal",
        {"contractId": contract["id"], "renewalDate": "2024-12-01", "newEndDate": "2025-12-31", "newValue": 13000},
    )
    assert renewal["status"] == "pending"
    assert api.fetch(PATH, "metrics")["pendingRenewals"] == 1

    approved = api.ok(PATH, "approve-renewal", {"renewalId": renewal["id"]})
    assert approved["status"] == "approved"
    assert approved["approvedBy"]

    [updated] = api.fetch(PATH, "contracts")
    assert updated["endDate"] == "2025-12-31"
    assert updated["value"] == 13000


def test_renewal_must_extend(api, contract):
    response = api.post(
        PATH, "create-renewal", {"contractId": contract["id"], "renewalDate": "2024-06-01", "newEndDate": "2024-06-30"}
    )
    assert response.status_code == 400


def test_metrics_expiring_soon(api):
    today = date.today()
    soon = api.create(
        PATH,
        "create-contract",
        contract_payload(startDate=str(today - timedelta(days=300)), endDate=str(today + timedelta(days=10))),
    )
    later = api.create(
        PATH,
        "create-contract",
        contract_payload(contractCode="C-2", startDate=str(today), endDate=str(today + timedelta(days=200)), value=3000),
    )
    for c in (soon, later):
        api.ok(PATH, "activate-contract", {"contractId": c["id"]})

    metrics = api.fetch(PATH, "metrics")
    assert metrics["totalContracts"] == 2
    assert metrics["activeContracts"] == 2
    assert metrics["totalContractValue"] == 15000
    assert metrics["expiringSoon"] == 1
    assert metrics["contractComplianceRate"] == 96.5
