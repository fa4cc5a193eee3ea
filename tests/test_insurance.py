"""Tests for the insurance management route."""

import pytest

PATH = "/api/insurance/management"


@pytest.fixture
def policy(api):
    return api.create(
        PATH,
        "create-policy",
        {
            "policyName": "Office property",
            "insuranceType": "property",
            "provider": "SafeCo",
            "coverageAmount": 100000,
            "premium": 2500,
            "startDate": "2024-01-01",
            "endDate": "2024-12-31",
        },
    )


def file_claim(api, policy, amount):
    return api.create(PATH, "file-claim", {"policyId": policy["id"], "claimAmount": amount, "description": "Flood"})


def test_claim_approval(api, policy):
    claim = file_claim(api, policy, 5000)
    assert claim["status"] == "filed"
    approved = api.ok(PATH, "approve-claim", {"claimId": claim["id"], "approvedAmount": 4000})
    assert approved["status"] == "approved"
    assert approved["approvedAmount"] == 4000


def test_approved_amount_defaults_to_claim(api, policy):
    claim = file_claim(api, policy, 750)
    assert api.ok(PATH, "approve-claim", {"claimId": claim["id"]})["approvedAmount"] == 750


def test_over_approval_rejected(api, policy):
    claim = file_claim(api, policy, 100)
    response = api.post(PATH, "approve-claim", {"claimId": claim["id"], "approvedAmount": 150})
    assert response.status_code == 422
    assert response.json()["error"]["code"] == "BUSINESS_RULE_VIOLATION"


def test_decided_claim_cannot_be_decided_again(api, policy):
    claim = file_claim(api, policy, 100)
    api.ok(PATH, "reject-claim", {"claimId": claim["id"]})
    assert api.post(PATH, "approve-claim", {"claimId": claim["id"]}).status_code == 400


def test_claim_on_unknown_policy(api):
    assert api.post(PATH, "file-claim", {"policyId": "x", "claimAmount": 5}).status_code == 404


def test_metrics(api, policy):
    first = file_claim(api, policy, 1000)
    second = file_claim(api, policy, 2000)
    api.ok(PATH, "approve-claim", {"claimId": first["id"]})
    api.ok(PATH, "reject-claim", {"claimId": second["id"]})

    metrics = api.fetch(PATH, "metrics")
    assert metrics["totalPolicies"] == 1
    assert metrics["activePolicies"] == 1
    assert metrics["totalCoverage"] == 100000
    assert metrics["totalPremiums"] == 2500
    assert metrics["totalClaims"] == 2
    assert metrics["approvedClaims"] == 1
    assert metrics["totalApprovedAmount"] == 1000
    assert metrics["claimApprovalRate"] == 50
    assert metrics["insuranceCostRatio"] == 2.5
    assert len(api.fetch(PATH, "claims", policyId=policy["id"])) == 2


def test_claims_filtered_by_status(api, policy):
    approved = file_claim(api, policy, 1000)
    file_claim(api, policy, 2000)
    api.ok(PATH, "approve-claim", {"claimId": approved["id"]})

    listed = api.fetch(PATH, "claims", status="approved")
    assert [c["id"] for c in listed] == [approved["id"]]
    assert [c["status"] for c in api.fetch(PATH, "claims", policyId=policy["id"], status="filed")] == ["filed"]
