"""Tests for the sales pipeline route."""

import pytest

PATH = "/api/sales/pipeline"


def deal_payload(**overrides):
    payload = {"name": "Big order", "customerId": "cust-1", "value": 1000, "expectedCloseDate": "2024-09-30"}
    payload.update(overrides)
    return payload


@pytest.fixture
def deal(api):
    return api.create(PATH, "create-deal", deal_payload())


def test_stage_update_uses_default_probability(api, deal):
    """Test that a stage change without probability takes the stage default."""
    assert deal["stage"] == "prospecting"
    assert deal["probability"] == 0

    moved = api.ok(PATH, "update-stage", {"dealId": deal["id"], "stage": "proposal"})
    assert moved["probability"] == 50
    assert moved["actualCloseDate"] is None

    custom = api.ok(PATH, "update-stage", {"dealId": deal["id"], "stage": "negotiation", "probability": 60})
    assert custom["probability"] == 60


def test_closing_a_deal(api, deal):
    won = api.ok(PATH, "update-stage", {"dealId": deal["id"], "stage": "closed-won"})
    assert won["actualCloseDate"] is not None
    response = api.post(PATH, "update-stage", {"dealId": deal["id"], "stage": "proposal"})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_STATE"


def test_metrics(api, deal):
    second = api.create(PATH, "create-deal", deal_payload(value=3000))
    third = api.create(PATH, "create-deal", deal_payload(value=2000))
    api.ok(PATH, "update-stage", {"dealId": deal["id"], "stage": "negotiation"})
    api.ok(PATH, "update-stage", {"dealId": second["id"], "stage": "closed-won"})
    api.ok(PATH, "update-stage", {"dealId": third["id"], "stage": "closed-lost"})

    metrics = api.fetch(PATH, "metrics")
    assert metrics["totalDeals"] == 3
    assert metrics["totalPipelineValue"] == 6000
    assert metrics["weightedPipelineValue"] == 3750
    assert metrics["averageDealValue"] == 2000
    assert metrics["dealsByStage"]["negotiation"] == 1
    assert metrics["dealsByStage"]["prospecting"] == 0
    assert metrics["winRate"] == 50
    assert len(api.fetch(PATH, "deals", stage="closed-won")) == 1


def test_activities(api, deal):
    activity = api.create(PATH, "add-activity", {"dealId": deal["id"], "type": "call", "description": "Intro"})
    assert activity["completed"] is False
    done = api.ok(PATH, "complete-activity", {"activityId": activity["id"]})
    assert done["completed"] is True
    assert done["completedDate"] is not None
    assert len(api.fetch(PATH, "activities", dealId=deal["id"])) == 1
    assert api.post(PATH, "add-activity", {"dealId": "x", "type": "call"}).status_code == 404


def test_forecast_accuracy(api):
    """Test forecast accuracy before and after actual revenue is known."""
    forecast = api.create(PATH, "create-forecast", {"month": "2024-05", "forecastedRevenue": 8000})
    assert forecast["accuracy"] == 0
    updated = api.ok(PATH, "update-forecast", {"forecastId": forecast["id"], "actualRevenue": 6000})
    assert updated["accuracy"] == 75

    for month in range(1, 13):
        api.create(PATH, "create-forecast", {"month": f"2023-{month:02d}", "forecastedRevenue": 1})
    assert len(api.fetch(PATH, "forecasts")) == 12


def test_forecast_month_format(api):
    assert api.post(PATH, "create-forecast", {"month": "May", "forecastedRevenue": 1}).status_code == 400
