"""Tests for the energy management route."""

PATH = "/api/energy/management"


def record(api, energy_type, amount, cost=0):
    return api.create(
        PATH,
        "record-consumption",
        {"facilityId": "plant-1", "energyType": energy_type, "consumption": amount, "cost": cost},
    )


def test_metrics_by_type(api):
    """Test consumption totals, renewable share and carbon footprint."""
    record(api, "electricity", 600, cost=120)
    record(api, "gas", 200, cost=40)
    record(api, "renewable", 200, cost=20)

    metrics = api.fetch(PATH, "metrics")
    assert metrics["totalConsumption"] == 1000
    assert metrics["renewableUsage"] == 200
    assert metrics["renewablePercentage"] == 20
    assert metrics["carbonFootprint"] == 800
    assert metrics["totalCost"] == 180
    assert metrics["averageCost"] == 60
    assert metrics["byType"] == {"electricity": 600, "gas": 200, "renewable": 200}


def test_consumptions_filtered_by_type(api):
    record(api, "electricity", 10)
    record(api, "water", 5)
    assert [c["energyType"] for c in api.fetch(PATH, "consumptions", energyType="water")] == ["water"]


def test_targets(api):
    target = api.create(
        PATH, "set-target", {"targetType": "reduction", "targetValue": 10, "targetUnit": "%", "deadline": "2025-12-31"}
    )
    assert target["status"] == "active"
    api.ok(PATH, "update-target-status", {"targetId": target["id"], "status": "achieved"})
    assert api.fetch(PATH, "metrics")["targetsAchieved"] == 1
    assert api.post(PATH, "update-target-status", {"targetId": "nope", "status": "missed"}).status_code == 404


def test_sustainability_metric(api):
    api.create(PATH, "record-metric", {"metricType": "water-usage", "value": 42.5, "unit": "m3"})
    [reading] = api.fetch(PATH, "sustainability")
    assert reading["value"] == 42.5


def test_empty_metrics(api):
    metrics = api.fetch(PATH, "metrics")
    assert metrics["renewablePercentage"] == 0
    assert metrics["byType"] == {}


def test_consumptions_filtered_by_facility(api):
    record(api, "electricity", 100)
    api.create(
        PATH,
        "record-consumption",
        {"facilityId": "office-2", "energyType": "electricity", "consumption": 50},
    )

    listed = api.fetch(PATH, "consumptions", facilityId="office-2")
    assert [c["consumption"] for c in listed] == [50]
    assert len(api.fetch(PATH, "consumptions", facilityId="plant-1", energyType="electricity")) == 1
    assert api.fetch(PATH, "consumptions", facilityId="plant-1", energyType="gas") == []
