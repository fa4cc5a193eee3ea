"""Tests for the asset management route."""

import pytest

PATH = "/api/assets/management"


@pytest.fixture
def asset(api):
    return api.create(
        PATH,
        "create-asset",
        {
            "assetCode": "LAP-001",
            "name": "Laptop",
            "category": "IT",
            "purchaseDate": "2024-01-10",
            "purchasePrice": 1500,
            "location": "HQ",
        },
    )


def test_create_asset_defaults(asset):
    assert asset["currentValue"] == 1500
    assert asset["depreciation"] == 0
    assert asset["status"] == "active"


def test_schedule_and_record_maintenance(api, asset):
    """Test that recording maintenance completes the schedule."""
    schedule = api.create(
        PATH,
        "schedule-maintenance",
        {"assetId": asset["id"], "maintenanceType": "preventive", "frequency": "quarterly", "estimatedCost": 100},
    )
    assert schedule["status"] == "scheduled"
    assert schedule["nextMaintenanceDate"] > schedule["lastMaintenanceDate"]

    record = api.create(
        PATH,
        "record-maintenance",
        {"assetId": asset["id"], "scheduleId": schedule["id"], "description": "Cleaning", "cost": 80},
    )
    assert record["cost"] == 80
    [updated] = api.fetch(PATH, "schedules", assetId=asset["id"])
    assert updated["status"] == "completed"
    assert len(api.fetch(PATH, "records")) == 1


def test_metrics(api, asset):
    api.create(
        PATH,
        "create-asset",
        {"assetCode": "DSK-1", "name": "Desk", "category": "Furniture", "purchaseDate": "2023-02-01", "purchasePrice": 500},
    )
    api.ok(PATH, "update-asset-status", {"assetId": asset["id"], "status": "maintenance"})
    api.create(PATH, "schedule-maintenance", {"assetId": asset["id"]})
    api.create(PATH, "record-maintenance", {"assetId": asset["id"], "description": "Fix", "cost": 40})

    metrics = api.fetch(PATH, "metrics")
    assert metrics == {
        "totalAssets": 2,
        "activeAssets": 1,
        "totalAssetValue": 2000,
        "totalDepreciation": 0,
        "maintenanceScheduled": 1,
        "maintenanceOverdue": 0,
        "totalMaintenanceCost": 40,
    }


def test_assets_filtered_by_status(api, asset):
    api.ok(PATH, "update-asset-status", {"assetId": asset["id"], "status": "retired"})
    assert api.fetch(PATH, "assets", status="active") == []
    assert len(api.fetch(PATH, "assets", status="retired")) == 1


def test_maintenance_for_unknown_asset(api):
    response = api.post(PATH, "schedule-maintenance", {"assetId": "ghost"})
    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Asset not found"


def test_unknown_schedule(api, asset):
    response = api.post(
        PATH, "record-maintenance", {"assetId": asset["id"], "scheduleId": "none", "description": "x"}
    )
    assert response.status_code == 404
