"""Tests for the asset tracking route."""

PATH = "/api/assets/tracking"


def test_track_and_update_location(api):
    tracked = api.create(PATH, "track-location", {"assetId": "a1", "location": "HQ", "department": "IT"})
    assert tracked["status"] == "in-use"

    moved = api.ok(PATH, "update-location", {"assetId": "a1", "location": "Warehouse", "status": "in-storage"})
    assert moved["id"] == tracked["id"]
    assert moved["location"] == "Warehouse"

    metrics = api.fetch(PATH, "metrics")
    assert metrics["assetsInStorage"] == 1
    assert metrics["assetsInUse"] == 0


def test_update_untracked_asset(api):
    response = api.post(PATH, "update-location", {"assetId": "nope", "location": "X", "status": "lost"})
    assert response.status_code == 404


def test_straight_line_depreciation(api):
    """Test annual depreciation and the salvage floor on the book value."""
    schedule = api.create(
        PATH,
        "create-depreciation",
        {"assetId": "a1", "usefulLife": 2, "salvageValue": 1000, "assetCost": 5000},
    )
    assert schedule["annualDepreciation"] == 2000
    assert schedule["bookValue"] == 5000

    first = api.ok(PATH, "record-depreciation", {"scheduleId": schedule["id"]})
    assert first["accumulatedDepreciation"] == 2000
    assert first["bookValue"] == 3000

    api.ok(PATH, "record-depreciation", {"scheduleId": schedule["id"]})
    third = api.ok(PATH, "record-depreciation", {"scheduleId": schedule["id"]})
    assert third["bookValue"] == 1000
    assert third["accumulatedDepreciation"] == 4000


def test_salvage_above_cost_rejected(api):
    response = api.post(PATH, "create-depreciation", {"assetId": "a", "usefulLife": 3, "salvageValue": 10, "assetCost": 5})
    assert response.status_code == 422
    assert response.json()["error"]["code"] == "BUSINESS_RULE_VIOLATION"


def test_disposal_gain_loss_uses_book_value(api):
    schedule = api.create(PATH, "create-depreciation", {"assetId": "a1", "usefulLife": 4, "assetCost": 4000})
    api.ok(PATH, "record-depreciation", {"scheduleId": schedule["id"]})

    disposal = api.create(PATH, "dispose-asset", {"assetId": "a1", "disposalMethod": "sale", "disposalPrice": 2500})
    assert disposal["bookValue"] == 3000
    assert disposal["gainLoss"] == -500

    explicit = api.create(
        PATH, "dispose-asset", {"assetId": "a2", "disposalMethod": "scrap", "disposalPrice": 100, "bookValue": 50}
    )
    assert explicit["gainLoss"] == 50

    metrics = api.fetch(PATH, "metrics")
    assert metrics["totalDisposals"] == 2
    assert metrics["totalDisposalValue"] == 2600
    assert metrics["totalDepreciation"] == 1000


def test_locations_filtered_by_status(api):
    api.create(PATH, "track-location", {"assetId": "a1", "location": "HQ"})
    api.create(PATH, "track-location", {"assetId": "a2", "location": "Depot"})
    api.ok(PATH, "update-location", {"assetId": "a2", "location": "Truck 4", "status": "in-transit"})

    assert [loc["assetId"] for loc in api.fetch(PATH, "locations", status="in-transit")] == ["a2"]
    assert [loc["assetId"] for loc in api.fetch(PATH, "locations", assetId="a1")] == ["a1"]
