"""Tests for the logistics route."""

import pytest

PATH = "/api/logistics"


@pytest.fixture
def route(api):
    return api.create(
        PATH, "create-route", {"name": "North", "origin": "Depot", "destination": "Town", "distance": 40, "cost": 300}
    )


def test_delivery_status_stamps_times(api, route):
    """Test that pickup and delivery times follow the status changes."""
    delivery = api.create(PATH, "create-delivery", {"routeId": route["id"], "driver": "Sam"})
    assert delivery["status"] == "pending"
    assert delivery["trackingNumber"].startswith("TRK-")

    picked = api.ok(PATH, "update-delivery-status", {"deliveryId": delivery["id"], "status": "in-progress"})
    assert picked["pickupTime"] is not None
    assert picked["deliveryTime"] is None

    delivered = api.ok(PATH, "update-delivery-status", {"deliveryId": delivery["id"], "status": "completed"})
    assert delivered["deliveryTime"] is not None
    assert len(api.fetch(PATH, "deliveries", status="completed")) == 1


def test_delivery_needs_route(api):
    assert api.post(PATH, "create-delivery", {"routeId": "nope"}).status_code == 404


def test_warehouse_utilization(api):
    warehouse = api.create(PATH, "create-warehouse", {"name": "Main", "location": "Dock", "capacity": 1000})
    assert warehouse["currentUtilization"] == 0
    api.ok(PATH, "update-utilization", {"warehouseId": warehouse["id"], "currentUtilization": 250})
    assert api.post(PATH, "update-utilization", {"warehouseId": warehouse["id"], "currentUtilization": 5000}).status_code == 422
    assert api.fetch(PATH, "metrics")["warehouseUtilization"] == 25


def test_metrics(api, route):
    first = api.create(PATH, "create-delivery", {"routeId": route["id"]})
    api.create(PATH, "create-delivery", {"routeId": route["id"]})
    api.ok(PATH, "update-delivery-status", {"deliveryId": first["id"], "status": "failed"})

    metrics = api.fetch(PATH, "metrics")
    assert metrics["totalRoutes"] == 1
    assert metrics["totalDeliveries"] == 2
    assert metrics["failedDeliveries"] == 1
    assert metrics["costPerDelivery"] == 150
