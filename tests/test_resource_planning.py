"""Tests for the resource planning route."""

import pytest

PATH = "/api/resources/planning"


@pytest.fixture
def crane(api):
    return api.create(
        PATH,
        "create-resource",
        {"resourceName": "Crane", "resourceType": "equipment", "availability": 10, "costPerUnit": 100},
    )


def allocation(resource_id, quantity, **overrides):
    body = {
        "projectId": "proj-1",
        "resourceId": resource_id,
        "allocatedQuantity": quantity,
        "allocationStartDate": "2024-04-01",
        "allocationEndDate": "2024-04-30",
    }
    body.update(overrides)
    return body


def test_allocation_draws_availability(api, crane):
    """Test that allocating the whole availability marks the resource allocated."""
    first = api.create(PATH, "allocate-resource", allocation(crane["id"], 4))
    assert first["status"] == "pending"
    assert first["allocationCode"].startswith("ALLOC-")
    assert api.fetch(PATH, "resources")[0]["availability"] == 6

    api.create(PATH, "allocate-resource", allocation(crane["id"], 6))
    [resource] = api.fetch(PATH, "resources")
    assert resource["availability"] == 0
    assert resource["status"] == "allocated"


def test_over_allocation_is_rejected(api, crane):
    response = api.post(PATH, "allocate-resource", allocation(crane["id"], 11))
    assert response.status_code == 422
    assert response.json()["error"]["code"] == "BUSINESS_RULE_VIOLATION"


def test_allocation_dates_are_validated(api, crane):
    response = api.post(PATH, "allocate-resource", allocation(crane["id"], 1, allocationEndDate="2024-03-01"))
    assert response.status_code == 400


def test_completing_allocation_returns_quantity(api, crane):
    booked = api.create(PATH, "allocate-resource", allocation(crane["id"], 10))
    api.ok(PATH, "update-allocation-status", {"allocationId": booked["id"], "status": "active"})
    assert api.fetch(PATH, "metrics")["activeAllocations"] == 1

    api.ok(PATH, "update-allocation-status", {"allocationId": booked["id"], "status": "completed"})
    [resource] = api.fetch(PATH, "resources")
    assert resource["availability"] == 10
    assert resource["status"] == "available"

    again = api.post(PATH, "update-allocation-status", {"allocationId": booked["id"], "status": "completed"})
    assert again.status_code == 400


def test_schedule_and_metrics(api, crane):
    api.create(
        PATH,
        "create-resource",
        {"resourceName": "Analyst", "resourceType": "human", "availability": 2, "costPerUnit": 50},
    )
    schedule = api.create(
        PATH,
        "create-schedule",
        {"resourceId": crane["id"], "scheduleName": "April", "startDate": "2024-04-01", "endDate": "2024-04-30", "allocatedHours": 80},
    )
    assert schedule["status"] == "scheduled"
    assert schedule["utilizationRate"] == 0

    metrics = api.fetch(PATH, "metrics")
    assert metrics == {
        "totalResources": 2,
        "availableResources": 2,
        "allocatedResources": 0,
        "totalAllocations": 0,
        "activeAllocations": 0,
        "averageUtilizationRate": 72.5,
        "resourceCostTotal": 1100,
    }
    assert len(api.fetch(PATH, "resources", resourceType="human")) == 1


def test_unknown_resource(api):
    assert api.post(PATH, "allocate-resource", allocation("missing", 1)).status_code == 404
