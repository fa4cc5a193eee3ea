"""Tests for the corrective and preventive maintenance routes."""

import pytest

CORRECTIVE = "/api/maintenance/corrective"
PREVENTIVE = "/api/maintenance/preventive"


@pytest.fixture
def maintenance_request(api):
    return api.create(
        CORRECTIVE,
        "create-request",
        {"requestName": "Pump leak", "assetId": "pump-1", "issueDescription": "Leaking seal", "severity": "high"},
    )


def test_request_defaults(maintenance_request):
    assert maintenance_request["status"] == "open"
    assert maintenance_request["requestCode"].startswith("MR-")


def test_work_order_flow(api, maintenance_request):
    """Test request -> work order -> repair -> completion."""
    work_order = api.create(
        CORRECTIVE, "create-work-order", {"requestId": maintenance_request["id"], "assignedTo": "tech-1"}
    )
    assert work_order["status"] == "in-progress"
    assert api.fetch(CORRECTIVE, "requests")[0]["status"] == "in-progress"

    repair = api.create(
        CORRECTIVE,
        "create-repair",
        {"workOrderId": work_order["id"], "repairName": "Replace seal", "partsCost": 120, "laborCost": 80},
    )
    assert repair["totalCost"] == 200
    api.ok(CORRECTIVE, "complete-repair", {"repairId": repair["id"]})

    done = api.ok(CORRECTIVE, "complete-work-order", {"workOrderId": work_order["id"]})
    assert done["status"] == "completed"
    assert done["actualEndDate"] is not None
    assert api.fetch(CORRECTIVE, "requests", status="completed")[0]["id"] == maintenance_request["id"]

    metrics = api.fetch(CORRECTIVE, "metrics")
    assert metrics["completedWorkOrders"] == 1
    assert metrics["activeWorkOrders"] == 0
    assert metrics["completedRepairs"] == 1
    assert metrics["totalRepairCost"] == 200
    assert metrics["averageResolutionTime"] == 3.2

    response = api.post(CORRECTIVE, "complete-work-order", {"workOrderId": work_order["id"]})
    assert response.status_code == 400


def test_work_order_for_unknown_request(api):
    response = api.post(CORRECTIVE, "create-work-order", {"requestId": "x", "assignedTo": "t"})
    assert response.status_code == 404


def test_repair_for_unknown_work_order(api):
    response = api.post(CORRECTIVE, "create-repair", {"workOrderId": "x", "repairName": "r"})
    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Work order not found"


def test_preventive_plan_schedule_and_tasks(api):
    """Test preventive maintenance compliance after completing a schedule."""
    plan = api.create(PREVENTIVE, "create-plan", {"planName": "HVAC service", "assetId": "hvac-1"})
    assert plan["status"] == "active"

    first = api.create(PREVENTIVE, "create-schedule", {"planId": plan["id"], "scheduledDate": "2024-07-01T08:00:00"})
    api.create(PREVENTIVE, "create-schedule", {"planId": plan["id"], "scheduledDate": "2024-08-01T08:00:00"})
    task = api.create(PREVENTIVE, "create-task", {"scheduleId": first["id"], "taskName": "Replace filter"})
    assert task["status"] == "pending"

    api.ok(PREVENTIVE, "complete-task", {"taskId": task["id"]})
    completed = api.ok(PREVENTIVE, "complete-schedule", {"scheduleId": first["id"]})
    assert completed["status"] == "completed"
    assert completed["completedDate"] is not None

    metrics = api.fetch(PREVENTIVE, "metrics")
    assert metrics["totalPlans"] == 1
    assert metrics["totalSchedules"] == 2
    assert metrics["scheduledMaintenance"] == 1
    assert metrics["completedTasks"] == 1
    assert metrics["complianceRate"] == 50
    assert metrics["maintenanceEfficiency"] == 91.2


def test_schedule_for_unknown_plan(api):
    response = api.post(PREVENTIVE, "create-schedule", {"planId": "nope", "scheduledDate": "2024-07-01T08:00:00"})
    assert response.status_code == 404


def test_complete_unknown_schedule(api):
    assert api.post(PREVENTIVE, "complete-schedule", {"scheduleId": "nope"}).status_code == 404
