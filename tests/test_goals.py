"""Tests for the goal tracking route."""

import pytest

PATH = "/api/goals/tracking"


@pytest.fixture
def objective(api):
    return api.create(PATH, "create-objective", {"objectiveName": "Grow revenue", "priority": "high"})


def test_progress_completes_key_result(api, objective):
    """Test that reaching the target completes the key result and objective."""
    kr = api.create(
        PATH, "create-key-result", {"objectiveId": objective["id"], "keyResultName": "New clients", "targetValue": 10}
    )
    assert kr["currentValue"] == 0
    assert kr["status"] == "pending"

    api.create(PATH, "update-progress", {"keyResultId": kr["id"], "progressValue": 4})
    [partial] = api.fetch(PATH, "key-results", objectiveId=objective["id"])
    assert partial["status"] == "in-progress"
    assert api.fetch(PATH, "objectives")[0]["progress"] == 40

    api.create(PATH, "update-progress", {"keyResultId": kr["id"], "progressValue": 12})
    [done] = api.fetch(PATH, "key-results")
    assert done["status"] == "completed"
    [updated_objective] = api.fetch(PATH, "objectives")
    assert updated_objective["progress"] == 100
    assert updated_objective["status"] == "completed"
    assert len(api.fetch(PATH, "progress", keyResultId=kr["id"])) == 2


def test_metrics(api, objective):
    first = api.create(PATH, "create-key-result", {"objectiveId": objective["id"], "keyResultName": "A", "targetValue": 1})
    api.create(PATH, "create-key-result", {"objectiveId": objective["id"], "keyResultName": "B", "targetValue": 1})
    api.ok(PATH, "complete-key-result", {"keyResultId": first["id"]})

    metrics = api.fetch(PATH, "metrics")
    assert metrics["totalObjectives"] == 1
    assert metrics["activeObjectives"] == 1
    assert metrics["completedKeyResults"] == 1
    assert metrics["keyResultCompletionRate"] == 50
    assert metrics["goalTrackingScore"] == 79.3


def test_key_result_needs_objective(api):
    response = api.post(PATH, "create-key-result", {"objectiveId": "x", "keyResultName": "A", "targetValue": 1})
    assert response.status_code == 404


def test_progress_on_unknown_key_result(api):
    assert api.post(PATH, "update-progress", {"keyResultId": "x", "progressValue": 1}).status_code == 404
    assert api.post(PATH, "complete-key-result", {"keyResultId": "x"}).status_code == 404
