"""Tests for the performance evaluation route."""

import pytest

PATH = "/api/performance/evaluation"


@pytest.fixture
def evaluation(api):
    return api.create(
        PATH,
        "create-evaluation",
        {"evaluationName": "H1 review", "employeeId": "emp-1", "evaluatorId": "mgr-1", "evaluationPeriod": "2024-H1"},
    )


def test_evaluation_defaults(evaluation):
    assert evaluation["status"] == "draft"
    assert evaluation["overallScore"] == 0


def test_complete_evaluation_uses_weighted_metrics(api, evaluation):
    """Test that the overall score defaults to the weighted metric average."""
    api.create(
        PATH,
        "add-metric",
        {"evaluationId": evaluation["id"], "metricName": "Output", "metricType": "productivity", "score": 90, "weight": 3},
    )
    api.create(
        PATH,
        "add-metric",
        {"evaluationId": evaluation["id"], "metricName": "Team", "metricType": "teamwork", "score": 70, "weight": 1},
    )
    completed = api.ok(PATH, "complete-evaluation", {"evaluationId": evaluation["id"]})
    assert completed["status"] == "completed"
    assert completed["overallScore"] == 85

    response = api.post(
        PATH,
        "add-metric",
        {"evaluationId": evaluation["id"], "metricName": "Late", "metricType": "quality", "score": 10},
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_STATE"


def test_complete_evaluation_with_explicit_score(api, evaluation):
    completed = api.ok(PATH, "complete-evaluation", {"evaluationId": evaluation["id"], "overallScore": 77})
    assert completed["overallScore"] == 77


def test_metric_for_unknown_evaluation(api):
    response = api.post(
        PATH, "add-metric", {"evaluationId": "x", "metricName": "A", "metricType": "quality", "score": 50}
    )
    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Evaluation not found"


def test_goal_progress_and_metrics(api, evaluation):
    """Test goal progress and the performance summary."""
    goal = api.create(PATH, "create-goal", {"goalName": "Ship v2", "employeeId": "emp-1", "targetValue": 10})
    other = api.create(PATH, "create-goal", {"goalName": "Mentor", "employeeId": "emp-1", "targetValue": 2})

    partial = api.ok(PATH, "update-goal-progress", {"goalId": goal["id"], "actualValue": 5})
    assert partial["status"] == "in-progress"
    done = api.ok(PATH, "update-goal-progress", {"goalId": goal["id"], "actualValue": 10})
    assert done["status"] == "completed"
    api.ok(PATH, "complete-evaluation", {"evaluationId": evaluation["id"], "overallScore": 80})

    metrics = api.fetch(PATH, "metrics")
    assert metrics == {
        "totalEvaluations": 1,
        "completedEvaluations": 1,
        "averageScore": 80,
        "totalGoals": 2,
        "completedGoals": 1,
        "goalCompletionRate": 50,
        "performanceIndex": 82.5,
    }
    assert api.ok(PATH, "complete-goal", {"goalId": other["id"]})["status"] == "completed"
    assert len(api.fetch(PATH, "goals", employeeId="emp-1")) == 2


def test_unknown_goal(api):
    assert api.post(PATH, "complete-goal", {"goalId": "x"}).status_code == 404
