"""Tests for the project management route."""

import pytest

PATH = "/api/projects/management"


@pytest.fixture
def project(api):
    return api.create(
        PATH,
        "create-project",
        {"projectName": "ERP rollout", "startDate": "2024-01-01", "endDate": "2024-12-31", "budget": 50000},
    )


def test_project_defaults(project):
    assert project["status"] == "planning"
    assert project["priority"] == "medium"


def test_task_progress_drives_status(api, project):
    """Test that task progress moves a task to in-progress and completed."""
    task = api.create(PATH, "create-task", {"projectId": project["id"], "taskName": "Migrate data"})
    assert task["status"] == "pending"

    assert api.ok(PATH, "update-task-progress", {"taskId": task["id"], "completionPercentage": 40})["status"] == "in-progress"
    done = api.ok(PATH, "update-task-progress", {"taskId": task["id"], "completionPercentage": 100})
    assert done["status"] == "completed"


def test_task_progress_out_of_range(api, project):
    task = api.create(PATH, "create-task", {"projectId": project["id"], "taskName": "Migrate data"})
    response = api.post(PATH, "update-task-progress", {"taskId": task["id"], "completionPercentage": 120})
    assert response.status_code == 400


def test_children_need_project(api):
    assert api.post(PATH, "create-task", {"projectId": "x", "taskName": "A"}).status_code == 404
    response = api.post(PATH, "create-milestone", {"projectId": "x", "milestoneName": "M", "targetDate": "2024-06-01"})
    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Project not found"


def test_milestones(api, project):
    milestone = api.create(
        PATH,
        "create-milestone",
        {"projectId": project["id"], "milestoneName": "Go live", "targetDate": "2024-06-01", "deliverables": ["Cutover"]},
    )
    assert milestone["status"] == "pending"
    achieved = api.ok(PATH, "update-milestone-status", {"milestoneId": milestone["id"]})
    assert achieved["status"] == "achieved"
    assert api.fetch(PATH, "milestones", projectId=project["id"])[0]["deliverables"] == ["Cutover"]


def test_metrics(api, project):
    api.create(
        PATH,
        "create-project",
        {"projectName": "Website", "startDate": "2024-01-01", "endDate": "2024-03-31", "budget": 10000},
    )
    api.ok(PATH, "update-project-status", {"projectId": project["id"], "status": "active"})
    task = api.create(PATH, "create-task", {"projectId": project["id"], "taskName": "A"})
    api.create(PATH, "create-task", {"projectId": project["id"], "taskName": "B"})
    api.ok(PATH, "update-task-progress", {"taskId": task["id"], "completionPercentage": 100})

    metrics = api.fetch(PATH, "metrics")
    assert metrics["totalProjects"] == 2
    assert metrics["activeProjects"] == 1
    assert metrics["completedTasks"] == 1
    assert metrics["taskCompletionRate"] == 50
    assert metrics["totalBudget"] == 60000
    assert metrics["budgetUtilization"] == 75.5
    assert metrics["onTimeDeliveryRate"] == 88.0
    assert len(api.fetch(PATH, "projects", status="active")) == 1
