"""Tests for the training management route."""

import pytest

PATH = "/api/training/management"


@pytest.fixture
def session(api):
    program = api.create(
        PATH,
        "create-program",
        {"programName": "Safety", "maxParticipants": 2, "startDate": "2024-05-01", "endDate": "2024-05-31"},
    )
    return api.create(
        PATH,
        "create-session",
        {"programId": program["id"], "instructor": "Ann", "startDate": "2024-05-02T09:00:00", "endDate": "2024-05-02T17:00:00"},
    )


def test_enrollment_and_completion(api, session):
    """Test enrollment counters and pass/fail completion."""
    passing = api.create(PATH, "enroll-employee", {"employeeId": "e1", "sessionId": session["id"]})
    failing = api.create(PATH, "enroll-employee", {"employeeId": "e2", "sessionId": session["id"]})
    assert passing["status"] == "enrolled"

    assert api.ok(PATH, "complete-training", {"enrollmentId": passing["id"], "score": 80})["status"] == "completed"
    assert api.ok(PATH, "complete-training", {"enrollmentId": failing["id"], "score": 40})["status"] == "failed"

    [listed] = api.fetch(PATH, "sessions")
    assert listed["enrolledCount"] == 2
    assert listed["completedCount"] == 1

    metrics = api.fetch(PATH, "metrics")
    assert metrics["totalEnrollments"] == 2
    assert metrics["completedEnrollments"] == 1
    assert metrics["averageScore"] == 60
    assert metrics["completionRate"] == 50


def test_session_capacity(api, session):
    api.create(PATH, "enroll-employee", {"employeeId": "e1", "sessionId": session["id"]})
    api.create(PATH, "enroll-employee", {"employeeId": "e2", "sessionId": session["id"]})
    response = api.post(PATH, "enroll-employee", {"employeeId": "e3", "sessionId": session["id"]})
    assert response.status_code == 422


def test_training_completes_once(api, session):
    enrollment = api.create(PATH, "enroll-employee", {"employeeId": "e1", "sessionId": session["id"]})
    api.ok(PATH, "complete-training", {"enrollmentId": enrollment["id"], "score": 90})
    assert api.post(PATH, "complete-training", {"enrollmentId": enrollment["id"], "score": 95}).status_code == 400


def test_unknown_parents(api):
    response = api.post(
        PATH, "create-session", {"programId": "x", "instructor": "A", "startDate": "2024-01-01T09:00:00", "endDate": "2024-01-01T10:00:00"}
    )
    assert response.status_code == 404
    assert api.post(PATH, "enroll-employee", {"employeeId": "e", "sessionId": "x"}).status_code == 404


def test_program_status_filter(api, session):
    [program] = api.fetch(PATH, "programs")
    api.ok(PATH, "update-program-status", {"programId": program["id"], "status": "active"})
    assert len(api.fetch(PATH, "programs", status="active")) == 1
    assert api.fetch(PATH, "metrics")["activePrograms"] == 1
