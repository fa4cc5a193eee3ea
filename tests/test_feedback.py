"""Tests for the feedback management route."""

import pytest

PATH = "/api/feedback/management"


@pytest.fixture
def survey(api):
    return api.create(PATH, "create-survey", {"title": "Onboarding survey", "category": "HR"})


def test_questions_sorted_by_order(api, survey):
    api.create(PATH, "add-question", {"surveyId": survey["id"], "questionText": "Second?", "order": 2})
    api.create(
        PATH,
        "add-question",
        {"surveyId": survey["id"], "questionText": "First?", "questionType": "rating", "order": 1},
    )
    listed = api.fetch(PATH, "questions", surveyId=survey["id"])
    assert [q["questionText"] for q in listed] == ["First?", "Second?"]


def test_closed_survey_rejects_responses(api, survey):
    api.create(PATH, "submit-response", {"surveyId": survey["id"], "responses": {"q1": 5}})
    api.ok(PATH, "update-survey-status", {"surveyId": survey["id"], "status": "closed"})
    response = api.post(PATH, "submit-response", {"surveyId": survey["id"], "responses": {"q1": 4}})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_STATE"


def test_response_to_unknown_survey(api):
    assert api.post(PATH, "submit-response", {"surveyId": "nope"}).status_code == 404


def test_feedback_rating_bounds(api):
    response = api.post(PATH, "submit-feedback", {"message": "Great", "rating": 6})
    assert response.status_code == 400


def test_metrics(api, survey):
    """Test response rate, average rating and satisfaction score."""
    api.ok(PATH, "update-survey-status", {"surveyId": survey["id"], "status": "active"})
    api.create(PATH, "create-survey", {"title": "Exit survey"})
    for _ in range(3):
        api.create(PATH, "submit-response", {"surveyId": survey["id"], "responses": {"q": "yes"}})

    first = api.create(PATH, "submit-feedback", {"message": "Slow delivery", "rating": 2})
    api.create(PATH, "submit-feedback", {"message": "Lovely", "rating": 5})
    api.create(PATH, "submit-feedback", {"message": "OK", "rating": 5})
    api.ok(PATH, "update-feedback-status", {"feedbackId": first["id"], "status": "resolved"})

    metrics = api.fetch(PATH, "metrics")
    assert metrics["totalSurveys"] == 2
    assert metrics["activeSurveys"] == 1
    assert metrics["totalResponses"] == 3
    assert metrics["averageResponseRate"] == 150
    assert metrics["averageRating"] == 4
    assert metrics["satisfactionScore"] == 80
    assert metrics["pendingFeedback"] == 2
    assert metrics["resolvedFeedback"] == 1
    assert len(api.fetch(PATH, "feedback", status="new")) == 2
