"""Tests for the survey analytics route."""

PATH = "/api/survey/analytics"


def test_metrics_summarise_analyses(api):
    """Test sentiment averaging, top insights and the latest trend."""
    api.create(
        PATH,
        "analyze-survey",
        {"surveyId": "s1", "totalResponses": 40, "sentimentScore": 0.5, "keyInsights": ["a", "b", "c", "d"]},
    )
    api.create(
        PATH,
        "analyze-survey",
        {"surveyId": "s2", "totalResponses": 10, "sentimentScore": 0.75, "keyInsights": ["e", "f"]},
    )
    api.create(PATH, "track-trend", {"period": "2024-Q1", "sentimentTrend": "declining"})
    api.create(PATH, "track-trend", {"period": "2024-Q2", "sentimentTrend": "improving"})

    metrics = api.fetch(PATH, "metrics")
    assert metrics["totalAnalyses"] == 2
    assert metrics["averageSentimentScore"] == 0.625
    assert metrics["topInsights"] == ["a", "b", "c", "d", "e"]
    assert metrics["feedbackTrendDirection"] == "improving"
    assert len(api.fetch(PATH, "analyses", surveyId="s1")) == 1


def test_empty_metrics(api):
    metrics = api.fetch(PATH, "metrics")
    assert metrics["feedbackTrendDirection"] == "stable"
    assert metrics["averageSentimentScore"] == 0
    assert metrics["topInsights"] == []


def test_question_analysis(api):
    analysis = api.create(
        PATH,
        "analyze-question",
        {"surveyId": "s1", "questionId": "q1", "totalResponses": 3, "responseDistribution": {"yes": 2, "no": 1}},
    )
    assert analysis["responseDistribution"] == {"yes": 2, "no": 1}
    assert api.fetch(PATH, "question-analyses", surveyId="s1")[0]["questionId"] == "q1"


def test_report_publication(api):
    report = api.create(PATH, "generate-report", {"surveyId": "s1", "reportName": "Q2 engagement", "demographics": {"sales": 4}})
    assert report["status"] == "draft"
    assert api.ok(PATH, "publish-report", {"reportId": report["id"]})["status"] == "published"

    metrics = api.fetch(PATH, "metrics")
    assert metrics["reportCount"] == 1
    assert metrics["publishedReports"] == 1
    assert api.post(PATH, "publish-report", {"reportId": "x"}).status_code == 404
