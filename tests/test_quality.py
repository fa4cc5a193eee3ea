"""Tests for the quality management route."""

PATH = "/api/quality/management"


def test_inspections_and_pass_rate(api):
    """Test inspection results feeding the quality metrics."""
    standard = api.create(PATH, "create-standard", {"standardName": "ISO 9001", "standardType": "iso"})
    assert standard["status"] == "active"

    for result in ("pass", "pass", "fail", "conditional"):
        inspection = api.create(
            PATH,
            "create-inspection",
            {"standardId": standard["id"], "inspectorId": "qa-1", "result": result, "productId": "P-1"},
        )
        assert inspection["status"] == "completed"

    metrics = api.fetch(PATH, "metrics")
    assert metrics["totalInspections"] == 4
    assert metrics["passedInspections"] == 2
    assert metrics["failedInspections"] == 1
    assert metrics["passRate"] == 50
    assert metrics["qualityScore"] == 94.5
    assert len(api.fetch(PATH, "inspections", result="fail")) == 1


def test_inspection_with_unknown_standard(api):
    response = api.post(PATH, "create-inspection", {"standardId": "x", "inspectorId": "qa-1", "result": "pass"})
    assert response.status_code == 404


def test_defect_resolution(api):
    defect = api.create(PATH, "create-defect", {"defectName": "Scratch", "defectType": "minor", "severity": 2})
    assert defect["status"] == "open"
    assert api.fetch(PATH, "metrics")["openDefects"] == 1

    resolved = api.ok(PATH, "resolve-defect", {"defectId": defect["id"]})
    assert resolved["status"] == "resolved"
    assert resolved["resolvedAt"] is not None
    assert api.fetch(PATH, "defects", status="open") == []


def test_defect_severity_range(api):
    response = api.post(PATH, "create-defect", {"defectName": "Crack", "severity": 11})
    assert response.status_code == 400


def test_resolve_unknown_defect(api):
    assert api.post(PATH, "resolve-defect", {"defectId": "x"}).status_code == 404
