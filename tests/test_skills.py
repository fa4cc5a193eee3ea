"""Tests for the skills development route."""

import pytest

PATH = "/api/skills/development"


@pytest.fixture
def skill(api):
    return api.create(PATH, "create-skill", {"skillName": "Python", "category": "engineering"})


def test_skill_gap_levels(api, skill):
    """Test gap levels between proficiency levels."""
    gap = api.create(
        PATH,
        "identify-skill-gap",
        {"employeeId": "emp-1", "requiredSkillId": skill["id"], "currentLevel": "beginner", "requiredLevel": "advanced"},
    )
    assert gap["gapLevel"] == 2
    assert gap["trainingRecommended"] == "Yes"

    none = api.create(
        PATH,
        "identify-skill-gap",
        {"employeeId": "emp-2", "requiredSkillId": skill["id"], "currentLevel": "expert", "requiredLevel": "intermediate"},
    )
    assert none["gapLevel"] == 0
    assert none["trainingRecommended"] == "No"
    assert len(api.fetch(PATH, "skill-gaps", employeeId="emp-1")) == 1


def test_metrics(api, skill):
    for employee, level in (("emp-1", "beginner"), ("emp-1", "expert"), ("emp-2", "advanced")):
        api.create(PATH, "assign-employee-skill", {"employeeId": employee, "skillId": skill["id"], "proficiencyLevel": level})
    api.create(
        PATH,
        "identify-skill-gap",
        {"employeeId": "emp-1", "requiredSkillId": skill["id"], "currentLevel": "beginner", "requiredLevel": "expert"},
    )
    plan = api.create(
        PATH,
        "create-development-plan",
        {"employeeId": "emp-1", "planName": "Grow", "targetSkills": [skill["id"]], "startDate": "2024-01-01", "endDate": "2024-12-31"},
    )
    assert plan["status"] == "draft"
    assert api.ok(PATH, "update-plan-progress", {"planId": plan["id"], "progressPercentage": 30})["status"] == "active"

    assert api.fetch(PATH, "metrics") == {
        "totalSkills": 1,
        "employeesWithSkills": 2,
        "averageProficiency": 8 / 3,
        "skillGapsIdentified": 1,
        "developmentPlansActive": 1,
        "completedPlans": 0,
        "averageGapLevel": 3,
    }


def test_plan_completion(api, skill):
    plan = api.create(
        PATH,
        "create-development-plan",
        {"employeeId": "emp-1", "planName": "Grow", "startDate": "2024-01-01", "endDate": "2024-12-31"},
    )
    assert api.ok(PATH, "update-plan-progress", {"planId": plan["id"], "progressPercentage": 100})["status"] == "completed"


def test_unknown_skill(api):
    response = api.post(PATH, "assign-employee-skill", {"employeeId": "e", "skillId": "x", "proficiencyLevel": "expert"})
    assert response.status_code == 404
    response = api.post(
        PATH,
        "create-development-plan",
        {"employeeId": "e", "planName": "P", "targetSkills": ["x"], "startDate": "2024-01-01", "endDate": "2024-02-01"},
    )
    assert response.json()["error"]["message"] == "Skill not found"


def test_invalid_level(api, skill):
    response = api.post(PATH, "assign-employee-skill", {"employeeId": "e", "skillId": skill["id"], "proficiencyLevel": "guru"})
    assert response.status_code == 400
