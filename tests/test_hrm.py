"""Tests for the HRM employees route."""

import pytest

PATH = "/api/hrm/employees"


def employee_payload(**overrides):
    payload = {
        "firstName": "Jane",
        "lastName": "Doe",
        "email": "jane@acme.test",
        "phone": "555-0100",
        "department": "Engineering",
        "position": "Developer",
        "salary": 5000,
        "hireDate": "2024-01-15",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def employee(api):
    return api.create(PATH, "create-employee", employee_payload())


def test_create_employee_is_listed(api, employee):
    """Test that a created employee appears in the listing with defaults."""
    assert employee["status"] == "active"
    assert employee["companyId"] == "acme"
    assert len(employee["id"]) == 9

    listed = api.fetch(PATH, "employees")
    assert [e["id"] for e in listed] == [employee["id"]]


def test_action_in_body(client, auth_headers):
    """Test that the action may be sent inside the JSON body."""
    body = {"action": "create-employee", **employee_payload()}
    response = client.post(PATH, json=body, headers=auth_headers)
    assert response.status_code == 201
    assert response.json()["firstName"] == "Jane"


def test_filter_employees_by_status(api, employee):
    """Test the status filter on the employee listing."""
    api.ok(PATH, "update-employee-status", {"employeeId": employee["id"], "status": "on-leave"})
    assert api.fetch(PATH, "employees", status="active") == []
    assert len(api.fetch(PATH, "employees", status="on-leave")) == 1


def test_metrics(api):
    """Test HR metrics over several employees."""
    first = api.create(PATH, "create-employee", employee_payload(salary=4000))
    api.create(PATH, "create-employee", employee_payload(salary=6000, department="Sales"))
    api.ok(PATH, "update-employee-status", {"employeeId": first["id"], "status": "on-leave"})
    api.create(
        PATH,
        "request-leave",
        {"employeeId": first["id"], "type": "vacation", "startDate": "2024-06-01", "endDate": "2024-06-05"},
    )

    metrics = api.fetch(PATH, "metrics")
    assert metrics == {
        "totalEmployees": 2,
        "activeEmployees": 1,
        "onLeave": 1,
        "averageSalary": 5000.0,
        "departmentCount": 2,
        "pendingLeaveRequests": 1,
    }


def test_leave_request_approval(api, employee):
    """Test requesting and approving leave."""
    request = api.create(
        PATH,
        "request-leave",
        {"employeeId": employee["id"], "type": "sick", "startDate": "2024-03-01", "endDate": "2024-03-02"},
    )
    assert request["status"] == "pending"

    approved = api.ok(PATH, "approve-leave", {"requestId": request["id"], "approvedBy": "boss"})
    assert approved["status"] == "approved"
    assert approved["approvedBy"] == "boss"

    repeated = api.post(PATH, "approve-leave", {"requestId": request["id"], "status": "rejected"})
    assert repeated.status_code == 400
    assert repeated.json()["error"]["code"] == "INVALID_STATE"
    assert api.fetch(PATH, "leave-requests")[0]["status"] == "approved"


def test_leave_request_for_unknown_employee(api):
    """Test that leave for an unknown employee is a 404."""
    response = api.post(
        PATH,
        "request-leave",
        {"employeeId": "missing", "type": "sick", "startDate": "2024-03-01", "endDate": "2024-03-02"},
    )
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


def test_approve_unknown_leave_request(api):
    response = api.post(PATH, "approve-leave", {"requestId": "nope"})
    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Leave request not found"


def test_attendance_check_in_and_out(api, employee):
    """Test recording attendance and checking out."""
    record = api.create(
        PATH,
        "record-attendance",
        {"employeeId": employee["id"], "date": "2024-05-01", "checkIn": "2024-05-01T09:00:00"},
    )
    assert record["status"] == "present"
    assert record["checkOut"] is None

    updated = api.ok(PATH, "record-checkout", {"attendanceId": record["id"], "checkOut": "2024-05-01T17:30:00"})
    assert updated["checkOut"] == "2024-05-01T17:30:00"

    history = api.fetch(PATH, "attendance", employeeId=employee["id"])
    assert len(history) == 1


def test_attendance_history_is_limited(api, employee):
    """Test that attendance history returns only the latest records."""
    for day in range(1, 6):
        api.create(
            PATH,
            "record-attendance",
            {"employeeId": employee["id"], "date": f"2024-05-0{day}", "checkIn": f"2024-05-0{day}T09:00:00"},
        )
    history = api.fetch(PATH, "attendance", employeeId=employee["id"], limit=2)
    assert [r["date"] for r in history] == ["2024-05-04", "2024-05-05"]


def test_attendance_requires_employee_id(api):
    response = api.get(PATH, "attendance")
    assert response.status_code == 400


def test_performance_review(api, employee):
    review = api.create(
        PATH,
        "create-review",
        {"employeeId": employee["id"], "rating": 4, "feedback": "Solid", "goals": ["Lead"], "reviewedBy": "boss"},
    )
    assert review["rating"] == 4
    assert api.fetch(PATH, "reviews", employeeId=employee["id"])[0]["id"] == review["id"]


def test_review_rating_out_of_range(api, employee):
    response = api.post(
        PATH,
        "create-review",
        {"employeeId": employee["id"], "rating": 9, "reviewedBy": "boss"},
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


def test_delete_employee_removes_from_listing(api, employee):
    """Test that deleting an employee removes it from subsequent listings."""
    assert api.ok(PATH, "delete-employee", {"employeeId": employee["id"]}) == {"success": True}
    assert api.fetch(PATH, "employees") == []
    assert api.post(PATH, "delete-employee", {"employeeId": employee["id"]}).status_code == 404


def test_invalid_action(api):
    assert api.get(PATH, "bogus").status_code == 400
    response = api.post(PATH, "bogus")
    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Invalid action"


def test_missing_validation_fields(api):
    response = api.post(PATH, "create-employee", {"firstName": "Only"})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


def test_leave_requests_filtered_by_employee(api, employee):
    other = api.create(PATH, "create-employee", employee_payload(firstName="Bob"))
    for person in (employee, other):
        api.create(
            PATH,
            "request-leave",
            {"employeeId": person["id"], "type": "personal", "startDate": "2024-07-01", "endDate": "2024-07-02"},
        )

    listed = api.fetch(PATH, "leave-requests", employeeId=employee["id"])
    assert [r["employeeId"] for r in listed] == [employee["id"]]
    assert len(api.fetch(PATH, "leave-requests", employeeId=other["id"], status="pending")) == 1
    assert api.fetch(PATH, "leave-requests", employeeId=other["id"], status="approved") == []
