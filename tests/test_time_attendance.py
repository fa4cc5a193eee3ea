"""Tests for the time and attendance route."""

from datetime import date

PATH = "/api/time-attendance/management"


def test_check_out_computes_working_hours(api):
    record = api.create(
        PATH, "record-attendance", {"employeeId": "emp-1", "attendanceDate": "2024-05-01", "checkInTime": "2024-05-01T09:00:00"}
    )
    assert record["workingHours"] == 0
    assert record["checkOutTime"] is None

    updated = api.ok(PATH, "record-checkout", {"recordId": record["id"], "checkOutTime": "2024-05-01T17:20:00"})
    assert updated["workingHours"] == 8.33


def test_check_out_before_check_in(api):
    record = api.create(PATH, "record-attendance", {"employeeId": "emp-1", "checkInTime": "2024-05-01T09:00:00"})
    response = api.post(PATH, "record-checkout", {"recordId": record["id"], "checkOutTime": "2024-05-01T08:00:00"})
    assert response.status_code == 400


def test_leave_request_days_and_approval(api):
    """Test the leave span and the single decision allowed per request."""
    request = api.create(
        PATH,
        "create-leave-request",
        {"employeeId": "emp-1", "leaveType": "annual", "startDate": "2024-07-01", "endDate": "2024-07-05"},
    )
    assert request["numberOfDays"] == 4
    assert request["status"] == "pending"

    approved = api.ok(PATH, "approve-leave-request", {"leaveRequestId": request["id"]})
    assert approved["status"] == "approved"
    assert approved["approvedBy"]
    response = api.post(PATH, "approve-leave-request", {"leaveRequestId": request["id"], "status": "rejected"})
    assert response.status_code == 400


def test_leave_request_dates_validated(api):
    response = api.post(
        PATH,
        "create-leave-request",
        {"employeeId": "emp-1", "leaveType": "sick", "startDate": "2024-07-05", "endDate": "2024-07-01"},
    )
    assert response.status_code == 400


def test_timesheet_flow(api):
    sheet = api.create(
        PATH,
        "create-timesheet",
        {"employeeId": "emp-1", "weekStartDate": "2024-05-06", "weekEndDate": "2024-05-12", "totalHours": 42, "overtimeHours": 2},
    )
    assert sheet["status"] == "draft"
    early = api.post(PATH, "update-timesheet-status", {"timesheetId": sheet["id"], "status": "approved"})
    assert early.status_code == 400

    api.ok(PATH, "update-timesheet-status", {"timesheetId": sheet["id"], "status": "submitted"})
    approved = api.ok(PATH, "update-timesheet-status", {"timesheetId": sheet["id"], "status": "approved", "approvedBy": "mgr"})
    assert approved["approvedBy"] == "mgr"
    assert len(api.fetch(PATH, "timesheets", employeeId="emp-1")) == 1


def test_metrics_count_today(api):
    today = date.today().isoformat()
    api.create(PATH, "record-attendance", {"employeeId": "a", "checkInTime": f"{today}T09:00:00"})
    api.create(PATH, "record-attendance", {"employeeId": "b", "checkInTime": f"{today}T09:40:00", "status": "late"})
    api.create(PATH, "record-attendance", {"employeeId": "c", "attendanceDate": "2020-01-01", "checkInTime": "2020-01-01T09:00:00"})
    api.create(
        PATH, "create-leave-request", {"employeeId": "a", "leaveType": "sick", "startDate": "2024-07-01", "endDate": "2024-07-02"}
    )

    metrics = api.fetch(PATH, "metrics")
    assert metrics["totalEmployees"] == 150
    assert metrics["presentToday"] == 1
    assert metrics["lateToday"] == 1
    assert metrics["absentToday"] == 0
    assert metrics["pendingLeaves"] == 1
    assert metrics["averageAttendanceRate"] == 92.5
    assert len(api.fetch(PATH, "records", employeeId="a")) == 1
