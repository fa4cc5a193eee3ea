"""
Pydantic schemas for corrective and preventive maintenance.

Corrective maintenance reacts to reported faults: a request becomes a
work order, and the work order collects repairs.  Preventive
maintenance plans recurring work per asset: plans own schedules and
schedules own tasks.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field, model_validator

from .base import CamelModel, Record, code_field

Severity = Literal["critical", "high", "medium", "low"]
Priority = Literal["high", "medium", "low"]
RequestStatus = Literal["open", "assigned", "in-progress", "completed", "closed"]
WorkOrderStatus = Literal["pending", "in-progress", "completed", "cancelled"]
RepairType = Literal["replacement", "repair", "adjustment", "cleaning"]
PlanFrequency = Literal["daily", "weekly", "monthly", "quarterly", "annual"]


# corrective


class MaintenanceRequestCreate(CamelModel):
    request_code: str = ""
    request_name: str = Field(..., min_length=1)
    asset_id: str
    issue_description: str = ""
    severity: Severity = "medium"
    requested_by: Optional[str] = None


class MaintenanceRequest(Record, MaintenanceRequestCreate):
    request_date: datetime = Field(default_factory=datetime.utcnow)
    status: RequestStatus = "open"


class WorkOrderCreate(CamelModel):
    request_id: str
    work_order_code: str = ""
    work_order_name: str = ""
    assigned_to: str
    start_date: datetime = Field(default_factory=datetime.utcnow)
    estimated_end_date: Optional[datetime] = None


class WorkOrder(Record, WorkOrderCreate):
    actual_end_date: Optional[datetime] = None
    status: WorkOrderStatus = "in-progress"


class WorkOrderRef(CamelModel):
    work_order_id: str


class RepairCreate(CamelModel):
    work_order_id: str
    repair_code: str = code_field("REP")
    repair_name: str = Field(..., min_length=1)
    repair_type: RepairType = "repair"
    description: str = ""
    parts_cost: float = Field(0, ge=0)
    labor_cost: float = Field(0, ge=0)


class Repair(Record, RepairCreate):
    total_cost: float = 0
    status: Literal["pending", "completed"] = "pending"

    @model_validator(mode="after")
    def fill_total_cost(self) -> "Repair":
        self.total_cost = self.parts_cost + self.labor_cost
        return self


class RepairRef(CamelModel):
    repair_id: str


class CorrectiveMaintenanceMetrics(CamelModel):
    total_requests: int
    open_requests: int
    completed_requests: int
    total_work_orders: int
    active_work_orders: int
    completed_work_orders: int
    total_repairs: int
    completed_repairs: int
    total_repair_cost: float
    average_resolution_time: float


# preventive


class MaintenancePlanCreate(CamelModel):
    plan_code: str = code_field("PMP")
    plan_name: str = Field(..., min_length=1)
    asset_id: str
    maintenance_type: PlanFrequency = "monthly"
    description: str = ""


class MaintenancePlan(Record, MaintenancePlanCreate):
    status: Literal["active", "inactive", "archived"] = "active"


class PlanScheduleCreate(CamelModel):
    plan_id: str
    schedule_code: str = code_field("PMS")
    schedule_name: str = ""
    scheduled_date: datetime
    assigned_to: str = ""
    estimated_duration: float = Field(0, ge=0, description="Hours")


class PlanSchedule(Record, PlanScheduleCreate):
    status: WorkOrderStatus = "pending"
    completed_date: Optional[datetime] = None


class PlanScheduleRef(CamelModel):
    schedule_id: str


class MaintenanceTaskCreate(CamelModel):
    schedule_id: str
    task_code: str = code_field("PMT")
    task_name: str = Field(..., min_length=1)
    task_description: str = ""
    priority: Priority = "medium"


class MaintenanceTask(Record, MaintenanceTaskCreate):
    status: Literal["pending", "in-progress", "completed"] = "pending"


class MaintenanceTaskRef(CamelModel):
    task_id: str


class PreventiveMaintenanceMetrics(CamelModel):
    total_plans: int
    active_plans: int
    total_schedules: int
    scheduled_maintenance: int
    completed_schedules: int
    total_tasks: int
    completed_tasks: int
    compliance_rate: float
    maintenance_efficiency: float
