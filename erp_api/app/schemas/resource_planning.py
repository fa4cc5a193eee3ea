"""Pydantic schemas for resource planning: resources, allocations and schedules."""

from datetime import date
from typing import Literal

from pydantic import Field, model_validator

from .base import CamelModel, Record, code_field

ResourceType = Literal["human", "equipment", "material", "facility"]
AllocationStatus = Literal["pending", "active", "completed"]


class ResourceCreate(CamelModel):
    resource_code: str = code_field("RES")
    resource_name: str = Field(..., min_length=1)
    resource_type: ResourceType
    availability: float = Field(..., ge=0)
    cost_per_unit: float = Field(0, ge=0)


class Resource(Record, ResourceCreate):
    status: Literal["available", "allocated", "unavailable"] = "available"


class AllocationCreate(CamelModel):
    project_id: str
    resource_id: str
    allocation_code: str = ""
    allocated_quantity: float = Field(..., gt=0)
    allocation_start_date: date
    allocation_end_date: date

    @model_validator(mode="after")
    def check_dates(self) -> "AllocationCreate":
        if self.allocation_end_date < self.allocation_start_date:
            raise ValueError("allocationEndDate must not be before allocationStartDate")
        return self


class ResourceAllocation(Record, AllocationCreate):
    status: AllocationStatus = "pending"


class AllocationStatusUpdate(CamelModel):
    allocation_id: str
    status: AllocationStatus


class ScheduleCreate(CamelModel):
    resource_id: str
    schedule_code: str = code_field("RS")
    schedule_name: str = ""
    start_date: date
    end_date: date
    allocated_hours: float = Field(..., ge=0)


class ResourceSchedule(Record, ScheduleCreate):
    utilization_rate: float = 0
    status: Literal["scheduled", "in-progress", "completed"] = "scheduled"


class ResourceMetrics(CamelModel):
    total_resources: int
    available_resources: int
    allocated_resources: int
    total_allocations: int
    active_allocations: int
    average_utilization_rate: float
    resource_cost_total: float
