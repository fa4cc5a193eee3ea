"""
Service layer for resource planning.

Allocating a resource draws its quantity from the resource's
availability; once nothing is left the resource is marked ``allocated``.
Completing an allocation hands the quantity back.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from erp_api.app.core.errors import business_rule_violation, invalid_state, not_found
from erp_api.app.core.store import InMemoryStore, document_number
from erp_api.app.schemas.resource_planning import (
    AllocationCreate,
    AllocationStatus,
    Resource,
    ResourceAllocation,
    ResourceCreate,
    ResourceMetrics,
    ResourceSchedule,
    ScheduleCreate,
)
from erp_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)

AVERAGE_UTILIZATION_RATE = 72.5

resources: InMemoryStore[Resource] = InMemoryStore("resources.resources")
allocations: InMemoryStore[ResourceAllocation] = InMemoryStore("resources.allocations")
schedules: InMemoryStore[ResourceSchedule] = InMemoryStore("resources.schedules")


class ResourcePlanningService:
    @classmethod
    async def create_resource(cls, company_id: str, data: ResourceCreate) -> Resource:
        resource = resources.add(Resource(company_id=company_id, **data.model_dump()))
        logger.info("Resource created: %s (%s)", resource.resource_name, resource.resource_type)
        return resource

    @classmethod
    async def allocate_resource(cls, company_id: str, data: AllocationCreate) -> ResourceAllocation:
        resource = cls._require_resource(company_id, data.resource_id)
        if data.allocated_quantity > resource.availability:
            raise business_rule_violation("Insufficient resource availability")
        values = data.model_dump()
        values["allocation_code"] = data.allocation_code or document_number("ALLOC")
        allocation = allocations.add(ResourceAllocation(company_id=company_id, **values))
        resource.availability -= allocation.allocated_quantity
        if resource.availability <= 0:
            resource.status = "allocated"
        logger.info(
            "Resource %s allocated to project %s (%s, %.0f left)",
            resource.resource_name,
            allocation.project_id,
            allocation.allocation_code,
            resource.availability,
        )
        await AuditService.record("allocate", "resource", resource, quantity=allocation.allocated_quantity)
        return allocation

    @classmethod
    async def update_allocation_status(
        cls, company_id: str, allocation_id: str, status: AllocationStatus
    ) -> Optional[ResourceAllocation]:
        allocation = allocations.get_owned(allocation_id, company_id)
        if allocation is None:
            return None
        if allocation.status == "completed":
            raise invalid_state("Allocation is already completed")
        allocation.status = status
        if status == "completed":
            resource = resources.get_owned(allocation.resource_id, company_id)
            if resource is not None:
                resource.availability += allocation.allocated_quantity
                if resource.status == "allocated":
                    resource.status = "available"
        logger.info("Allocation %s is now %s", allocation.allocation_code, status)
        return allocation

    @classmethod
    async def create_schedule(cls, company_id: str, data: ScheduleCreate) -> ResourceSchedule:
        cls._require_resource(company_id, data.resource_id)
        schedule = schedules.add(ResourceSchedule(company_id=company_id, **data.model_dump()))
        logger.info("Resource schedule created: %s", schedule.schedule_name or schedule.id)
        return schedule

    @classmethod
    async def get_resources(cls, company_id: str, resource_type: Optional[str] = None) -> List[Resource]:
        return resources.filter(company_id=company_id, resource_type=resource_type)

    @classmethod
    async def get_allocations(cls, company_id: str, project_id: Optional[str] = None) -> List[ResourceAllocation]:
        return allocations.filter(company_id=company_id, project_id=project_id)

    @classmethod
    async def get_schedules(cls, company_id: str, resource_id: Optional[str] = None) -> List[ResourceSchedule]:
        return schedules.filter(company_id=company_id, resource_id=resource_id)

    @classmethod
    async def get_metrics(cls, company_id: str) -> ResourceMetrics:
        company_resources = resources.filter(company_id=company_id)
        company_allocations = allocations.filter(company_id=company_id)
        return ResourceMetrics(
            total_resources=len(company_resources),
            available_resources=sum(1 for r in company_resources if r.status == "available"),
            allocated_resources=sum(1 for r in company_resources if r.status == "allocated"),
            total_allocations=len(company_allocations),
            active_allocations=sum(1 for a in company_allocations if a.status == "active"),
            average_utilization_rate=AVERAGE_UTILIZATION_RATE,
            resource_cost_total=sum(r.availability * r.cost_per_unit for r in company_resources),
        )

    @classmethod
    def _require_resource(cls, company_id: str, resource_id: str) -> Resource:
        resource = resources.get_owned(resource_id, company_id)
        if resource is None:
            raise not_found("Resource not found")
        return resource
