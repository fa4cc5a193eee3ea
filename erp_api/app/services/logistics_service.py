"""
Service layer for logistics.

Deliveries run along routes.  Moving a delivery ``in-progress`` stamps
the pickup time; ``completed`` stamps the delivery time.  The average
delivery time is measured in hours over completed deliveries.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from erp_api.app.core.errors import business_rule_violation, not_found
from erp_api.app.core.store import InMemoryStore, document_number
from erp_api.app.schemas.logistics import (
    Delivery,
    DeliveryCreate,
    DeliveryStatus,
    LogisticsMetrics,
    Route,
    RouteCreate,
    Warehouse,
    WarehouseCreate,
)
from erp_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)

warehouses: InMemoryStore[Warehouse] = InMemoryStore("logistics.warehouses")
routes: InMemoryStore[Route] = InMemoryStore("logistics.routes")
deliveries: InMemoryStore[Delivery] = InMemoryStore("logistics.deliveries")


class LogisticsService:
    @classmethod
    async def create_warehouse(cls, company_id: str, data: WarehouseCreate) -> Warehouse:
        warehouse = warehouses.add(Warehouse(company_id=company_id, **data.model_dump()))
        logger.info("Warehouse created: %s (capacity %.0f)", warehouse.name, warehouse.capacity)
        return warehouse

    @classmethod
    async def update_utilization(cls, company_id: str, warehouse_id: str, utilization: float) -> Optional[Warehouse]:
        warehouse = warehouses.get_owned(warehouse_id, company_id)
        if warehouse is None:
            return None
        if utilization > warehouse.capacity:
            raise business_rule_violation("Utilization exceeds warehouse capacity")
        warehouse.current_utilization = utilization
        return warehouse

    @classmethod
    async def create_route(cls, company_id: str, data: RouteCreate) -> Route:
        route = routes.add(Route(company_id=company_id, **data.model_dump()))
        logger.info("Route created: %s (%s -> %s)", route.name, route.origin, route.destination)
        return route

    @classmethod
    async def create_delivery(cls, company_id: str, data: DeliveryCreate) -> Delivery:
        if routes.get_owned(data.route_id, company_id) is None:
            raise not_found("Route not found")
        delivery = deliveries.add(
            Delivery(company_id=company_id, tracking_number=document_number("TRK"), **data.model_dump())
        )
        logger.info("Delivery created: %s on route %s", delivery.tracking_number, delivery.route_id)
        await AuditService.record("create", "delivery", delivery)
        return delivery

    @classmethod
    async def update_delivery_status(cls, company_id: str, delivery_id: str, status: DeliveryStatus) -> Optional[Delivery]:
        delivery = deliveries.get_owned(delivery_id, company_id)
        if delivery is None:
            return None
        delivery.status = status
        if status == "in-progress":
            delivery.pickup_time = datetime.utcnow()
        elif status == "completed":
            delivery.delivery_time = datetime.utcnow()
        logger.info("Delivery %s is now %s", delivery.tracking_number, status)
        await AuditService.record("update-status", "delivery", delivery, status=status)
        return delivery

    @classmethod
    async def get_warehouses(cls, company_id: str) -> List[Warehouse]:
        return warehouses.filter(company_id=company_id)

    @classmethod
    async def get_routes(cls, company_id: str) -> List[Route]:
        return routes.filter(company_id=company_id)

    @classmethod
    async def get_deliveries(cls, company_id: str, status: Optional[str] = None) -> List[Delivery]:
        return deliveries.filter(company_id=company_id, status=status)

    @classmethod
    async def get_metrics(cls, company_id: str) -> LogisticsMetrics:
        company_warehouses = warehouses.filter(company_id=company_id)
        company_routes = routes.filter(company_id=company_id)
        company_deliveries = deliveries.filter(company_id=company_id)
        capacity = sum(w.capacity for w in company_warehouses)
        used = sum(w.current_utilization for w in company_warehouses)
        timed = [
            (d.delivery_time - d.pickup_time).total_seconds() / 3600
            for d in company_deliveries
            if d.status == "completed" and d.pickup_time and d.delivery_time
        ]
        return LogisticsMetrics(
            total_warehouses=len(company_warehouses),
            warehouse_utilization=used / capacity * 100 if capacity > 0 else 0,
            total_routes=len(company_routes),
            total_deliveries=len(company_deliveries),
            completed_deliveries=sum(1 for d in company_deliveries if d.status == "completed"),
            failed_deliveries=sum(1 for d in company_deliveries if d.status == "failed"),
            cost_per_delivery=sum(r.cost for r in company_routes) / len(company_deliveries) if company_deliveries else 0,
            average_delivery_time=sum(timed) / len(timed) if timed else 0,
        )
