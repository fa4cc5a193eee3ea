"""
Service layer for warehouse operations.

Picking orders move from ``pending`` to ``completed`` once; a packing
order can only be opened for a completed picking order and inherits its
warehouse.  Warehouse utilization may not exceed capacity.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from erp_api.app.core.errors import business_rule_violation, invalid_state, not_found
from erp_api.app.core.store import InMemoryStore, document_number
from erp_api.app.schemas.warehouse import (
    PackingOrder,
    PackingOrderCreate,
    PickingOrder,
    PickingOrderCreate,
    Warehouse,
    WarehouseCreate,
    WarehouseMetrics,
    WarehouseZone,
    ZoneCreate,
)
from erp_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)

AVERAGE_PICKING_TIME = 2.5

warehouses: InMemoryStore[Warehouse] = InMemoryStore("warehouse.warehouses")
zones: InMemoryStore[WarehouseZone] = InMemoryStore("warehouse.zones")
picking_orders: InMemoryStore[PickingOrder] = InMemoryStore("warehouse.picking_orders")
packing_orders: InMemoryStore[PackingOrder] = InMemoryStore("warehouse.packing_orders")


class WarehouseService:
    @classmethod
    def _require_warehouse(cls, company_id: str, warehouse_id: str) -> Warehouse:
        warehouse = warehouses.get_owned(warehouse_id, company_id)
        if warehouse is None:
            raise not_found("Warehouse not found")
        return warehouse

    @classmethod
    async def create_warehouse(cls, company_id: str, data: WarehouseCreate) -> Warehouse:
        warehouse = warehouses.add(Warehouse(company_id=company_id, **data.model_dump()))
        logger.info("Warehouse created: %s", warehouse.warehouse_name)
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
    async def create_zone(cls, company_id: str, data: ZoneCreate) -> WarehouseZone:
        cls._require_warehouse(company_id, data.warehouse_id)
        zone = zones.add(WarehouseZone(company_id=company_id, **data.model_dump()))
        logger.info("Warehouse zone created: %s (%s)", zone.zone_name, zone.zone_type)
        return zone

    @classmethod
    async def create_picking_order(cls, company_id: str, data: PickingOrderCreate) -> PickingOrder:
        cls._require_warehouse(company_id, data.warehouse_id)
        values = data.model_dump()
        values["order_code"] = data.order_code or document_number("PICK")
        order = picking_orders.add(PickingOrder(company_id=company_id, **values))
        logger.info("Picking order created: %s (%d line(s))", order.order_code, len(order.items))
        return order

    @classmethod
    async def complete_picking_order(cls, company_id: str, picking_order_id: str) -> Optional[PickingOrder]:
        order = picking_orders.get_owned(picking_order_id, company_id)
        if order is None:
            return None
        if order.status in ("completed", "cancelled"):
            raise invalid_state(f"Picking order is already {order.status}")
        order.status = "completed"
        order.completed_at = datetime.utcnow()
        logger.info("Picking order completed: %s", order.order_code)
        await AuditService.record("complete", "picking_order", order)
        return order

    @classmethod
    async def create_packing_order(cls, company_id: str, data: PackingOrderCreate) -> PackingOrder:
        picking = picking_orders.get_owned(data.picking_order_id, company_id)
        if picking is None:
            raise not_found("Picking order not found")
        if picking.status != "completed":
            raise invalid_state("Picking order is not completed")
        values = data.model_dump()
        values["packing_code"] = data.packing_code or document_number("PACK")
        order = packing_orders.add(PackingOrder(company_id=company_id, warehouse_id=picking.warehouse_id, **values))
        logger.info("Packing order created: %s", order.packing_code)
        return order

    @classmethod
    async def complete_packing_order(cls, company_id: str, packing_order_id: str) -> Optional[PackingOrder]:
        order = packing_orders.get_owned(packing_order_id, company_id)
        if order is None:
            return None
        if order.status == "completed":
            raise invalid_state("Packing order is already completed")
        order.status = "completed"
        order.completed_at = datetime.utcnow()
        return order

    @classmethod
    async def get_warehouses(cls, company_id: str) -> List[Warehouse]:
        return warehouses.filter(company_id=company_id)

    @classmethod
    async def get_zones(cls, company_id: str, warehouse_id: Optional[str] = None) -> List[WarehouseZone]:
        return zones.filter(company_id=company_id, warehouse_id=warehouse_id)

    @classmethod
    async def get_picking_orders(
        cls, company_id: str, warehouse_id: Optional[str] = None, status: Optional[str] = None
    ) -> List[PickingOrder]:
        return picking_orders.filter(company_id=company_id, warehouse_id=warehouse_id, status=status)

    @classmethod
    async def get_packing_orders(cls, company_id: str, picking_order_id: Optional[str] = None) -> List[PackingOrder]:
        return packing_orders.filter(company_id=company_id, picking_order_id=picking_order_id)

    @classmethod
    async def get_metrics(cls, company_id: str) -> WarehouseMetrics:
        company_warehouses = warehouses.filter(company_id=company_id)
        company_picking = picking_orders.filter(company_id=company_id)
        capacity = sum(w.capacity for w in company_warehouses)
        utilization = sum(w.current_utilization for w in company_warehouses)
        return WarehouseMetrics(
            total_warehouses=len(company_warehouses),
            active_warehouses=sum(1 for w in company_warehouses if w.status == "active"),
            total_zones=len(zones.filter(company_id=company_id)),
            total_capacity=capacity,
            total_utilization=utilization,
            utilization_rate=utilization * 100 / capacity if capacity else 0,
            pending_picking_orders=sum(1 for o in company_picking if o.status == "pending"),
            completed_picking_orders=sum(1 for o in company_picking if o.status == "completed"),
            packing_orders=len(packing_orders.filter(company_id=company_id)),
            average_picking_time=AVERAGE_PICKING_TIME,
        )
