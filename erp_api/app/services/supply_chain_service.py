"""
Service layer for the supply chain.

Supply orders are priced from their lines (``quantity * unitPrice``)
and numbered ``PO-<milliseconds>``.  ``pendingOrders`` counts orders
still in ``draft`` or ``sent``; ``totalSpend`` sums confirmed and
delivered orders.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from erp_api.app.core.errors import invalid_state, not_found
from erp_api.app.core.store import InMemoryStore, document_number
from erp_api.app.schemas.supply_chain import (
    OrderStatus,
    Shipment,
    ShipmentCreate,
    ShipmentStatus,
    Supplier,
    SupplierCreate,
    SupplyChainMetrics,
    SupplyOrder,
    SupplyOrderCreate,
)
from erp_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)

OPEN_ORDER_STATUSES = ("draft", "sent")
COMMITTED_ORDER_STATUSES = ("confirmed", "delivered")

suppliers: InMemoryStore[Supplier] = InMemoryStore("supply_chain.suppliers")
orders: InMemoryStore[SupplyOrder] = InMemoryStore("supply_chain.orders")
shipments: InMemoryStore[Shipment] = InMemoryStore("supply_chain.shipments")


class SupplyChainService:
    @classmethod
    async def create_supplier(cls, company_id: str, data: SupplierCreate) -> Supplier:
        supplier = suppliers.add(Supplier(company_id=company_id, **data.model_dump()))
        logger.info("Supplier created: %s (lead time %d days)", supplier.name, supplier.lead_time)
        return supplier

    @classmethod
    async def create_order(cls, company_id: str, data: SupplyOrderCreate) -> SupplyOrder:
        if suppliers.get_owned(data.supplier_id, company_id) is None:
            raise not_found("Supplier not found")
        order = orders.add(
            SupplyOrder(
                company_id=company_id,
                order_number=document_number("PO"),
                total_amount=sum(item.quantity * item.unit_price for item in data.items),
                **data.model_dump(),
            )
        )
        logger.info("Supply order created: %s (%.2f)", order.order_number, order.total_amount)
        await AuditService.record("create", "supply_order", order, total=order.total_amount)
        return order

    @classmethod
    async def update_order_status(cls, company_id: str, order_id: str, status: OrderStatus) -> Optional[SupplyOrder]:
        order = orders.get_owned(order_id, company_id)
        if order is None:
            return None
        if order.status in ("delivered", "cancelled"):
            raise invalid_state(f"Order is already {order.status}")
        if status == "confirmed" and order.status not in OPEN_ORDER_STATUSES:
            raise invalid_state("Only draft or sent orders can be confirmed")
        order.status = status
        logger.info("Supply order %s is now %s", order.order_number, status)
        await AuditService.record("update-status", "supply_order", order, status=status)
        return order

    @classmethod
    async def create_shipment(cls, company_id: str, data: ShipmentCreate) -> Shipment:
        if orders.get_owned(data.purchase_order_id, company_id) is None:
            raise not_found("Order not found")
        values = data.model_dump()
        values["tracking_number"] = data.tracking_number or document_number("SHP")
        shipment = shipments.add(Shipment(company_id=company_id, **values))
        logger.info("Shipment created: %s via %s", shipment.tracking_number, shipment.carrier)
        return shipment

    @classmethod
    async def update_shipment_status(
        cls, company_id: str, shipment_id: str, status: ShipmentStatus
    ) -> Optional[Shipment]:
        shipment = shipments.get_owned(shipment_id, company_id)
        if shipment is None:
            return None
        shipment.status = status
        if status == "delivered":
            shipment.actual_delivery = datetime.utcnow()
        logger.info("Shipment %s is now %s", shipment.tracking_number, status)
        return shipment

    @classmethod
    async def get_suppliers(cls, company_id: str) -> List[Supplier]:
        return suppliers.filter(company_id=company_id)

    @classmethod
    async def get_orders(cls, company_id: str, status: Optional[str] = None) -> List[SupplyOrder]:
        return orders.filter(company_id=company_id, status=status)

    @classmethod
    async def get_shipments(cls, company_id: str, status: Optional[str] = None) -> List[Shipment]:
        return shipments.filter(company_id=company_id, status=status)

    @classmethod
    async def get_metrics(cls, company_id: str) -> SupplyChainMetrics:
        company_suppliers = suppliers.filter(company_id=company_id)
        company_orders = orders.filter(company_id=company_id)
        company_shipments = shipments.filter(company_id=company_id)
        return SupplyChainMetrics(
            total_suppliers=len(company_suppliers),
            active_suppliers=sum(1 for s in company_suppliers if s.status == "active"),
            total_orders=len(company_orders),
            pending_orders=sum(1 for o in company_orders if o.status in OPEN_ORDER_STATUSES),
            total_spend=sum(o.total_amount for o in company_orders if o.status in COMMITTED_ORDER_STATUSES),
            total_shipments=len(company_shipments),
            in_transit_shipments=sum(1 for s in company_shipments if s.status == "in-transit"),
            average_lead_time=(
                sum(s.lead_time for s in company_suppliers) / len(company_suppliers) if company_suppliers else 0
            ),
        )
