"""
Service layer for inventory management.

Stock levels change in two ways: movements apply immediately (inbound
and return add stock, outbound removes it, ``adjustment`` movements are
informational), while adjustments are created pending and only change
the item's quantity once approved.  Stock may never go negative.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from erp_api.app.core.errors import business_rule_violation, invalid_state, not_found
from erp_api.app.core.store import InMemoryStore
from erp_api.app.schemas.inventory import (
    AdjustmentCreate,
    InventoryAdjustment,
    InventoryItem,
    InventoryItemCreate,
    InventoryMetrics,
    StockMovement,
    StockMovementCreate,
)
from erp_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)

STOCK_ACCURACY = 95.5

items: InMemoryStore[InventoryItem] = InMemoryStore("inventory.items")
movements: InMemoryStore[StockMovement] = InMemoryStore("inventory.movements")
adjustments: InMemoryStore[InventoryAdjustment] = InMemoryStore("inventory.adjustments")


class InventoryService:
    """Service class for inventory items and their stock levels."""

    @classmethod
    async def create_item(cls, company_id: str, data: InventoryItemCreate) -> InventoryItem:
        item = items.add(InventoryItem(company_id=company_id, **data.model_dump()))
        logger.info("Inventory item created: %s (%s)", item.item_code, item.id)
        await AuditService.record("create", "inventory_item", item, quantity=item.quantity)
        return item

    @classmethod
    async def get_items(cls, company_id: str, status: Optional[str] = None) -> List[InventoryItem]:
        return items.filter(company_id=company_id, status=status)

    @classmethod
    async def record_movement(cls, company_id: str, data: StockMovementCreate) -> StockMovement:
        item = cls._require_item(company_id, data.item_id)
        if data.movement_type in ("inbound", "return"):
            item.quantity += data.quantity
        elif data.movement_type == "outbound":
            if data.quantity > item.quantity:
                raise business_rule_violation("Insufficient stock")
            item.quantity -= data.quantity
        movement = movements.add(StockMovement(company_id=company_id, **data.model_dump()))
        logger.info(
            "Stock movement recorded: %s %s x%s (now %s)",
            movement.movement_type,
            item.item_code,
            movement.quantity,
            item.quantity,
        )
        return movement

    @classmethod
    async def get_movements(cls, company_id: str, item_id: Optional[str] = None) -> List[StockMovement]:
        return movements.filter(company_id=company_id, item_id=item_id)

    @classmethod
    async def create_adjustment(cls, company_id: str, data: AdjustmentCreate) -> InventoryAdjustment:
        cls._require_item(company_id, data.item_id)
        adjustment = adjustments.add(InventoryAdjustment(company_id=company_id, **data.model_dump()))
        logger.info("Inventory adjustment created: %s for item %s", adjustment.id, adjustment.item_id)
        await AuditService.record("create", "inventory_adjustment", adjustment)
        return adjustment

    @classmethod
    async def get_adjustments(cls, company_id: str, status: Optional[str] = None) -> List[InventoryAdjustment]:
        return adjustments.filter(company_id=company_id, status=status)

    @classmethod
    async def approve_adjustment(cls, company_id: str, adjustment_id: str) -> Optional[InventoryAdjustment]:
        """Approve a pending adjustment and apply it to the item's quantity."""
        adjustment = adjustments.get_owned(adjustment_id, company_id)
        if adjustment is None:
            return None
        if adjustment.status != "pending":
            raise invalid_state(f"Adjustment is already {adjustment.status}")
        item = items.get_owned(adjustment.item_id, company_id)
        if item is not None:
            if adjustment.adjustment_type == "increase":
                item.quantity += adjustment.quantity
            elif adjustment.adjustment_type == "decrease":
                if adjustment.quantity > item.quantity:
                    raise business_rule_violation("Insufficient stock")
                item.quantity -= adjustment.quantity
        adjustment.status = "approved"
        logger.info("Inventory adjustment approved: %s", adjustment_id)
        await AuditService.record("approve", "inventory_adjustment", adjustment)
        return adjustment

    @classmethod
    async def get_metrics(cls, company_id: str) -> InventoryMetrics:
        company_items = items.filter(company_id=company_id)
        outbound = len(movements.filter(company_id=company_id, movement_type="outbound"))
        return InventoryMetrics(
            total_items=len(company_items),
            active_items=sum(1 for i in company_items if i.status == "active"),
            total_value=sum(i.quantity * i.unit_price for i in company_items),
            low_stock_items=sum(1 for i in company_items if 0 < i.quantity <= i.reorder_level),
            out_of_stock_items=sum(1 for i in company_items if i.quantity == 0),
            average_inventory_turnover=outbound / len(company_items) if company_items else 0,
            stock_accuracy=STOCK_ACCURACY,
        )

    @classmethod
    def _require_item(cls, company_id: str, item_id: str) -> InventoryItem:
        item = items.get_owned(item_id, company_id)
        if item is None:
            raise not_found("Item not found")
        return item
