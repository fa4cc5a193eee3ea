"""
Service layer for asset management.

Assets enter the register at their purchase price.  Maintenance is
planned through schedules whose next date lies thirty days ahead;
recording maintenance against a schedule completes it.  A schedule
still ``scheduled`` after its next date counts as overdue.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import List, Optional

from erp_api.app.core.errors import not_found
from erp_api.app.core.store import InMemoryStore
from erp_api.app.schemas.asset_management import (
    Asset,
    AssetCreate,
    AssetMetrics,
    AssetStatus,
    MaintenanceRecord,
    MaintenanceRecordCreate,
    MaintenanceSchedule,
    MaintenanceScheduleCreate,
)
from erp_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)

SCHEDULE_INTERVAL = timedelta(days=30)

assets: InMemoryStore[Asset] = InMemoryStore("assets.assets")
schedules: InMemoryStore[MaintenanceSchedule] = InMemoryStore("assets.schedules")
records: InMemoryStore[MaintenanceRecord] = InMemoryStore("assets.maintenance_records")


class AssetManagementService:
    @classmethod
    async def create_asset(cls, company_id: str, data: AssetCreate) -> Asset:
        asset = assets.add(Asset(company_id=company_id, current_value=data.purchase_price, **data.model_dump()))
        logger.info("Asset created: %s (%s)", asset.asset_code, asset.id)
        await AuditService.record("create", "asset", asset, value=asset.purchase_price)
        return asset

    @classmethod
    async def update_asset_status(cls, company_id: str, asset_id: str, status: AssetStatus) -> Optional[Asset]:
        asset = assets.get_owned(asset_id, company_id)
        if asset is None:
            return None
        asset.status = status
        logger.info("Asset %s status changed to %s", asset_id, status)
        await AuditService.record("update-status", "asset", asset, status=status)
        return asset

    @classmethod
    async def schedule_maintenance(cls, company_id: str, data: MaintenanceScheduleCreate) -> MaintenanceSchedule:
        cls._require_asset(company_id, data.asset_id)
        schedule = schedules.add(
            MaintenanceSchedule(
                company_id=company_id,
                next_maintenance_date=datetime.utcnow() + SCHEDULE_INTERVAL,
                **data.model_dump(),
            )
        )
        logger.info("Maintenance scheduled for asset %s (%s)", schedule.asset_id, schedule.frequency)
        return schedule

    @classmethod
    async def record_maintenance(cls, company_id: str, data: MaintenanceRecordCreate) -> MaintenanceRecord:
        cls._require_asset(company_id, data.asset_id)
        schedule = None
        if data.schedule_id:
            schedule = schedules.get_owned(data.schedule_id, company_id)
            if schedule is None:
                raise not_found("Schedule not found")
        record = records.add(MaintenanceRecord(company_id=company_id, **data.model_dump()))
        if schedule is not None:
            schedule.status = "completed"
            schedule.last_maintenance_date = record.completed_date
        logger.info("Maintenance recorded for asset %s: cost %.2f", record.asset_id, record.cost)
        await AuditService.record("maintain", "asset", record, cost=record.cost)
        return record

    @classmethod
    async def get_assets(cls, company_id: str, status: Optional[str] = None) -> List[Asset]:
        return assets.filter(company_id=company_id, status=status)

    @classmethod
    async def get_schedules(cls, company_id: str, asset_id: Optional[str] = None) -> List[MaintenanceSchedule]:
        return schedules.filter(company_id=company_id, asset_id=asset_id)

    @classmethod
    async def get_records(cls, company_id: str, asset_id: Optional[str] = None) -> List[MaintenanceRecord]:
        return records.filter(company_id=company_id, asset_id=asset_id)

    @classmethod
    async def get_metrics(cls, company_id: str) -> AssetMetrics:
        register = assets.filter(company_id=company_id)
        plans = schedules.filter(company_id=company_id)
        now = datetime.utcnow()
        return AssetMetrics(
            total_assets=len(register),
            active_assets=sum(1 for a in register if a.status == "active"),
            total_asset_value=sum(a.current_value for a in register),
            total_depreciation=sum(a.depreciation for a in register),
            maintenance_scheduled=sum(1 for s in plans if s.status == "scheduled"),
            maintenance_overdue=sum(
                1 for s in plans if s.status == "overdue" or (s.status == "scheduled" and s.next_maintenance_date < now)
            ),
            total_maintenance_cost=sum(r.cost for r in records.filter(company_id=company_id)),
        )

    @classmethod
    def _require_asset(cls, company_id: str, asset_id: str) -> Asset:
        asset = assets.get_owned(asset_id, company_id)
        if asset is None:
            raise not_found("Asset not found")
        return asset
