"""
Service layer for asset tracking.

Straight-line depreciation: each recorded year adds
``(cost - salvage) / useful life`` to the accumulated depreciation and
lowers the book value, which never drops below the salvage value.  A
disposal books ``gain/loss = disposal price - book value``.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from erp_api.app.core.errors import business_rule_violation
from erp_api.app.core.store import InMemoryStore
from erp_api.app.schemas.asset_tracking import (
    AssetDisposal,
    AssetLocation,
    AssetLocationCreate,
    AssetTrackingMetrics,
    DepreciationCreate,
    DepreciationSchedule,
    DisposalCreate,
    LocationStatus,
)
from erp_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)

locations: InMemoryStore[AssetLocation] = InMemoryStore("tracking.locations")
depreciation: InMemoryStore[DepreciationSchedule] = InMemoryStore("tracking.depreciation")
disposals: InMemoryStore[AssetDisposal] = InMemoryStore("tracking.disposals")


class AssetTrackingService:
    @classmethod
    async def track_location(cls, company_id: str, data: AssetLocationCreate) -> AssetLocation:
        tracking = locations.add(AssetLocation(company_id=company_id, **data.model_dump()))
        logger.info("Asset location tracked: %s at %s", tracking.asset_id, tracking.location)
        return tracking

    @classmethod
    async def update_location(
        cls, company_id: str, asset_id: str, location: str, status: LocationStatus
    ) -> Optional[AssetLocation]:
        """Move the latest tracking record of ``asset_id``; ``None`` when it is not tracked."""
        tracked = locations.filter(company_id=company_id, asset_id=asset_id)
        if not tracked:
            return None
        tracking = tracked[-1]
        tracking.location = location
        tracking.status = status
        logger.info("Asset location updated: %s -> %s (%s)", asset_id, location, status)
        await AuditService.record("move", "asset_location", tracking, location=location, status=status)
        return tracking

    @classmethod
    async def create_depreciation(cls, company_id: str, data: DepreciationCreate) -> DepreciationSchedule:
        if data.salvage_value > data.asset_cost:
            raise business_rule_violation("Salvage value cannot exceed the asset cost")
        schedule = depreciation.add(
            DepreciationSchedule(
                company_id=company_id,
                asset_id=data.asset_id,
                depreciation_method=data.depreciation_method,
                useful_life=data.useful_life,
                salvage_value=data.salvage_value,
                annual_depreciation=(data.asset_cost - data.salvage_value) / data.useful_life,
                book_value=data.asset_cost,
            )
        )
        logger.info("Depreciation schedule created for asset %s: %.2f/year", schedule.asset_id, schedule.annual_depreciation)
        return schedule

    @classmethod
    async def record_depreciation(cls, company_id: str, schedule_id: str) -> Optional[DepreciationSchedule]:
        schedule = depreciation.get_owned(schedule_id, company_id)
        if schedule is None:
            return None
        amount = min(schedule.annual_depreciation, schedule.book_value - schedule.salvage_value)
        schedule.accumulated_depreciation += amount
        schedule.book_value -= amount
        logger.info("Depreciation recorded on %s: %.2f (book value %.2f)", schedule_id, amount, schedule.book_value)
        await AuditService.record("depreciate", "depreciation_schedule", schedule, amount=amount)
        return schedule

    @classmethod
    async def dispose_asset(cls, company_id: str, data: DisposalCreate) -> AssetDisposal:
        book_value = data.book_value
        if book_value is None:
            schedules = depreciation.filter(company_id=company_id, asset_id=data.asset_id)
            book_value = schedules[-1].book_value if schedules else 0
        disposal = disposals.add(
            AssetDisposal(
                company_id=company_id,
                asset_id=data.asset_id,
                disposal_method=data.disposal_method,
                disposal_price=data.disposal_price,
                book_value=book_value,
                gain_loss=data.disposal_price - book_value,
            )
        )
        logger.info("Asset disposed: %s (%s) gain/loss %.2f", disposal.asset_id, disposal.disposal_method, disposal.gain_loss)
        await AuditService.record("dispose", "asset", disposal, gain_loss=disposal.gain_loss)
        return disposal

    @classmethod
    async def get_locations(
        cls, company_id: str, asset_id: Optional[str] = None, status: Optional[str] = None
    ) -> List[AssetLocation]:
        return locations.filter(company_id=company_id, asset_id=asset_id, status=status)

    @classmethod
    async def get_depreciation(cls, company_id: str, asset_id: Optional[str] = None) -> List[DepreciationSchedule]:
        return depreciation.filter(company_id=company_id, asset_id=asset_id)

    @classmethod
    async def get_disposals(cls, company_id: str) -> List[AssetDisposal]:
        return disposals.filter(company_id=company_id)

    @classmethod
    async def get_metrics(cls, company_id: str) -> AssetTrackingMetrics:
        tracked = locations.filter(company_id=company_id)
        disposed = disposals.filter(company_id=company_id)

        def count(status: str) -> int:
            return sum(1 for loc in tracked if loc.status == status)

        return AssetTrackingMetrics(
            total_locations=len(tracked),
            assets_in_use=count("in-use"),
            assets_in_storage=count("in-storage"),
            assets_in_transit=count("in-transit"),
            assets_lost=count("lost"),
            total_depreciation=sum(s.accumulated_depreciation for s in depreciation.filter(company_id=company_id)),
            total_disposals=len(disposed),
            total_disposal_value=sum(d.disposal_price for d in disposed),
        )
