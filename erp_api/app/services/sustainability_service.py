"""
Service layer for sustainability tracking.

``wasteReductionRate`` is the recycled share of all recorded waste.
Offsets are assumed to reduce emissions at half their quantity, and the
sustainability score adds ten points per completed green initiative to
the reduction rate, capped at 100.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from erp_api.app.core.errors import invalid_state
from erp_api.app.core.store import InMemoryStore
from erp_api.app.schemas.sustainability import (
    CarbonOffset,
    GreenInitiative,
    InitiativeCreate,
    InitiativeStatus,
    OffsetCreate,
    SustainabilityMetrics,
    WasteCreate,
    WasteRecord,
)
from erp_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)

OFFSET_REDUCTION_FACTOR = 0.5
POINTS_PER_INITIATIVE = 10

waste_records: InMemoryStore[WasteRecord] = InMemoryStore("sustainability.waste")
initiatives: InMemoryStore[GreenInitiative] = InMemoryStore("sustainability.initiatives")
offsets: InMemoryStore[CarbonOffset] = InMemoryStore("sustainability.offsets")


class SustainabilityService:
    @classmethod
    async def record_waste(cls, company_id: str, data: WasteCreate) -> WasteRecord:
        record = waste_records.add(WasteRecord(company_id=company_id, **data.model_dump()))
        logger.info("Waste recorded: %.1f %s %s (%s)", record.quantity, record.unit, record.waste_type, record.disposal_method)
        return record

    @classmethod
    async def create_initiative(cls, company_id: str, data: InitiativeCreate) -> GreenInitiative:
        initiative = initiatives.add(GreenInitiative(company_id=company_id, **data.model_dump()))
        logger.info("Green initiative created: %s", initiative.initiative_name)
        return initiative

    @classmethod
    async def update_initiative_status(
        cls,
        company_id: str,
        initiative_id: str,
        status: InitiativeStatus,
        actual_savings: Optional[float] = None,
    ) -> Optional[GreenInitiative]:
        initiative = initiatives.get_owned(initiative_id, company_id)
        if initiative is None:
            return None
        if initiative.status == "completed":
            raise invalid_state("Initiative is already completed")
        initiative.status = status
        if actual_savings is not None:
            initiative.actual_savings = actual_savings
        if status == "completed":
            initiative.end_date = datetime.utcnow()
            logger.info("Green initiative completed: %s", initiative.initiative_name)
            await AuditService.record("complete", "green_initiative", initiative, savings=initiative.actual_savings)
        return initiative

    @classmethod
    async def record_offset(cls, company_id: str, data: OffsetCreate) -> CarbonOffset:
        offset = offsets.add(CarbonOffset(company_id=company_id, **data.model_dump()))
        logger.info("Carbon offset recorded: %.1f %s (%s)", offset.quantity, offset.unit, offset.offset_type)
        return offset

    @classmethod
    async def get_waste_records(cls, company_id: str, waste_type: Optional[str] = None) -> List[WasteRecord]:
        return waste_records.filter(company_id=company_id, waste_type=waste_type)

    @classmethod
    async def get_initiatives(cls, company_id: str) -> List[GreenInitiative]:
        return initiatives.filter(company_id=company_id)

    @classmethod
    async def get_offsets(cls, company_id: str) -> List[CarbonOffset]:
        return offsets.filter(company_id=company_id)

    @classmethod
    async def get_metrics(cls, company_id: str) -> SustainabilityMetrics:
        records = waste_records.filter(company_id=company_id)
        total_waste = sum(r.quantity for r in records)
        recycled = sum(r.quantity for r in records if r.disposal_method == "recycling")
        rate = recycled * 100 / total_waste if total_waste else 0
        completed = len(initiatives.filter(company_id=company_id, status="completed"))
        total_offset = sum(o.quantity for o in offsets.filter(company_id=company_id))
        return SustainabilityMetrics(
            total_waste=total_waste,
            recycled_waste=recycled,
            waste_reduction_rate=rate,
            green_initiatives_completed=completed,
            total_carbon_offset=total_offset,
            estimated_carbon_reduction=total_offset * OFFSET_REDUCTION_FACTOR,
            sustainability_score=min(100, rate + completed * POINTS_PER_INITIATIVE),
        )
