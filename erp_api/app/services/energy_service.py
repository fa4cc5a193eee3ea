"""
Service layer for energy management.

The carbon footprint is approximated as all consumption that did not
come from renewable sources.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, List, Optional

from erp_api.app.core.store import InMemoryStore
from erp_api.app.schemas.energy import (
    ConsumptionCreate,
    EnergyConsumption,
    EnergyMetrics,
    EnergyTarget,
    SustainabilityMetric,
    SustainabilityMetricCreate,
    TargetCreate,
    TargetStatus,
)
from erp_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)

consumptions: InMemoryStore[EnergyConsumption] = InMemoryStore("energy.consumptions")
targets: InMemoryStore[EnergyTarget] = InMemoryStore("energy.targets")
readings: InMemoryStore[SustainabilityMetric] = InMemoryStore("energy.sustainability_metrics")


class EnergyService:
    @classmethod
    async def record_consumption(cls, company_id: str, data: ConsumptionCreate) -> EnergyConsumption:
        record = consumptions.add(EnergyConsumption(company_id=company_id, **data.model_dump()))
        logger.info("Energy consumption recorded: %s %.2f %s at %s", record.energy_type, record.consumption, record.unit, record.facility_id)
        return record

    @classmethod
    async def set_target(cls, company_id: str, data: TargetCreate) -> EnergyTarget:
        target = targets.add(EnergyTarget(company_id=company_id, **data.model_dump()))
        logger.info("Energy target set: %s %.2f by %s", target.target_type, target.target_value, target.deadline)
        await AuditService.record("create", "energy_target", target)
        return target

    @classmethod
    async def update_target_status(cls, company_id: str, target_id: str, status: TargetStatus) -> Optional[EnergyTarget]:
        target = targets.get_owned(target_id, company_id)
        if target is None:
            return None
        target.status = status
        logger.info("Energy target %s marked %s", target_id, status)
        await AuditService.record("update-status", "energy_target", target, status=status)
        return target

    @classmethod
    async def record_metric(cls, company_id: str, data: SustainabilityMetricCreate) -> SustainabilityMetric:
        reading = readings.add(SustainabilityMetric(company_id=company_id, **data.model_dump()))
        logger.info("Sustainability metric recorded: %s = %s %s", reading.metric_type, reading.value, reading.unit)
        return reading

    @classmethod
    async def get_consumptions(
        cls, company_id: str, energy_type: Optional[str] = None, facility_id: Optional[str] = None
    ) -> List[EnergyConsumption]:
        return consumptions.filter(company_id=company_id, energy_type=energy_type, facility_id=facility_id)

    @classmethod
    async def get_targets(cls, company_id: str) -> List[EnergyTarget]:
        return targets.filter(company_id=company_id)

    @classmethod
    async def get_sustainability_metrics(cls, company_id: str) -> List[SustainabilityMetric]:
        return readings.filter(company_id=company_id)

    @classmethod
    async def get_metrics(cls, company_id: str) -> EnergyMetrics:
        records = consumptions.filter(company_id=company_id)
        by_type: Dict[str, float] = defaultdict(float)
        for record in records:
            by_type[record.energy_type] += record.consumption
        total = sum(by_type.values())
        renewable = by_type.get("renewable", 0.0)
        total_cost = sum(r.cost for r in records)
        return EnergyMetrics(
            total_consumption=total,
            electricity_usage=by_type.get("electricity", 0.0),
            gas_usage=by_type.get("gas", 0.0),
            water_usage=by_type.get("water", 0.0),
            renewable_usage=renewable,
            renewable_percentage=renewable / total * 100 if total > 0 else 0,
            total_cost=total_cost,
            average_cost=total_cost / len(records) if records else 0,
            targets_achieved=len(targets.filter(company_id=company_id, status="achieved")),
            carbon_footprint=total - renewable,
            by_type=dict(by_type),
        )
