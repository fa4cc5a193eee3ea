"""
Service layer for vendor management.

Rating a vendor stores a scorecard whose overall score is the mean of
its four scores and copies that score onto the vendor.  Vendors rated
4 or better count as top rated.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from erp_api.app.core.errors import invalid_state, not_found
from erp_api.app.core.store import InMemoryStore
from erp_api.app.schemas.vendors import (
    Vendor,
    VendorCreate,
    VendorMetrics,
    VendorPerformance,
    VendorRating,
    VendorRequest,
    VendorRequestCreate,
    VendorStatus,
)
from erp_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)

TOP_RATING = 4

vendors: InMemoryStore[Vendor] = InMemoryStore("vendors.vendors")
performances: InMemoryStore[VendorPerformance] = InMemoryStore("vendors.performances")
requests: InMemoryStore[VendorRequest] = InMemoryStore("vendors.requests")


class VendorService:
    @classmethod
    async def create_vendor(cls, company_id: str, data: VendorCreate) -> Vendor:
        vendor = vendors.add(Vendor(company_id=company_id, **data.model_dump()))
        logger.info("Vendor created: %s", vendor.vendor_name)
        await AuditService.record("create", "vendor", vendor)
        return vendor

    @classmethod
    async def update_vendor_status(cls, company_id: str, vendor_id: str, status: VendorStatus) -> Optional[Vendor]:
        vendor = vendors.get_owned(vendor_id, company_id)
        if vendor is None:
            return None
        vendor.status = status
        await AuditService.record("update-status", "vendor", vendor, status=status)
        return vendor

    @classmethod
    async def rate_vendor(cls, company_id: str, data: VendorRating) -> VendorPerformance:
        vendor = vendors.get_owned(data.vendor_id, company_id)
        if vendor is None:
            raise not_found("Vendor not found")
        overall = (data.delivery_score + data.quality_score + data.price_score + data.communication_score) / 4
        performance = performances.add(VendorPerformance(company_id=company_id, overall_score=overall, **data.model_dump()))
        vendor.rating = overall
        logger.info("Vendor %s rated %.2f", vendor.vendor_name, overall)
        return performance

    @classmethod
    async def create_request(cls, company_id: str, data: VendorRequestCreate) -> VendorRequest:
        if data.vendor_id and vendors.get_owned(data.vendor_id, company_id) is None:
            raise not_found("Vendor not found")
        request = requests.add(VendorRequest(company_id=company_id, **data.model_dump()))
        logger.info("Vendor request created: %s (%.2f)", request.description, request.estimated_budget)
        return request

    @classmethod
    async def decide_request(cls, company_id: str, request_id: str, status: str = "approved") -> Optional[VendorRequest]:
        request = requests.get_owned(request_id, company_id)
        if request is None:
            return None
        if request.status not in ("draft", "submitted"):
            raise invalid_state(f"Request is already {request.status}")
        request.status = status
        logger.info("Vendor request %s %s", request_id, status)
        await AuditService.record(status, "vendor_request", request, budget=request.estimated_budget)
        return request

    @classmethod
    async def get_vendors(cls, company_id: str, status: Optional[str] = None) -> List[Vendor]:
        return vendors.filter(company_id=company_id, status=status)

    @classmethod
    async def get_performances(cls, company_id: str, vendor_id: Optional[str] = None) -> List[VendorPerformance]:
        return performances.filter(company_id=company_id, vendor_id=vendor_id)

    @classmethod
    async def get_requests(cls, company_id: str, status: Optional[str] = None) -> List[VendorRequest]:
        return requests.filter(company_id=company_id, status=status)

    @classmethod
    async def get_metrics(cls, company_id: str) -> VendorMetrics:
        company_vendors = vendors.filter(company_id=company_id)
        company_requests = requests.filter(company_id=company_id)
        return VendorMetrics(
            total_vendors=len(company_vendors),
            active_vendors=sum(1 for v in company_vendors if v.status == "active"),
            top_rated_vendors=sum(1 for v in company_vendors if v.rating >= TOP_RATING),
            average_rating=sum(v.rating for v in company_vendors) / len(company_vendors) if company_vendors else 0,
            total_procurement_requests=len(company_requests),
            approved_requests=sum(1 for r in company_requests if r.status == "approved"),
            total_budget_allocated=sum(r.estimated_budget for r in company_requests),
        )
