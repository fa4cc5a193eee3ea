"""Pydantic schemas for vendors, vendor scorecards and vendor purchase requests."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from .base import CamelModel, Record, code_field

VendorStatus = Literal["active", "inactive", "suspended"]
RequestStatus = Literal["draft", "submitted", "approved", "rejected", "completed"]


class VendorCreate(CamelModel):
    vendor_code: str = code_field("VEN")
    vendor_name: str = Field(..., min_length=1)
    contact_person: str = ""
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+$")
    phone: str = ""
    address: str = ""
    category: str = ""


class Vendor(Record, VendorCreate):
    rating: float = 0
    status: VendorStatus = "active"


class VendorStatusUpdate(CamelModel):
    vendor_id: str
    status: VendorStatus


class VendorRating(CamelModel):
    vendor_id: str
    delivery_score: float = Field(..., ge=0, le=5)
    quality_score: float = Field(..., ge=0, le=5)
    price_score: float = Field(..., ge=0, le=5)
    communication_score: float = Field(..., ge=0, le=5)


class VendorPerformance(Record, VendorRating):
    overall_score: float
    last_review_date: datetime = Field(default_factory=datetime.utcnow)


class VendorRequestCreate(CamelModel):
    vendor_id: Optional[str] = None
    request_code: str = code_field("VR")
    description: str = Field(..., min_length=1)
    quantity: float = Field(1, gt=0)
    estimated_budget: float = Field(..., ge=0)


class VendorRequest(Record, VendorRequestCreate):
    status: RequestStatus = "draft"
    request_date: datetime = Field(default_factory=datetime.utcnow)


class VendorRequestDecision(CamelModel):
    request_id: str
    status: Literal["approved", "rejected"] = "approved"


class VendorMetrics(CamelModel):
    total_vendors: int
    active_vendors: int
    top_rated_vendors: int
    average_rating: float
    total_procurement_requests: int
    approved_requests: int
    total_budget_allocated: float
