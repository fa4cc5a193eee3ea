"""Pydantic schemas for insurance policies and claims."""

from datetime import date
from typing import Literal, Optional

from pydantic import Field

from .base import CamelModel, Record

InsuranceType = Literal["liability", "property", "health", "cyber", "directors-officers"]
PolicyStatus = Literal["active", "expired", "cancelled", "renewed"]
ClaimStatus = Literal["filed", "under-review", "approved", "rejected", "paid"]


class PolicyCreate(CamelModel):
    policy_code: str = ""
    policy_name: str = Field(..., min_length=1)
    insurance_type: InsuranceType
    provider: str
    coverage_amount: float = Field(..., gt=0)
    premium: float = Field(..., ge=0)
    start_date: date
    end_date: date


class InsurancePolicy(Record, PolicyCreate):
    status: PolicyStatus = "active"


class ClaimCreate(CamelModel):
    policy_id: str
    claim_code: str = ""
    claim_name: str = ""
    claim_date: Optional[date] = None
    claim_amount: float = Field(..., gt=0)
    description: str = ""


class InsuranceClaim(Record, ClaimCreate):
    status: ClaimStatus = "filed"
    approved_amount: Optional[float] = None


class ClaimApproval(CamelModel):
    claim_id: str
    approved_amount: Optional[float] = Field(None, ge=0, description="Defaults to the claimed amount")


class ClaimRef(CamelModel):
    claim_id: str


class InsuranceMetrics(CamelModel):
    total_policies: int
    active_policies: int
    total_coverage: float
    total_premiums: float
    total_claims: int
    approved_claims: int
    total_approved_amount: float
    claim_approval_rate: float
    insurance_cost_ratio: float
