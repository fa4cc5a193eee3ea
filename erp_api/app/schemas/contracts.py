"""Pydantic schemas for contracts, their clauses and renewals."""

from datetime import date
from typing import Literal, Optional

from pydantic import Field, model_validator

from .base import CamelModel, Record, code_field

ContractType = Literal["vendor", "client", "employee", "service", "lease"]
ContractStatus = Literal["draft", "active", "expired", "terminated", "renewed"]
ClauseType = Literal["payment", "termination", "liability", "confidentiality", "other"]
RenewalStatus = Literal["pending", "approved", "rejected", "completed"]


class ContractCreate(CamelModel):
    contract_code: str
    contract_name: str = Field(..., min_length=1)
    contract_type: ContractType
    counterparty: str
    start_date: date
    end_date: date
    value: float = Field(0, ge=0)

    @model_validator(mode="after")
    def check_dates(self) -> "ContractCreate":
        if self.end_date < self.start_date:
            raise ValueError("endDate must not be before startDate")
        return self


class Contract(Record, ContractCreate):
    status: ContractStatus = "draft"
    renewal_date: Optional[date] = None


class ContractRef(CamelModel):
    contract_id: str


class ClauseCreate(CamelModel):
    contract_id: str
    clause_code: str = code_field("CL")
    clause_name: str
    description: str = ""
    clause_type: ClauseType = "other"


class ContractClause(Record, ClauseCreate):
    status: Literal["active", "inactive"] = "active"


class RenewalCreate(CamelModel):
    contract_id: str
    renewal_code: str = code_field("REN")
    renewal_date: date
    new_end_date: date
    new_value: Optional[float] = Field(None, ge=0)
    renewal_terms: str = ""


class ContractRenewal(Record, RenewalCreate):
    status: RenewalStatus = "pending"
    approved_by: Optional[str] = None


class RenewalDecision(CamelModel):
    renewal_id: str
    approved_by: Optional[str] = None


class ContractMetrics(CamelModel):
    total_contracts: int
    active_contracts: int
    expired_contracts: int
    total_contract_value: float
    pending_renewals: int
    expiring_soon: int
    contract_compliance_rate: float
