"""
Pydantic schemas for customer relationship management.

Customers, the interactions logged against them and sales leads which
can later be converted into customers.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from .base import CamelModel, Record

CustomerType = Literal["individual", "business"]
CustomerStatus = Literal["active", "inactive", "prospect"]
InteractionType = Literal["call", "email", "meeting", "note"]
LeadStatus = Literal["new", "contacted", "qualified", "converted", "lost"]


class CustomerBase(CamelModel):
    name: str = Field(..., min_length=1, examples=["Acme Corp"])
    email: str = Field(..., examples=["buyer@acme.test"])
    phone: str = ""
    address: str = ""
    city: str = ""
    country: str = ""
    type: CustomerType = "individual"


class CustomerCreate(CustomerBase):
    pass


class Customer(Record, CustomerBase):
    status: CustomerStatus = "active"
    total_purchases: float = 0
    last_purchase_date: Optional[datetime] = None
    updated_at: datetime = Field(default_factory=datetime.utcnow)


class CustomerUpdate(CamelModel):
    """Partial update; only the fields present in the payload change."""

    customer_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    type: Optional[CustomerType] = None
    status: Optional[CustomerStatus] = None
    total_purchases: Optional[float] = Field(None, ge=0)
    last_purchase_date: Optional[datetime] = None


class CustomerRef(CamelModel):
    customer_id: str


class InteractionCreate(CamelModel):
    customer_id: str
    type: InteractionType
    subject: str = Field(..., min_length=1)
    description: str = ""
    duration: Optional[int] = Field(None, ge=0, description="Duration in minutes")
    notes: str = ""
    created_by: Optional[str] = None


class Interaction(Record, InteractionCreate):
    date: datetime = Field(default_factory=datetime.utcnow)


class LeadCreate(CamelModel):
    name: str = Field(..., min_length=1)
    email: str
    phone: str = ""
    company: str = ""
    source: str = "website"
    value: float = Field(0, ge=0)
    assigned_to: Optional[str] = None


class Lead(Record, LeadCreate):
    status: LeadStatus = "new"
    probability: float = 0
    updated_at: datetime = Field(default_factory=datetime.utcnow)


class LeadStatusUpdate(CamelModel):
    lead_id: str
    status: LeadStatus
    probability: Optional[float] = Field(None, ge=0, le=100)


class LeadRef(CamelModel):
    lead_id: str


class CRMMetrics(CamelModel):
    total_customers: int
    active_customers: int
    total_leads: int
    converted_leads: int
    conversion_rate: float
    total_interactions: int
    average_customer_value: float
