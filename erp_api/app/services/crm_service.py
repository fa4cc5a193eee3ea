"""
Service layer for customer relationship management.

Customers and leads are scoped to a company.  Interactions reference a
customer of the same company.  Converting a lead creates a business
customer from the lead's contact details and marks the lead converted.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from erp_api.app.core.errors import not_found
from erp_api.app.core.store import InMemoryStore
from erp_api.app.schemas.crm import (
    CRMMetrics,
    Customer,
    CustomerCreate,
    CustomerUpdate,
    Interaction,
    InteractionCreate,
    Lead,
    LeadCreate,
)
from erp_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)

customers: InMemoryStore[Customer] = InMemoryStore("crm.customers")
interactions: InMemoryStore[Interaction] = InMemoryStore("crm.interactions")
leads: InMemoryStore[Lead] = InMemoryStore("crm.leads")


class CRMService:
    """Service class for customers, interactions and leads."""

    @classmethod
    async def create_customer(cls, company_id: str, data: CustomerCreate) -> Customer:
        customer = customers.add(Customer(company_id=company_id, **data.model_dump()))
        logger.info("Customer created: %s (%s)", customer.name, customer.id)
        await AuditService.record("create", "customer", customer)
        return customer

    @classmethod
    async def get_customers(cls, company_id: str, status: Optional[str] = None) -> List[Customer]:
        return customers.filter(company_id=company_id, status=status)

    @classmethod
    async def get_customer(cls, company_id: str, customer_id: str) -> Optional[Customer]:
        return customers.get_owned(customer_id, company_id)

    @classmethod
    async def update_customer(cls, company_id: str, data: CustomerUpdate) -> Optional[Customer]:
        """Apply the fields explicitly present in ``data`` to a customer."""
        customer = customers.get_owned(data.customer_id, company_id)
        if customer is None:
            return None
        changes = data.model_dump(exclude_unset=True, exclude={"customer_id"})
        for field, value in changes.items():
            setattr(customer, field, value)
        customer.updated_at = datetime.utcnow()
        logger.info("Customer updated: %s (%s)", customer.id, ", ".join(sorted(changes)))
        await AuditService.record("update", "customer", customer, fields=sorted(changes))
        return customer

    @classmethod
    async def delete_customer(cls, company_id: str, customer_id: str) -> bool:
        customer = customers.get_owned(customer_id, company_id)
        if customer is None:
            return False
        customers.delete(customer_id)
        logger.info("Customer deleted: %s", customer_id)
        await AuditService.record("delete", "customer", customer)
        return True

    @classmethod
    async def record_interaction(cls, company_id: str, data: InteractionCreate) -> Interaction:
        if customers.get_owned(data.customer_id, company_id) is None:
            raise not_found("Customer not found")
        interaction = interactions.add(Interaction(company_id=company_id, **data.model_dump()))
        logger.info("Interaction recorded: %s with customer %s", interaction.type, interaction.customer_id)
        return interaction

    @classmethod
    async def get_interactions(cls, company_id: str, customer_id: Optional[str] = None) -> List[Interaction]:
        return interactions.filter(company_id=company_id, customer_id=customer_id)

    @classmethod
    async def create_lead(cls, company_id: str, data: LeadCreate) -> Lead:
        lead = leads.add(Lead(company_id=company_id, **data.model_dump()))
        logger.info("Lead created: %s (%s)", lead.name, lead.id)
        await AuditService.record("create", "lead", lead, source=lead.source)
        return lead

    @classmethod
    async def get_leads(cls, company_id: str, status: Optional[str] = None) -> List[Lead]:
        return leads.filter(company_id=company_id, status=status)

    @classmethod
    async def update_lead_status(
        cls, company_id: str, lead_id: str, status: str, probability: Optional[float] = None
    ) -> Optional[Lead]:
        lead = leads.get_owned(lead_id, company_id)
        if lead is None:
            return None
        lead.status = status
        if probability is not None:
            lead.probability = probability
        lead.updated_at = datetime.utcnow()
        logger.info("Lead %s status changed to %s", lead_id, status)
        await AuditService.record("update-status", "lead", lead, status=status)
        return lead

    @classmethod
    async def convert_lead_to_customer(cls, company_id: str, lead_id: str) -> Optional[Customer]:
        lead = leads.get_owned(lead_id, company_id)
        if lead is None:
            return None
        customer = await cls.create_customer(
            company_id,
            CustomerCreate(name=lead.name, email=lead.email, phone=lead.phone, type="business"),
        )
        await cls.update_lead_status(company_id, lead_id, "converted")
        return customer

    @classmethod
    async def get_metrics(cls, company_id: str) -> CRMMetrics:
        company_customers = customers.filter(company_id=company_id)
        company_leads = leads.filter(company_id=company_id)
        converted = sum(1 for lead in company_leads if lead.status == "converted")
        total_value = sum(c.total_purchases for c in company_customers)
        return CRMMetrics(
            total_customers=len(company_customers),
            active_customers=sum(1 for c in company_customers if c.status == "active"),
            total_leads=len(company_leads),
            converted_leads=converted,
            conversion_rate=converted / len(company_leads) * 100 if company_leads else 0,
            total_interactions=len(interactions.filter(company_id=company_id)),
            average_customer_value=total_value / len(company_customers) if company_customers else 0,
        )
