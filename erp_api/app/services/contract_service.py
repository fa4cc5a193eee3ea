"""
Service layer for contract management.

Contracts start as drafts and are activated explicitly.  Approving a
renewal moves the contract end date (and value, when the renewal names
one) forward.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import List, Optional

from erp_api.app.core.errors import invalid_state, not_found
from erp_api.app.core.store import InMemoryStore
from erp_api.app.schemas.contracts import (
    ClauseCreate,
    Contract,
    ContractClause,
    ContractCreate,
    ContractMetrics,
    ContractRenewal,
    RenewalCreate,
)
from erp_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)

EXPIRY_WINDOW = timedelta(days=30)
COMPLIANCE_RATE = 96.5

contracts: InMemoryStore[Contract] = InMemoryStore("contracts.contracts")
clauses: InMemoryStore[ContractClause] = InMemoryStore("contracts.clauses")
renewals: InMemoryStore[ContractRenewal] = InMemoryStore("contracts.renewals")


class ContractService:
    @classmethod
    async def create_contract(cls, company_id: str, data: ContractCreate) -> Contract:
        contract = contracts.add(Contract(company_id=company_id, **data.model_dump()))
        logger.info("Contract created: %s (%s)", contract.contract_code, contract.id)
        await AuditService.record("create", "contract", contract, value=contract.value)
        return contract

    @classmethod
    async def activate_contract(cls, company_id: str, contract_id: str) -> Optional[Contract]:
        contract = contracts.get_owned(contract_id, company_id)
        if contract is None:
            return None
        if contract.status != "draft":
            raise invalid_state(f"Contract is already {contract.status}")
        contract.status = "active"
        logger.info("Contract activated: %s", contract.contract_code)
        await AuditService.record("activate", "contract", contract)
        return contract

    @classmethod
    async def terminate_contract(cls, company_id: str, contract_id: str) -> Optional[Contract]:
        contract = contracts.get_owned(contract_id, company_id)
        if contract is None:
            return None
        contract.status = "terminated"
        logger.info("Contract terminated: %s", contract.contract_code)
        await AuditService.record("terminate", "contract", contract)
        return contract

    @classmethod
    async def add_clause(cls, company_id: str, data: ClauseCreate) -> ContractClause:
        cls._require_contract(company_id, data.contract_id)
        clause = clauses.add(ContractClause(company_id=company_id, **data.model_dump()))
        logger.info("Clause added to contract %s: %s", clause.contract_id, clause.clause_name)
        return clause

    @classmethod
    async def create_renewal(cls, company_id: str, data: RenewalCreate) -> ContractRenewal:
        contract = cls._require_contract(company_id, data.contract_id)
        if data.new_end_date <= contract.end_date:
            raise invalid_state("Renewal must extend the contract end date")
        renewal = renewals.add(ContractRenewal(company_id=company_id, **data.model_dump()))
        logger.info("Renewal requested for contract %s until %s", contract.contract_code, renewal.new_end_date)
        await AuditService.record("create", "contract_renewal", renewal)
        return renewal

    @classmethod
    async def approve_renewal(
        cls, company_id: str, renewal_id: str, approved_by: Optional[str] = None
    ) -> Optional[ContractRenewal]:
        renewal = renewals.get_owned(renewal_id, company_id)
        if renewal is None:
            return None
        if renewal.status != "pending":
            raise invalid_state(f"Renewal is already {renewal.status}")
        contract = cls._require_contract(company_id, renewal.contract_id)
        renewal.status = "approved"
        renewal.approved_by = approved_by
        contract.end_date = renewal.new_end_date
        contract.renewal_date = renewal.renewal_date
        if renewal.new_value is not None:
            contract.value = renewal.new_value
        logger.info("Renewal %s approved; contract %s now ends %s", renewal_id, contract.contract_code, contract.end_date)
        await AuditService.record("approve", "contract_renewal", renewal, new_end_date=str(renewal.new_end_date))
        return renewal

    @classmethod
    async def get_contracts(cls, company_id: str, status: Optional[str] = None) -> List[Contract]:
        return contracts.filter(company_id=company_id, status=status)

    @classmethod
    async def get_clauses(cls, company_id: str, contract_id: Optional[str] = None) -> List[ContractClause]:
        return clauses.filter(company_id=company_id, contract_id=contract_id)

    @classmethod
    async def get_renewals(cls, company_id: str, status: Optional[str] = None) -> List[ContractRenewal]:
        return renewals.filter(company_id=company_id, status=status)

    @classmethod
    async def get_metrics(cls, company_id: str) -> ContractMetrics:
        book = contracts.filter(company_id=company_id)
        today = date.today()
        return ContractMetrics(
            total_contracts=len(book),
            active_contracts=sum(1 for c in book if c.status == "active"),
            expired_contracts=sum(1 for c in book if c.status == "expired"),
            total_contract_value=sum(c.value for c in book),
            pending_renewals=len(renewals.filter(company_id=company_id, status="pending")),
            expiring_soon=sum(
                1 for c in book if c.status == "active" and today <= c.end_date <= today + EXPIRY_WINDOW
            ),
            contract_compliance_rate=COMPLIANCE_RATE,
        )

    @classmethod
    def _require_contract(cls, company_id: str, contract_id: str) -> Contract:
        contract = contracts.get_owned(contract_id, company_id)
        if contract is None:
            raise not_found("Contract not found")
        return contract
