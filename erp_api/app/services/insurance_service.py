"""
Service layer for insurance management.

Claims can only be filed against active policies.  An approved amount
may not exceed the claimed amount or the policy's coverage.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from erp_api.app.core.errors import business_rule_violation, invalid_state, not_found
from erp_api.app.core.store import InMemoryStore, document_number
from erp_api.app.schemas.insurance import ClaimCreate, InsuranceClaim, InsuranceMetrics, InsurancePolicy, PolicyCreate
from erp_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)

INSURANCE_COST_RATIO = 2.5

policies: InMemoryStore[InsurancePolicy] = InMemoryStore("insurance.policies")
claims: InMemoryStore[InsuranceClaim] = InMemoryStore("insurance.claims")


class InsuranceService:
    @classmethod
    async def create_policy(cls, company_id: str, data: PolicyCreate) -> InsurancePolicy:
        fields = data.model_dump()
        fields["policy_code"] = data.policy_code or document_number("POL")
        policy = policies.add(InsurancePolicy(company_id=company_id, **fields))
        logger.info("Insurance policy created: %s with %s", policy.policy_code, policy.provider)
        await AuditService.record("create", "insurance_policy", policy, coverage=policy.coverage_amount)
        return policy

    @classmethod
    async def file_claim(cls, company_id: str, data: ClaimCreate) -> InsuranceClaim:
        policy = policies.get_owned(data.policy_id, company_id)
        if policy is None:
            raise not_found("Policy not found")
        if policy.status != "active":
            raise invalid_state(f"Policy is {policy.status}")
        fields = data.model_dump()
        fields["claim_code"] = data.claim_code or document_number("CLM")
        claim = claims.add(InsuranceClaim(company_id=company_id, **fields))
        logger.info("Claim filed: %s for %.2f on policy %s", claim.claim_code, claim.claim_amount, policy.policy_code)
        await AuditService.record("create", "insurance_claim", claim, amount=claim.claim_amount)
        return claim

    @classmethod
    async def approve_claim(
        cls, company_id: str, claim_id: str, approved_amount: Optional[float] = None
    ) -> Optional[InsuranceClaim]:
        claim = claims.get_owned(claim_id, company_id)
        if claim is None:
            return None
        cls._require_open(claim)
        amount = claim.claim_amount if approved_amount is None else approved_amount
        policy = policies.get_owned(claim.policy_id, company_id)
        if amount > claim.claim_amount:
            raise business_rule_violation("Approved amount exceeds the claimed amount")
        if policy is not None and amount > policy.coverage_amount:
            raise business_rule_violation("Approved amount exceeds the policy coverage")
        claim.status = "approved"
        claim.approved_amount = amount
        logger.info("Claim approved: %s for %.2f", claim.claim_code, amount)
        await AuditService.record("approve", "insurance_claim", claim, amount=amount)
        return claim

    @classmethod
    async def reject_claim(cls, company_id: str, claim_id: str) -> Optional[InsuranceClaim]:
        claim = claims.get_owned(claim_id, company_id)
        if claim is None:
            return None
        cls._require_open(claim)
        claim.status = "rejected"
        logger.info("Claim rejected: %s", claim.claim_code)
        await AuditService.record("reject", "insurance_claim", claim)
        return claim

    @classmethod
    async def get_policies(cls, company_id: str, status: Optional[str] = None) -> List[InsurancePolicy]:
        return policies.filter(company_id=company_id, status=status)

    @classmethod
    async def get_claims(
        cls, company_id: str, policy_id: Optional[str] = None, status: Optional[str] = None
    ) -> List[InsuranceClaim]:
        return claims.filter(company_id=company_id, policy_id=policy_id, status=status)

    @classmethod
    async def get_metrics(cls, company_id: str) -> InsuranceMetrics:
        company_policies = policies.filter(company_id=company_id)
        company_claims = claims.filter(company_id=company_id)
        approved = [c for c in company_claims if c.status in ("approved", "paid")]
        return InsuranceMetrics(
            total_policies=len(company_policies),
            active_policies=sum(1 for p in company_policies if p.status == "active"),
            total_coverage=sum(p.coverage_amount for p in company_policies),
            total_premiums=sum(p.premium for p in company_policies),
            total_claims=len(company_claims),
            approved_claims=len(approved),
            total_approved_amount=sum(c.approved_amount or 0 for c in approved),
            claim_approval_rate=len(approved) / len(company_claims) * 100 if company_claims else 0,
            insurance_cost_ratio=INSURANCE_COST_RATIO,
        )

    @staticmethod
    def _require_open(claim: InsuranceClaim) -> None:
        if claim.status not in ("filed", "under-review"):
            raise invalid_state(f"Claim is already {claim.status}")
