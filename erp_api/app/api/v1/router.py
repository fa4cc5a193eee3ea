"""
Top-level router for version 1 of the API.

Aggregates the authentication and audit routers and one router per
ERP domain.  Domain paths follow the dashboard URLs, e.g.
``/api/hrm/employees`` or ``/api/maintenance/corrective``.  When a new
domain is introduced, add its router here.
"""

from fastapi import APIRouter

from .endpoints import (
    accounting,
    asset_management,
    asset_tracking,
    audit,
    auth,
    compliance,
    contracts,
    corrective_maintenance,
    crm,
    defects,
    energy,
    feedback,
    financial_reporting,
    goals,
    hrm,
    insurance,
    inventory,
    knowledge_base,
    learning,
    logistics,
    payroll,
    performance,
    preventive_maintenance,
    procurement,
    projects,
    qa_automation,
    qa_test_cases,
    quality,
    resource_planning,
    risks,
    sales_pipeline,
    shifts,
    skills,
    supply_chain,
    support_tickets,
    survey_analytics,
    sustainability,
    time_attendance,
    training,
    vendors,
    warehouse,
)

router = APIRouter()

router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(audit.router, prefix="/audit", tags=["audit"])

# (prefix, module, tag)
DOMAIN_ROUTES = [
    ("/hrm/employees", hrm, "hrm"),
    ("/crm/customers", crm, "crm"),
    ("/inventory/management", inventory, "inventory"),
    ("/procurement", procurement, "procurement"),
    ("/accounting", accounting, "accounting"),
    ("/financial-reporting", financial_reporting, "financial-reporting"),
    ("/payroll", payroll, "payroll"),
    ("/assets/management", asset_management, "assets"),
    ("/assets/tracking", asset_tracking, "assets"),
    ("/contracts/management", contracts, "contracts"),
    ("/maintenance/corrective", corrective_maintenance, "maintenance"),
    ("/maintenance/preventive", preventive_maintenance, "maintenance"),
    ("/defects/tracking", defects, "defects"),
    ("/energy/management", energy, "energy"),
    ("/feedback/management", feedback, "feedback"),
    ("/goals/tracking", goals, "goals"),
    ("/insurance/management", insurance, "insurance"),
    ("/knowledge/base", knowledge_base, "knowledge"),
    ("/learning/resources", learning, "learning"),
    ("/logistics", logistics, "logistics"),
    ("/performance/evaluation", performance, "performance"),
    ("/projects/management", projects, "projects"),
    ("/quality/management", quality, "quality"),
    ("/resources/planning", resource_planning, "resources"),
    ("/risks/management", risks, "risks"),
    ("/sales/pipeline", sales_pipeline, "sales"),
    ("/shifts/management", shifts, "shifts"),
    ("/skills/development", skills, "skills"),
    ("/supply-chain", supply_chain, "supply-chain"),
    ("/support/tickets", support_tickets, "support"),
    ("/survey/analytics", survey_analytics, "survey"),
    ("/sustainability", sustainability, "sustainability"),
    ("/time-attendance/management", time_attendance, "time-attendance"),
    ("/training/management", training, "training"),
    ("/vendors/management", vendors, "vendors"),
    ("/warehouse/operations", warehouse, "warehouse"),
    ("/compliance/management", compliance, "compliance"),
    ("/qa/test-cases", qa_test_cases, "qa"),
    ("/qa/automation", qa_automation, "qa"),
]

for prefix, module, tag in DOMAIN_ROUTES:
    router.include_router(module.router, prefix=prefix, tags=[tag])
