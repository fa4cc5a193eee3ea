"""
Audit log endpoints for API v1.

Expose the in-memory audit trail to administrators.  Entries record
create and state-changing actions across every ERP module and can be
filtered by object type and action.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from erp_api.app.core.security import require_roles
from erp_api.app.schemas.audit import AuditEntry
from erp_api.app.services.audit_service import AuditService

router = APIRouter()


@router.get("/logs", response_model=List[AuditEntry])
async def list_audit_logs(
    object_type: Optional[str] = Query(None, alias="objectType", description="Filter by object type (employee, invoice, ...)"),
    action: Optional[str] = Query(None, description="Filter by action (create, approve, ...)"),
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    current_user: Dict[str, Any] = Depends(require_roles("admin")),
) -> List[AuditEntry]:
    """Retrieve the caller's company audit entries, newest first."""
    return await AuditService.list_logs(
        company_id=current_user["company_id"],
        object_type=object_type,
        action=action,
        limit=limit,
        offset=offset,
    )
