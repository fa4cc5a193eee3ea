"""Pydantic schema for audit trail entries."""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import Field

from .base import CamelModel
from ..core.store import new_id


class AuditEntry(CamelModel):
    id: str = Field(default_factory=new_id)
    company_id: str
    user_id: Optional[str] = None
    action: str = Field(..., description="Short verb such as create, approve or delete")
    object_type: str = Field(..., description="Kind of record affected, e.g. employee or invoice")
    object_id: Optional[str] = None
    details: Optional[Dict[str, Any]] = None
    timestamp: datetime = Field(default_factory=datetime.utcnow)
