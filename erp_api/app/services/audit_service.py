"""
Audit service for recording and querying system actions.

Services call ``AuditService.log`` whenever they create a record or
change its state, so administrators can see who touched what across
all ERP modules.  Entries are kept in memory in a bounded buffer whose
size comes from ``settings.max_audit_entries``; once full, the oldest
entries are discarded.  Only administrators may read the trail.
"""

from __future__ import annotations

from collections import deque
from typing import Any, Deque, Dict, List, Optional

from erp_api.app.core.config import settings
from erp_api.app.core.security import current_user_id
from erp_api.app.schemas.audit import AuditEntry


class AuditService:
    """Service class for writing and retrieving audit entries."""

    _entries: Deque[AuditEntry] = deque(maxlen=settings.max_audit_entries)

    @classmethod
    async def log(
        cls,
        company_id: str,
        action: str,
        object_type: str,
        object_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        user_id: Optional[str] = None,
    ) -> AuditEntry:
        """Append a new audit entry.

        Parameters
        ----------
        company_id : str
            Tenant the affected record belongs to.
        action : str
            Short description of the action (e.g. "create", "approve").
        object_type : str
            Type of object affected (e.g. "employee", "invoice").
        object_id : Optional[str]
            Id of the affected record, if applicable.
        details : Optional[dict]
            Additional structured data about the action.
        user_id : Optional[str]
            Acting user.  Defaults to the user the current request
            is authenticated as, ``None`` outside a request.
        """
        entry = AuditEntry(
            company_id=company_id,
            user_id=user_id if user_id is not None else current_user_id.get(),
            action=action,
            object_type=object_type,
            object_id=object_id,
            details=details,
        )
        cls._entries.append(entry)
        return entry

    @classmethod
    async def record(cls, action: str, object_type: str, item: Any, **details: Any) -> AuditEntry:
        """Log ``action`` on a stored record, taking its id and company from the record."""
        return await cls.log(
            company_id=item.company_id,
            action=action,
            object_type=object_type,
            object_id=item.id,
            details=details or None,
        )

    @classmethod
    async def list_logs(
        cls,
        company_id: str,
        object_type: Optional[str] = None,
        action: Optional[str] = None,
        limit: int = 100,
        offset: int = 0,
    ) -> List[AuditEntry]:
        """Return a company's entries, newest first, with optional filters."""
        matches = [
            entry
            for entry in reversed(cls._entries)
            if entry.company_id == company_id
            and (object_type is None or entry.object_type == object_type)
            and (action is None or entry.action == action)
        ]
        return matches[offset : offset + limit]

    @classmethod
    def clear(cls) -> None:
        cls._entries.clear()
