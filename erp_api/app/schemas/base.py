"""
Shared pydantic bases.

API payloads and responses use camelCase field names (``companyId``,
``createdAt``) while Python code uses snake_case attributes.  The
``CamelModel`` base wires that up once: models serialize with camelCase
aliases and accept either spelling on input.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..core.store import document_number, new_id


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Record(CamelModel):
    """Base for every stored record: random id, owning company, creation time."""

    id: str = Field(default_factory=new_id)
    company_id: str
    created_at: datetime = Field(default_factory=datetime.utcnow)


def code_field(prefix: str) -> Any:
    """Human readable code such as ``ADJ-1718035200123``, generated when omitted."""
    return Field(default_factory=lambda: document_number(prefix))
