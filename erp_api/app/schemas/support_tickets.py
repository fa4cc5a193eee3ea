"""Pydantic schemas for support tickets, ticket comments and help articles."""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field

from .base import CamelModel, Record

TicketPriority = Literal["low", "medium", "high", "critical"]
TicketStatus = Literal["open", "in-progress", "waiting", "resolved", "closed"]


class TicketCreate(CamelModel):
    customer_id: Optional[str] = None
    subject: str = Field(..., min_length=1)
    description: str = ""
    priority: TicketPriority = "medium"
    category: str = "general"


class SupportTicket(Record, TicketCreate):
    ticket_number: str
    status: TicketStatus = "open"
    assigned_to: Optional[str] = None
    updated_at: datetime = Field(default_factory=datetime.utcnow)
    resolved_at: Optional[datetime] = None


class TicketAssignment(CamelModel):
    ticket_id: str
    assigned_to: str


class TicketStatusUpdate(CamelModel):
    ticket_id: str
    status: TicketStatus


class TicketRef(CamelModel):
    ticket_id: str


class CommentCreate(CamelModel):
    ticket_id: str
    author_id: Optional[str] = None
    content: str = Field(..., min_length=1)
    is_internal: bool = False


class TicketComment(Record, CommentCreate):
    pass


class HelpArticleCreate(CamelModel):
    title: str = Field(..., min_length=1)
    content: str = ""
    category: str = "general"
    tags: List[str] = Field(default_factory=list)


class HelpArticle(Record, HelpArticleCreate):
    views: int = 0
    helpful: int = 0
    updated_at: datetime = Field(default_factory=datetime.utcnow)


class HelpArticleRef(CamelModel):
    article_id: str


class SupportMetrics(CamelModel):
    total_tickets: int
    open_tickets: int
    resolved_tickets: int
    average_resolution_time: float
    customer_satisfaction: float
