"""
Service layer for customer support.

Tickets are numbered ``TKT-<milliseconds>``.  Assigning a ticket puts it
``in-progress``; every comment touches the ticket's ``updatedAt``.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from erp_api.app.core.errors import invalid_state, not_found
from erp_api.app.core.store import InMemoryStore, document_number
from erp_api.app.schemas.support_tickets import (
    CommentCreate,
    HelpArticle,
    HelpArticleCreate,
    SupportMetrics,
    SupportTicket,
    TicketComment,
    TicketCreate,
    TicketStatus,
)
from erp_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)

# hours
AVERAGE_RESOLUTION_TIME = 24
CUSTOMER_SATISFACTION = 4.5

tickets: InMemoryStore[SupportTicket] = InMemoryStore("support.tickets")
comments: InMemoryStore[TicketComment] = InMemoryStore("support.comments")
articles: InMemoryStore[HelpArticle] = InMemoryStore("support.articles")


class SupportTicketService:
    @classmethod
    async def create_ticket(cls, company_id: str, data: TicketCreate) -> SupportTicket:
        ticket = tickets.add(
            SupportTicket(company_id=company_id, ticket_number=document_number("TKT"), **data.model_dump())
        )
        logger.info("Support ticket created: %s (%s)", ticket.ticket_number, ticket.priority)
        await AuditService.record("create", "ticket", ticket, priority=ticket.priority)
        return ticket

    @classmethod
    async def assign_ticket(cls, company_id: str, ticket_id: str, assigned_to: str) -> Optional[SupportTicket]:
        ticket = tickets.get_owned(ticket_id, company_id)
        if ticket is None:
            return None
        if ticket.status == "closed":
            raise invalid_state("Ticket is closed")
        ticket.assigned_to = assigned_to
        ticket.status = "in-progress"
        ticket.updated_at = datetime.utcnow()
        logger.info("Ticket %s assigned to %s", ticket.ticket_number, assigned_to)
        return ticket

    @classmethod
    async def update_status(cls, company_id: str, ticket_id: str, status: TicketStatus) -> Optional[SupportTicket]:
        ticket = tickets.get_owned(ticket_id, company_id)
        if ticket is None:
            return None
        if ticket.status == "closed":
            raise invalid_state("Ticket is closed")
        ticket.status = status
        ticket.updated_at = datetime.utcnow()
        if status == "resolved":
            ticket.resolved_at = ticket.updated_at
        logger.info("Ticket %s is now %s", ticket.ticket_number, status)
        await AuditService.record("update-status", "ticket", ticket, status=status)
        return ticket

    @classmethod
    async def add_comment(cls, company_id: str, data: CommentCreate) -> TicketComment:
        ticket = tickets.get_owned(data.ticket_id, company_id)
        if ticket is None:
            raise not_found("Ticket not found")
        comment = comments.add(TicketComment(company_id=company_id, **data.model_dump()))
        ticket.updated_at = datetime.utcnow()
        logger.info("Comment added to ticket %s", ticket.ticket_number)
        return comment

    @classmethod
    async def create_article(cls, company_id: str, data: HelpArticleCreate) -> HelpArticle:
        article = articles.add(HelpArticle(company_id=company_id, **data.model_dump()))
        logger.info("Help article created: %s", article.title)
        return article

    @classmethod
    async def mark_article_helpful(cls, company_id: str, article_id: str) -> Optional[HelpArticle]:
        article = articles.get_owned(article_id, company_id)
        if article is None:
            return None
        article.helpful += 1
        article.updated_at = datetime.utcnow()
        return article

    @classmethod
    async def get_tickets(cls, company_id: str, status: Optional[str] = None) -> List[SupportTicket]:
        return tickets.filter(company_id=company_id, status=status)

    @classmethod
    async def get_comments(cls, company_id: str, ticket_id: Optional[str] = None) -> List[TicketComment]:
        return comments.filter(company_id=company_id, ticket_id=ticket_id)

    @classmethod
    async def get_articles(cls, company_id: str, category: Optional[str] = None) -> List[HelpArticle]:
        return articles.filter(company_id=company_id, category=category)

    @classmethod
    async def get_metrics(cls, company_id: str) -> SupportMetrics:
        company_tickets = tickets.filter(company_id=company_id)
        return SupportMetrics(
            total_tickets=len(company_tickets),
            open_tickets=sum(1 for t in company_tickets if t.status in ("open", "in-progress")),
            resolved_tickets=sum(1 for t in company_tickets if t.status == "resolved"),
            average_resolution_time=AVERAGE_RESOLUTION_TIME,
            customer_satisfaction=CUSTOMER_SATISFACTION,
        )
