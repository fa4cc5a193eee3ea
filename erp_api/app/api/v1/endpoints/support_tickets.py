"""Support ticket endpoints for API v1."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from erp_api.app.api.v1.dispatch import created, found, parse_payload, resolve_action
from erp_api.app.core.errors import invalid_action
from erp_api.app.core.security import get_current_user
from erp_api.app.schemas.support_tickets import (
    CommentCreate,
    HelpArticleCreate,
    HelpArticleRef,
    TicketAssignment,
    TicketCreate,
    TicketRef,
    TicketStatusUpdate,
)
from erp_api.app.services.support_ticket_service import SupportTicketService

router = APIRouter()


@router.get("")
async def read_support(
    action: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
    ticket_id: Optional[str] = Query(None, alias="ticketId"),
    category: Optional[str] = Query(None),
    current_user: Dict[str, Any] = Depends(get_current_user),
) -> Any:
    company_id = current_user["company_id"]
    if action == "tickets":
        return await SupportTicketService.get_tickets(company_id, status=status_filter)
    if action == "comments":
        return await SupportTicketService.get_comments(company_id, ticket_id=ticket_id)
    if action == "articles":
        return await SupportTicketService.get_articles(company_id, category=category)
    if action == "metrics":
        return await SupportTicketService.get_metrics(company_id)
    raise invalid_action(action)


@router.post("")
async def act_support(
    response: Response,
    action: Optional[str] = Query(None),
    payload: Optional[Dict[str, Any]] = Body(None),
    current_user: Dict[str, Any] = Depends(get_current_user),
) -> Any:
    name, body = resolve_action(action, payload)
    company_id = current_user["company_id"]

    if name == "create-ticket":
        created(response)
        return await SupportTicketService.create_ticket(company_id, parse_payload(TicketCreate, body))
    if name == "assign-ticket":
        data = parse_payload(TicketAssignment, body)
        return found(await SupportTicketService.assign_ticket(company_id, data.ticket_id, data.assigned_to), "Ticket")
    if name == "update-ticket-status":
        data = parse_payload(TicketStatusUpdate, body)
        return found(await SupportTicketService.update_status(company_id, data.ticket_id, data.status), "Ticket")
    if name == "resolve-ticket":
        data = parse_payload(TicketRef, body)
        return found(await SupportTicketService.update_status(company_id, data.ticket_id, "resolved"), "Ticket")
    if name == "add-comment":
        data = parse_payload(CommentCreate, body)
        data.author_id = data.author_id or current_user.get("user_id")
        created(response)
        return await SupportTicketService.add_comment(company_id, data)
    if name == "create-article":
        created(response)
        return await SupportTicketService.create_article(company_id, parse_payload(HelpArticleCreate, body))
    if name == "mark-article-helpful":
        data = parse_payload(HelpArticleRef, body)
        return found(await SupportTicketService.mark_article_helpful(company_id, data.article_id), "Article")
    raise invalid_action(name)
