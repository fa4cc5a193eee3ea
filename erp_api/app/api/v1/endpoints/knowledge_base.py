"""Knowledge base endpoints for API v1."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from erp_api.app.api.v1.dispatch import created, current_company, found, parse_payload, resolve_action
from erp_api.app.core.errors import invalid_action
from erp_api.app.schemas.knowledge_base import ArticleCreate, ArticleRef, CategoryCreate, CommentCreate, CommentModeration
from erp_api.app.services.knowledge_base_service import KnowledgeBaseService

router = APIRouter()


@router.get("")
async def read_knowledge_base(
    action: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
    category: Optional[str] = Query(None),
    article_id: Optional[str] = Query(None, alias="articleId"),
    company_id: str = Depends(current_company),
) -> Any:
    if action == "articles":
        return await KnowledgeBaseService.get_articles(company_id, status=status_filter, category=category)
    if action == "categories":
        return await KnowledgeBaseService.get_categories(company_id)
    if action == "comments":
        return await KnowledgeBaseService.get_comments(company_id, article_id=article_id)
    if action == "metrics":
        return await KnowledgeBaseService.get_metrics(company_id)
    raise invalid_action(action)


@router.post("")
async def act_knowledge_base(
    response: Response,
    action: Optional[str] = Query(None),
    payload: Optional[Dict[str, Any]] = Body(None),
    company_id: str = Depends(current_company),
) -> Any:
    name, body = resolve_action(action, payload)

    if name == "create-article":
        created(response)
        return await KnowledgeBaseService.create_article(company_id, parse_payload(ArticleCreate, body))
    if name == "publish-article":
        data = parse_payload(ArticleRef, body)
        return found(await KnowledgeBaseService.publish_article(company_id, data.article_id), "Article")
    if name == "view-article":
        data = parse_payload(ArticleRef, body)
        return found(await KnowledgeBaseService.view_article(company_id, data.article_id), "Article")
    if name == "create-category":
        created(response)
        return await KnowledgeBaseService.create_category(company_id, parse_payload(CategoryCreate, body))
    if name == "add-comment":
        created(response)
        return await KnowledgeBaseService.add_comment(company_id, parse_payload(CommentCreate, body))
    if name == "moderate-comment":
        data = parse_payload(CommentModeration, body)
        return found(await KnowledgeBaseService.moderate_comment(company_id, data.comment_id, data.status), "Comment")
    raise invalid_action(name)
