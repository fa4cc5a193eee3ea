"""Pydantic schemas for knowledge base articles, categories and comments."""

from typing import List, Literal

from pydantic import Field

from .base import CamelModel, Record, code_field

ArticleStatus = Literal["draft", "published", "archived"]


class ArticleCreate(CamelModel):
    article_code: str = code_field("KB")
    article_title: str = Field(..., min_length=1)
    article_content: str = ""
    category: str = ""
    tags: List[str] = Field(default_factory=list)
    author: str = ""


class KnowledgeArticle(Record, ArticleCreate):
    status: ArticleStatus = "draft"
    views: int = 0


class ArticleRef(CamelModel):
    article_id: str


class CategoryCreate(CamelModel):
    category_code: str = code_field("CAT")
    category_name: str = Field(..., min_length=1)
    description: str = ""


class KnowledgeCategory(Record, CategoryCreate):
    status: Literal["active", "inactive"] = "active"


class CommentCreate(CamelModel):
    article_id: str
    comment_text: str = Field(..., min_length=1)
    author: str = ""
    rating: int = Field(5, ge=1, le=5)


class KnowledgeComment(Record, CommentCreate):
    status: Literal["pending", "approved", "rejected"] = "pending"


class CommentModeration(CamelModel):
    comment_id: str
    status: Literal["approved", "rejected"] = "approved"


class KnowledgeMetrics(CamelModel):
    total_articles: int
    published_articles: int
    total_categories: int
    active_categories: int
    total_comments: int
    approved_comments: int
    total_views: int
    knowledge_score: float
