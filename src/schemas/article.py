"""Article schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ArticleWrite(BaseModel):
    """Create or replace an article.

    ``title``, ``content`` and ``category`` are required, but emptiness is
    checked by the article service so every missing field gets the same message.
    """

    title: str | None = Field(None, max_length=255)
    content: str | None = None
    category: str | None = Field(None, max_length=100)
    tags: str | None = Field(None, max_length=500)


class ArticleResponse(BaseModel):
    """Article with its author's display name."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    author_id: int
    title: str
    content: str
    summary: str | None
    category: str
    tags: str | None
    created_at: datetime
    updated_at: datetime
    username: str | None = None


class ArticleDetail(ArticleResponse):
    """Single article, also carrying the author's email."""

    email: str | None = None


class ArticleListResponse(BaseModel):
    """All articles, newest first."""

    success: bool = True
    count: int
    data: list[ArticleResponse]


class ArticleDetailResponse(BaseModel):
    """One article."""

    success: bool = True
    data: ArticleDetail


class ArticleCreatedResponse(BaseModel):
    """Article creation result."""

    success: bool = True
    message: str
    article_id: int = Field(..., serialization_alias="articleId")
