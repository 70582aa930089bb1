"""Article API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_article_service, get_current_actor, require_article_owner
from src.schemas.article import (
    ArticleCreatedResponse,
    ArticleDetailResponse,
    ArticleListResponse,
    ArticleWrite,
)
from src.schemas.common import MessageResponse
from src.services.article_service import ArticleService
from src.services.auth import TokenClaims

router = APIRouter(prefix="/api/articles", tags=["articles"])


@router.post("", response_model=ArticleCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_article(
    article_data: ArticleWrite,
    current_actor: Annotated[TokenClaims, Depends(get_current_actor)],
    service: Annotated[ArticleService, Depends(get_article_service)],
):
    """Create an article authored by the current user."""
    article = service.create_article(article_data, author_id=current_actor.id)
    return ArticleCreatedResponse(message="Article created successfully", article_id=article.id)


@router.get("", response_model=ArticleListResponse)
def get_articles(
    service: Annotated[ArticleService, Depends(get_article_service)],
):
    """Get all articles, newest first."""
    articles = service.list_articles()
    return ArticleListResponse(count=len(articles), data=articles)


@router.get("/{article_id}", response_model=ArticleDetailResponse)
def get_article(
    article_id: int,
    service: Annotated[ArticleService, Depends(get_article_service)],
):
    """Get a specific article."""
    return ArticleDetailResponse(data=service.get_article(article_id))


@router.put(
    "/{article_id}",
    response_model=MessageResponse,
    dependencies=[Depends(require_article_owner)],
)
def update_article(
    article_id: int,
    article_data: ArticleWrite,
    service: Annotated[ArticleService, Depends(get_article_service)],
):
    """Update an article. Only its author may do this."""
    service.update_article(article_id, article_data)
    return MessageResponse(message="Article updated successfully")


@router.delete(
    "/{article_id}",
    response_model=MessageResponse,
    dependencies=[Depends(require_article_owner)],
)
def delete_article(
    article_id: int,
    service: Annotated[ArticleService, Depends(get_article_service)],
):
    """Delete an article. Only its author may do this."""
    service.delete_article(article_id)
    return MessageResponse(message="Article deleted successfully")
