"""Article service for create, read, update and delete operations."""

import logging

from sqlalchemy.orm import Session

from src.config import get_settings
from src.errors import NotFoundError, ValidationError
from src.models.article import Article
from src.models.user import User
from src.schemas.article import ArticleDetail, ArticleResponse, ArticleWrite

logger = logging.getLogger(__name__)

SUMMARY_SUFFIX = "..."


def summarize(content: str, length: int | None = None) -> str:
    """Plain character slice of the content followed by an ellipsis."""
    if length is None:
        length = get_settings().summary_length
    return content[:length] + SUMMARY_SUFFIX


def get_article_author_id(db: Session, article_id: int) -> int | None:
    """Return the author id of an article, or None if it does not exist."""
    row = db.query(Article.author_id).filter(Article.id == article_id).first()
    if row is None:
        return None
    return row[0]


class ArticleService:
    """Service for article operations.

    Authorship is enforced before these methods are reached; they never
    change ``author_id`` after creation.
    """

    def __init__(self, db: Session):
        self.db = db

    @staticmethod
    def _validate(data: ArticleWrite) -> None:
        if not data.title or not data.content or not data.category:
            raise ValidationError("Title, content and category are required")

    def create_article(self, data: ArticleWrite, author_id: int) -> Article:
        """Create an article owned by ``author_id``."""
        self._validate(data)

        article = Article(
            title=data.title,
            content=data.content,
            summary=summarize(data.content),
            category=data.category,
            tags=data.tags,
            author_id=author_id,
        )
        self.db.add(article)
        self.db.commit()
        self.db.refresh(article)

        logger.info(f"User {author_id} created article {article.id}")
        return article

    def list_articles(self) -> list[ArticleResponse]:
        """All articles with author usernames, newest first."""
        rows = (
            self.db.query(Article, User.username)
            .join(User, Article.author_id == User.id)
            .order_by(Article.created_at.desc(), Article.id.desc())
            .all()
        )

        result = []
        for article, username in rows:
            article_response = ArticleResponse.model_validate(article)
            article_response.username = username
            result.append(article_response)
        return result

    def get_article(self, article_id: int) -> ArticleDetail:
        """One article with its author's username and email."""
        row = (
            self.db.query(Article, User.username, User.email)
            .join(User, Article.author_id == User.id)
            .filter(Article.id == article_id)
            .first()
        )
        if row is None:
            raise NotFoundError("Article not found")

        article, username, email = row
        detail = ArticleDetail.model_validate(article)
        detail.username = username
        detail.email = email
        return detail

    def update_article(self, article_id: int, data: ArticleWrite) -> Article:
        """Replace the editable fields of an article."""
        self._validate(data)

        article = self.db.query(Article).filter(Article.id == article_id).first()
        if article is None:
            raise NotFoundError("Article not found")

        article.title = data.title
        article.content = data.content
        article.summary = summarize(data.content)
        article.category = data.category
        article.tags = data.tags
        self.db.commit()
        self.db.refresh(article)

        logger.info(f"Updated article {article_id}")
        return article

    def delete_article(self, article_id: int) -> None:
        """Permanently delete an article."""
        deleted = self.db.query(Article).filter(Article.id == article_id).delete()
        self.db.commit()
        if not deleted:
            raise NotFoundError("Article not found")

        logger.info(f"Deleted article {article_id}")
