"""SQLAlchemy models."""

from src.models.article import Article
from src.models.user import User

__all__ = [
    "User",
    "Article",
]
