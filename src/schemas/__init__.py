"""Pydantic schemas for API requests and responses."""

from src.schemas.article import (
    ArticleCreatedResponse,
    ArticleDetail,
    ArticleDetailResponse,
    ArticleListResponse,
    ArticleResponse,
    ArticleWrite,
)
from src.schemas.auth import ActorResponse, AuthResponse, MeResponse, UserLogin, UserSignup
from src.schemas.common import ErrorResponse, MessageResponse

__all__ = [
    "UserSignup",
    "UserLogin",
    "AuthResponse",
    "ActorResponse",
    "MeResponse",
    "MessageResponse",
    "ErrorResponse",
    "ArticleWrite",
    "ArticleResponse",
    "ArticleDetail",
    "ArticleListResponse",
    "ArticleDetailResponse",
    "ArticleCreatedResponse",
]
