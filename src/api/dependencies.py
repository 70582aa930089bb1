"""FastAPI dependencies for authentication and authorization."""

import logging
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from src.database import get_db
from src.errors import AuthenticationError, TokenError
from src.services.article_service import ArticleService
from src.services.auth import TokenClaims, check_article_ownership, decode_access_token

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)

BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}


def get_current_actor(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> TokenClaims:
    """Get the authenticated actor from the bearer token.

    Trusts the signature alone; the user table is not consulted.
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Not authorized, no token", headers=BEARER_CHALLENGE)

    try:
        return decode_access_token(credentials.credentials)
    except TokenError as e:
        logger.debug(f"Token rejected ({type(e).__name__}): {e}")
        raise AuthenticationError("Not authorized, token failed", headers=BEARER_CHALLENGE) from e


def require_article_owner(
    article_id: int,
    current_actor: Annotated[TokenClaims, Depends(get_current_actor)],
    db: Annotated[Session, Depends(get_db)],
) -> TokenClaims:
    """Authenticate, then require the actor to be the article's author."""
    check_article_ownership(db, article_id, current_actor.id)
    return current_actor


def get_article_service(
    db: Annotated[Session, Depends(get_db)],
) -> ArticleService:
    """Get article service with dependencies."""
    return ArticleService(db)
