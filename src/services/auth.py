"""Authentication service for JWT, password handling and access control."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.config import get_settings
from src.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ServerError,
    TokenExpiredError,
    TokenMalformedError,
    ValidationError,
)
from src.models.user import User
from src.services.article_service import get_article_author_id

logger = logging.getLogger(__name__)

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)

INVALID_CREDENTIALS = "Invalid credentials"
DUPLICATE_EMAIL = "Email already registered"

# bcrypt ignores everything past this many bytes
MAX_PASSWORD_BYTES = 72


@dataclass(frozen=True)
class TokenClaims:
    """Verified identity carried by an access token."""

    id: int
    email: str
    issued_at: datetime
    expires_at: datetime


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def check_password_length(password: str) -> None:
    """Reject passwords bcrypt would silently truncate."""
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")


def get_password_hash(password: str) -> str:
    """Hash a password."""
    try:
        return pwd_context.hash(password)
    except (TypeError, ValueError) as e:
        logger.error(f"Password hashing failed: {type(e).__name__}")
        raise ServerError() from e


def create_access_token(user_id: int, email: str, now: datetime | None = None) -> str:
    """Create a JWT access token."""
    issued_at = now or datetime.now(UTC)
    expire = issued_at + timedelta(minutes=settings.jwt_expiration_minutes)
    to_encode = {
        "sub": str(user_id),
        "email": email,
        "iat": issued_at,
        "exp": expire,
    }
    encoded_jwt = jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    return encoded_jwt


def decode_access_token(token: str, now: datetime | None = None) -> TokenClaims:
    """Decode and validate a JWT token.

    Expiry is checked here rather than by jose so that a token presented at
    exactly its ``exp`` second is already rejected.

    Raises:
        TokenMalformedError: unparseable token, bad signature or missing claims.
        TokenExpiredError: ``now`` is at or past the token's expiry.
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"verify_exp": False},
        )
    except JWTError as e:
        raise TokenMalformedError(str(e)) from e

    sub = payload.get("sub")
    email = payload.get("email")
    exp = payload.get("exp")
    iat = payload.get("iat")
    if not isinstance(sub, str) or not (sub.isascii() and sub.isdecimal()):
        raise TokenMalformedError("Token subject is not a user id")
    if not isinstance(email, str) or not email:
        raise TokenMalformedError("Token has no email claim")
    if not isinstance(exp, int) or not isinstance(iat, int):
        raise TokenMalformedError("Token has no validity window")

    current = now or datetime.now(UTC)
    if current.timestamp() >= exp:
        raise TokenExpiredError("Token has expired")

    return TokenClaims(
        id=int(sub),
        email=email,
        issued_at=datetime.fromtimestamp(iat, UTC),
        expires_at=datetime.fromtimestamp(exp, UTC),
    )


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == email).first()


def authenticate_user(db: Session, email: str, password: str) -> User | None:
    """Authenticate a user by email and password."""
    user = get_user_by_email(db, email)
    if not user:
        # Keep unknown-email and wrong-password timing alike
        pwd_context.dummy_verify()
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user


def create_user(db: Session, username: str, email: str, password: str) -> User:
    """Create a new user.

    The unique index on ``users.email`` is what actually guarantees one user
    per email; a concurrent signup that slips past the lookup fails here.
    """
    hashed_password = get_password_hash(password)
    user = User(username=username, email=email, password_hash=hashed_password)
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.info("Signup rejected by unique constraint on users.email")
        raise ConflictError(DUPLICATE_EMAIL) from e
    db.refresh(user)
    return user


def signup(
    db: Session, username: str | None, email: str | None, password: str | None
) -> tuple[User, str]:
    """Register a user and issue their first token."""
    if not username or not email or not password:
        raise ValidationError("All fields are required")
    check_password_length(password)

    if get_user_by_email(db, email):
        logger.info("Signup rejected: email already registered")
        raise ConflictError(DUPLICATE_EMAIL)

    user = create_user(db, username, email, password)
    logger.info(f"Registered user {user.id}")

    return user, create_access_token(user.id, user.email)


def login(db: Session, email: str | None, password: str | None) -> tuple[User, str]:
    """Check credentials and issue a token.

    Unknown email and wrong password fail identically.
    """
    if not email or not password:
        raise ValidationError("Email and password are required")
    check_password_length(password)

    user = authenticate_user(db, email, password)
    if not user:
        logger.info("Login failed")
        raise AuthenticationError(INVALID_CREDENTIALS, status_code=400)

    return user, create_access_token(user.id, user.email)


def check_article_ownership(db: Session, article_id: int, actor_id: int) -> None:
    """Allow the call only if ``actor_id`` wrote the article.

    Existence is checked first, so a missing article is a 404 and never a 403.
    """
    if not isinstance(actor_id, int):
        raise TypeError(f"actor_id must be int, got {type(actor_id).__name__}")

    author_id = get_article_author_id(db, article_id)
    if author_id is None:
        raise NotFoundError("Article not found")

    if author_id != actor_id:
        logger.warning(f"User {actor_id} denied access to article {article_id}")
        raise AuthorizationError("Forbidden: You are not the author")
