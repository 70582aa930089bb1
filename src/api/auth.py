"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from src.api.dependencies import get_current_actor
from src.database import get_db
from src.schemas.auth import ActorResponse, AuthResponse, MeResponse, UserLogin, UserSignup
from src.services.auth import TokenClaims, login, signup

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserSignup,
    db: Annotated[Session, Depends(get_db)],
):
    """Register a new user."""
    _, token = signup(db, user_data.username, user_data.email, user_data.password)
    return AuthResponse(message="User registered successfully", token=token)


@router.post("/login", response_model=AuthResponse)
def log_in(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
):
    """Login with email and password."""
    _, token = login(db, credentials.email, credentials.password)
    return AuthResponse(message="Login successful", token=token)


@router.get("/me", response_model=MeResponse)
async def get_me(
    current_actor: Annotated[TokenClaims, Depends(get_current_actor)],
):
    """Get the identity carried by the caller's token."""
    return MeResponse(data=ActorResponse(id=current_actor.id, email=current_actor.email))
