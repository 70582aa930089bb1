"""Authentication schemas.

Request fields are optional at the schema level so the signup and login
flows can reject missing or empty values with their own messages.
"""

from pydantic import BaseModel, Field


class UserSignup(BaseModel):
    """User signup request."""

    username: str | None = Field(None, max_length=255)
    email: str | None = Field(None, max_length=255)
    password: str | None = None


class UserLogin(BaseModel):
    """User login request."""

    email: str | None = Field(None, max_length=255)
    password: str | None = None


class AuthResponse(BaseModel):
    """Signup/login response carrying a fresh token."""

    success: bool = True
    message: str
    token: str


class ActorResponse(BaseModel):
    """Identity decoded from the caller's token."""

    id: int
    email: str


class MeResponse(BaseModel):
    """Current actor response."""

    success: bool = True
    data: ActorResponse
