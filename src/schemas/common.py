"""Shared response envelopes."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Generic success envelope."""

    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    """Error envelope returned for every failed request."""

    success: bool = False
    message: str
