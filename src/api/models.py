"""
API response models.

Pydantic models for serializing controller responses and OpenAPI schema generation.
"""

from pydantic import BaseModel


class SignUpBody(BaseModel):
    """Request body documented for POST /v1/signup (validated by the controller)."""

    name: str | None = None
    email: str | None = None
    password: str | None = None
    passwordConfirmation: str | None = None


class AccountResponse(BaseModel):
    """Response model for a created account."""

    id: str
    name: str
    email: str


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
    field: str | None = None
