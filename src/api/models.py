"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Field rules are enforced by the domain value types, not here, so that
every validation failure comes back as the domain's single message.
"""

from pydantic import BaseModel, Field


class SignupRequest(BaseModel):
    """Request model for user signup."""

    username: str = Field(..., description="Username (1-12 characters)")
    email: str = Field(..., description="Email address")
    password: str = Field(..., description="Password (4-8 characters)")


class SignupResponse(BaseModel):
    """Response model for successful signup."""

    message: str
    user_id: int
    username: str


class VerifyResponse(BaseModel):
    """Response model for successful email verification."""

    message: str
    username: str


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
