"""
Token Schemas

Pydantic models for JWT token handling.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from app.models.enums import TokenType


class TokenPayload(BaseModel):
    """Schema for the claims embedded in a signed token."""

    sub: str = Field(..., min_length=1)  # User ID
    iat: int  # Issued-at timestamp
    exp: int  # Expiration timestamp
    type: TokenType


class TokenExpiry(BaseModel):
    """A token string together with its absolute expiry."""

    token: str
    expires: datetime


class AuthTokens(BaseModel):
    """Schema for the access/refresh pair issued at login."""

    access: TokenExpiry
    refresh: TokenExpiry
