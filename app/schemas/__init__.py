"""
Token Service - Schemas Module

Pydantic models for request/response validation.
"""

from app.schemas.token import AuthTokens, TokenExpiry, TokenPayload

__all__ = [
    # Token
    "TokenPayload",
    "TokenExpiry",
    "AuthTokens",
]
