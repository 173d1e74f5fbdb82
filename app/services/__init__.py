"""
Token Service - Services Module

Business logic layer.
"""

from app.services import token_service
from app.services import user_service

__all__ = [
    "token_service",
    "user_service",
]
