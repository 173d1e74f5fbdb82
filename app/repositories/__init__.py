"""
Token Service - Repositories Module

Persistence helpers wrapping the async database session.
"""

from app.repositories.token_repository import TokenRepository

__all__ = ["TokenRepository"]
