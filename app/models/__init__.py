"""
Token Service - Models Module

This module exports all SQLAlchemy models for the application.
Import Base for Alembic migrations.
"""

from app.core.database import Base

# Enums
from app.models.enums import TokenType

# Models
from app.models.user import User
from app.models.token import Token

__all__ = [
    # Base
    "Base",
    # Enums
    "TokenType",
    # Models
    "User",
    "Token",
]
