"""
Token Service - Core Module

This module contains configuration, database setup, errors and signing utilities.
"""

from app.core.config import TokenConfig, get_settings, settings
from app.core.database import Base, get_db, get_engine

__all__ = ["settings", "get_settings", "TokenConfig", "Base", "get_db", "get_engine"]
