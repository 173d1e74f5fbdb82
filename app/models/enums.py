"""
Database Enums

Python Enums that map to PostgreSQL ENUM types.
"""

import enum


class TokenType(str, enum.Enum):
    """
    Token purpose enumeration.

    The values are what appears in the signed ``type`` claim and in the
    ``tokens.type`` column.
    """
    ACCESS = "access"
    REFRESH = "refresh"
    RESET_PASSWORD = "resetPassword"
    VERIFY_EMAIL = "verifyEmail"
