"""
API Dependencies

Reusable dependencies for API routes including authentication.
"""

import uuid
from functools import partial
from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.database import get_db
from app.core.exceptions import InvalidTokenError
from app.models.enums import TokenType
from app.models.user import User
from app.repositories.token_repository import TokenRepository
from app.services import user_service
from app.services.token_service import TokenService


# OAuth2 scheme for token extraction from Authorization header
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login")


def build_token_service(db: AsyncSession) -> TokenService:
    """Wire a TokenService to the given session and the global settings."""
    return TokenService(
        config=settings.token_config,
        tokens=TokenRepository(db),
        get_user_by_email=partial(user_service.get_user_by_email, db),
    )


async def get_token_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TokenService:
    """Dependency providing a TokenService bound to the request's session."""
    return build_token_service(db)


async def get_current_user(
    token: Annotated[str, Depends(oauth2_scheme)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> User:
    """
    Dependency to get the current authenticated user.

    This dependency:
    1. Extracts the access token from the Authorization header
    2. Verifies its signature, expiry and type
    3. Fetches the user from the database

    Access tokens are not persisted, so no token record is looked up.

    Args:
        token: JWT token from Authorization header (auto-extracted).
        db: Database session (auto-injected).

    Returns:
        User: The authenticated user object.

    Raises:
        ApiError: 401 if the token is invalid, expired or of another type,
            or if its user no longer exists.
    """
    payload = build_token_service(db).decode_token(token)
    if payload.type != TokenType.ACCESS:
        raise InvalidTokenError()

    try:
        user_id = uuid.UUID(payload.sub)
    except ValueError:
        raise InvalidTokenError()

    user = await user_service.get_user_by_id(db, user_id)
    if user is None:
        raise InvalidTokenError()

    return user
