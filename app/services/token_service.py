"""
Token Service

Issues, persists and validates signed bearer tokens.

Verification is split in two: a stateless check of the signature and
registered claims, then a lookup of the matching token record so that
blacklisted tokens are rejected even while their signature is valid.
Access tokens are never persisted and only go through the first half.
"""

import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Awaitable, Callable, Optional

from jose import ExpiredSignatureError, JWTError
from jose.exceptions import JWTClaimsError
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import TokenConfig
from app.core.exceptions import (
    InternalServerError,
    InvalidTokenError,
    InvalidTokenPayloadError,
    TokenExpiredError,
    TokenNotFoundError,
    UserNotFoundError,
)
from app.core.security import decode_payload, sign_payload
from app.models.enums import TokenType
from app.models.token import Token
from app.models.user import User
from app.repositories.token_repository import TokenRepository
from app.schemas.token import AuthTokens, TokenExpiry, TokenPayload


logger = logging.getLogger(__name__)

UserLookup = Callable[[str], Awaitable[Optional[User]]]


def expires_in(**delta: float) -> datetime:
    """
    Absolute UTC expiry ``delta`` from now, truncated to whole seconds.

    Truncating keeps a stored ``expires`` equal to the token's exp claim.
    """
    return (datetime.now(timezone.utc) + timedelta(**delta)).replace(microsecond=0)


class TokenService:
    """
    Token issuing and validation.

    Args:
        config: JWT secret, algorithm and token lifetimes.
        tokens: Store for token records.
        get_user_by_email: Async lookup used by the password reset flow.
    """

    def __init__(
        self,
        config: TokenConfig,
        tokens: TokenRepository,
        get_user_by_email: UserLookup,
    ) -> None:
        self.config = config
        self.tokens = tokens
        self.get_user_by_email = get_user_by_email

    def generate_token(
        self,
        user_id: uuid.UUID | str,
        expires: datetime,
        type: TokenType,
        secret: Optional[str] = None,
    ) -> str:
        """
        Build and sign a claims payload.

        Args:
            user_id: Owner of the token, becomes the ``sub`` claim.
            expires: Absolute expiry, becomes the ``exp`` claim.
            type: Token purpose.
            secret: Signing secret, defaults to the configured one.

        Returns:
            str: Encoded JWT.
        """
        payload = {
            "sub": str(user_id),
            "iat": int(datetime.now(timezone.utc).timestamp()),
            "exp": int(expires.timestamp()),
            "type": TokenType(type).value,
        }
        if secret is None:
            secret = self.config.secret_key
        return sign_payload(payload, secret, self.config.algorithm)

    async def save_token(
        self,
        token: str,
        user_id: uuid.UUID,
        expires: datetime,
        type: TokenType,
        blacklisted: bool = False,
    ) -> Token:
        """
        Persist a token record.

        Database errors are not caught here.

        Returns:
            Token: The stored record.
        """
        token_doc = await self.tokens.create(
            token=token,
            user_id=user_id,
            expires=expires,
            type=type,
            blacklisted=blacklisted,
        )
        logger.info(f"Saved {TokenType(type).value} token for user {user_id}")
        return token_doc

    def decode_token(self, token: str) -> TokenPayload:
        """
        Verify a token's signature and expiry and return its claims.

        Raises:
            TokenExpiredError: The exp claim has passed.
            InvalidTokenError: Bad signature or malformed token.
            InternalServerError: Any other claim verification failure.
            InvalidTokenPayloadError: No usable subject claim.
        """
        try:
            claims = decode_payload(token, self.config.secret_key, self.config.algorithm)
        except ExpiredSignatureError as exc:
            raise TokenExpiredError() from exc
        except JWTClaimsError as exc:
            # e.g. nbf in the future or a non-string sub
            logger.error(f"Token claim verification failed: {exc}")
            raise InternalServerError() from exc
        except JWTError as exc:
            raise InvalidTokenError() from exc

        if not claims.get("sub"):
            raise InvalidTokenPayloadError()

        try:
            return TokenPayload.model_validate(claims)
        except ValidationError as exc:
            raise InvalidTokenPayloadError() from exc

    async def verify_token(self, token: str, type: TokenType) -> Token:
        """
        Verify a token and return its stored record.

        Args:
            token: Encoded JWT.
            type: Purpose the caller expects the token to have.

        Returns:
            Token: The matching, non-blacklisted record.

        Raises:
            TokenNotFoundError: No matching record for this token and type.
            InternalServerError: The store lookup failed.
            Plus everything decode_token raises.
        """
        payload = self.decode_token(token)

        try:
            user_id = uuid.UUID(payload.sub)
        except ValueError as exc:
            raise InvalidTokenPayloadError() from exc

        try:
            token_doc = await self.tokens.find_one(
                token=token,
                type=type,
                user_id=user_id,
                blacklisted=False,
            )
        except SQLAlchemyError as exc:
            logger.exception("Token lookup failed")
            raise InternalServerError() from exc

        if token_doc is None:
            logger.warning(f"No active {TokenType(type).value} token found for user {user_id}")
            raise TokenNotFoundError()

        return token_doc

    async def generate_auth_tokens(self, user: User) -> AuthTokens:
        """
        Issue an access/refresh token pair.

        Only the refresh token is persisted. If saving it fails the error
        propagates and the access token is discarded.
        """
        access_expires = expires_in(minutes=self.config.access_expire_minutes)
        access_token = self.generate_token(user.id, access_expires, TokenType.ACCESS)

        refresh_expires = expires_in(days=self.config.refresh_expire_days)
        refresh_token = self.generate_token(user.id, refresh_expires, TokenType.REFRESH)
        await self.save_token(refresh_token, user.id, refresh_expires, TokenType.REFRESH)

        return AuthTokens(
            access=TokenExpiry(token=access_token, expires=access_expires),
            refresh=TokenExpiry(token=refresh_token, expires=refresh_expires),
        )

    async def generate_reset_password_token(self, email: str) -> str:
        """
        Issue a password reset token for the user with this email.

        Raises:
            UserNotFoundError: No user has this email.
        """
        user = await self.get_user_by_email(email)
        if user is None:
            raise UserNotFoundError()

        expires = expires_in(minutes=self.config.reset_password_expire_minutes)
        reset_password_token = self.generate_token(user.id, expires, TokenType.RESET_PASSWORD)
        await self.save_token(reset_password_token, user.id, expires, TokenType.RESET_PASSWORD)
        return reset_password_token

    async def generate_verify_email_token(self, user: User) -> str:
        """Issue an email verification token for the user."""
        expires = expires_in(minutes=self.config.verify_email_expire_minutes)
        verify_email_token = self.generate_token(user.id, expires, TokenType.VERIFY_EMAIL)
        await self.save_token(verify_email_token, user.id, expires, TokenType.VERIFY_EMAIL)
        return verify_email_token
