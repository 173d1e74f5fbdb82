"""
Token Repository

Inserts and looks up token records.
"""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.enums import TokenType
from app.models.token import Token


class TokenRepository:
    """Token record store backed by an AsyncSession."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def create(
        self,
        token: str,
        user_id: uuid.UUID,
        expires: datetime,
        type: TokenType,
        blacklisted: bool = False,
    ) -> Token:
        """
        Insert a token record.

        Database errors propagate to the caller.

        Returns:
            Token: The persisted record.
        """
        token_doc = Token(
            token=token,
            user_id=user_id,
            expires=expires,
            type=type,
            blacklisted=blacklisted,
        )
        self.db.add(token_doc)
        await self.db.commit()
        await self.db.refresh(token_doc)
        return token_doc

    async def find_one(
        self,
        token: str,
        type: TokenType,
        user_id: uuid.UUID,
        blacklisted: bool = False,
    ) -> Optional[Token]:
        """
        Find the first record matching token, type, owner and blacklist flag.

        Identical tokens issued within the same second may have several
        records; any of them is a match.

        Returns:
            Token | None: The matching record, or None.
        """
        result = await self.db.execute(
            select(Token).where(
                and_(
                    Token.token == token,
                    Token.type == type,
                    Token.user_id == user_id,
                    Token.blacklisted == blacklisted,
                )
            )
            .limit(1)
        )
        return result.scalars().first()
