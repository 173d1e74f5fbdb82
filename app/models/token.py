"""
Token Model

Persisted record of an issued refresh, password reset or email
verification token.
"""

import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, Enum, ForeignKey, Text, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base
from app.models.enums import TokenType

if TYPE_CHECKING:
    from app.models.user import User


class Token(Base):
    """
    Token record.

    A record is usable only while ``blacklisted`` is False and the current
    time has not passed ``expires``.

    Attributes:
        id: UUID primary key.
        token: The signed JWT string.
        user_id: Owner of the token.
        type: Purpose of the token (see TokenType).
        expires: Absolute expiry, equal to the token's exp claim.
        blacklisted: Revocation flag, flipped by logout/revocation flows.
        created_at: Creation timestamp.
    """

    __tablename__ = "tokens"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    token: Mapped[str] = mapped_column(
        Text,
        index=True,
        nullable=False,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    type: Mapped[TokenType] = mapped_column(
        Enum(
            TokenType,
            name="token_type",
            create_constraint=True,
            values_callable=lambda enum_cls: [member.value for member in enum_cls],
        ),
        nullable=False,
    )
    expires: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )
    blacklisted: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    user: Mapped["User"] = relationship(
        "User",
        back_populates="tokens",
    )

    def __repr__(self) -> str:
        return f"<Token(id={self.id}, user_id={self.user_id}, type={self.type})>"
