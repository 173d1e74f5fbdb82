"""
API Errors

Typed failures raised by the token service. Each one is an HTTPException
so FastAPI renders it with its status code and message.
"""

from typing import Optional

from fastapi import HTTPException, status


class ApiError(HTTPException):
    """Base class for errors carrying an HTTP status and message."""

    default_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "Internal server error"
    default_headers: Optional[dict[str, str]] = None

    def __init__(self, detail: Optional[str] = None) -> None:
        super().__init__(
            status_code=self.default_status,
            detail=detail or self.default_detail,
            headers=self.default_headers,
        )


class UnauthorizedError(ApiError):
    default_status = status.HTTP_401_UNAUTHORIZED
    default_detail = "Could not validate credentials"
    default_headers = {"WWW-Authenticate": "Bearer"}


class InvalidTokenError(UnauthorizedError):
    """Signature verification failed or the token is malformed."""
    default_detail = "Invalid token"


class TokenExpiredError(UnauthorizedError):
    """The token's exp claim has passed."""
    default_detail = "Token expired"


class InvalidTokenPayloadError(UnauthorizedError):
    """The token verified but carries no usable subject claim."""
    default_detail = "Invalid token payload"


class TokenNotFoundError(ApiError):
    """No matching, non-blacklisted token record exists."""
    default_status = status.HTTP_404_NOT_FOUND
    default_detail = "Token not found"


class UserNotFoundError(ApiError):
    default_status = status.HTTP_404_NOT_FOUND
    default_detail = "No users found with this email"


class InternalServerError(ApiError):
    """Unexpected failure in the verification or storage layer."""
