"""
Security Utilities

Thin wrappers over the JWT signing primitive.
"""

from typing import Any

from jose import jwt


def sign_payload(payload: dict[str, Any], secret: str, algorithm: str = "HS256") -> str:
    """
    Sign a claims payload into a compact JWT.

    Args:
        payload: Claims to embed in the token.
        secret: Signing secret.
        algorithm: JWS algorithm.

    Returns:
        str: Encoded JWT (three base64url segments).
    """
    return jwt.encode(payload, secret, algorithm=algorithm)


def decode_payload(token: str, secret: str, algorithm: str = "HS256") -> dict[str, Any]:
    """
    Verify a JWT's signature and registered claims and return its payload.

    Raises jose's ExpiredSignatureError, JWTClaimsError or JWTError
    unchanged; callers decide how to map them.

    Args:
        token: Encoded JWT.
        secret: Secret the token is expected to be signed with.
        algorithm: Accepted JWS algorithm.

    Returns:
        dict: Decoded claims.
    """
    return jwt.decode(token, secret, algorithms=[algorithm])
