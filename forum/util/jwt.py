"""JWT token utilities.

Tokens are issued by the external auth system. The forum only needs to
verify them to find out who the current actor is.
"""

from datetime import datetime

import jwt
from pydantic import BaseModel

from forum.config import AuthSettings
from forum.util.error import TokenError


class TokenPayload(BaseModel):
    """JWT token payload."""

    user_id: str
    username: str
    exp: datetime


def encode_token(payload: dict, settings: AuthSettings) -> str:
    """Encode a payload into a signed token.

    Args:
        payload: Claims to encode
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        TokenError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise TokenError("Token has expired")
    except jwt.InvalidTokenError:
        raise TokenError("Invalid token")
