"""
JWT creation and verification.

Tokens are standard HS256 JWTs with the payload ``{"id": <user id>, "exp": ...}``
so any JWT-compatible verifier can read them.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from config.settings import Settings


class InvalidTokenError(Exception):
    """Raised when a token is malformed, badly signed or expired."""


def create_token(user_id: str, settings: Settings) -> str:
    """Create a signed token containing ``user_id`` and expiry."""
    payload = {
        "id": user_id,
        "exp": datetime.now(timezone.utc) + timedelta(seconds=settings.jwt_expiry_seconds),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: Settings) -> str:
    """
    Verify token and return ``user_id``.

    Raises ``InvalidTokenError`` on invalid or expired tokens.
    """
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as exc:
        raise InvalidTokenError(f"Invalid or expired token: {exc}") from exc

    user_id = payload.get("id")
    if not user_id:
        raise InvalidTokenError("Invalid token: missing user id")
    return user_id
