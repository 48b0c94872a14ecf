"""JWT issuance for authenticated users."""

from __future__ import annotations

import logging

from jose import jwt

from config import JWT_ALGORITHM, SECRET_KEY

logger = logging.getLogger(__name__)


def create_token(user) -> str:
    """Return a signed JWT carrying the user's username and admin flag.

    *user* may be a ``db.models.User`` or any mapping with ``username`` and
    ``isAdmin``.
    """
    if isinstance(user, dict):
        username, is_admin = user["username"], user.get("isAdmin")
    else:
        username, is_admin = user.username, user.is_admin

    if is_admin is None:
        logger.warning("create_token passed user without isAdmin property")

    payload = {
        "username": username,
        "isAdmin": bool(is_admin),
    }
    return jwt.encode(payload, SECRET_KEY, algorithm=JWT_ALGORITHM)


def decode_token(token: str) -> dict:
    """Verify *token* and return its payload. Raises jose.JWTError if invalid."""
    return jwt.decode(token, SECRET_KEY, algorithms=[JWT_ALGORITHM])
