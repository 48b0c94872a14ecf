"""Authentication hook and authorization decorators for the routes."""

from __future__ import annotations

import logging
import re
from functools import wraps

from flask import g, request
from jose import JWTError

from errors import UnauthorizedError
from helpers.tokens import decode_token

logger = logging.getLogger(__name__)

_BEARER = re.compile(r"^[Bb]earer ")


def authenticate_jwt() -> None:
    """Before-request hook: store a valid token's payload on ``g.user``.

    The payload carries ``username`` and ``isAdmin``. A missing or invalid
    token is not an error; ``g.user`` is simply left as None.
    """
    g.user = None
    header = request.headers.get("Authorization")
    if not header:
        return
    token = _BEARER.sub("", header).strip()
    try:
        g.user = decode_token(token)
    except JWTError as e:
        logger.debug("Ignoring invalid token: %s", e)


def ensure_logged_in(view):
    """Require any logged-in user."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if not g.get("user"):
            raise UnauthorizedError()
        return view(*args, **kwargs)

    return wrapper


def ensure_admin(view):
    """Require an admin user."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        user = g.get("user")
        if not (user and user.get("isAdmin")):
            raise UnauthorizedError()
        return view(*args, **kwargs)

    return wrapper


def ensure_correct_user_or_admin(view):
    """Require an admin, or the user named by the route's ``username``."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        user = g.get("user")
        if not (
            user
            and (user.get("isAdmin") or user.get("username") == kwargs.get("username"))
        ):
            raise UnauthorizedError()
        return view(*args, **kwargs)

    return wrapper
