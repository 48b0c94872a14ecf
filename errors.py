"""Error types raised by the datastore layer and route handlers.

Each carries an HTTP status; the app's error handler renders them as
``{"error": {"message": ..., "status": ...}}``.
"""

from __future__ import annotations


class JoblyError(Exception):
    """Base error: a message plus the HTTP status to respond with."""

    status = 500

    def __init__(self, message: str | list[str] | None = None, status: int | None = None):
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status

    def to_json(self) -> dict:
        return {"error": {"message": self.message, "status": self.status}}


class NotFoundError(JoblyError):
    """404 NOT FOUND."""

    status = 404

    def __init__(self, message: str = "Not Found"):
        super().__init__(message)


class UnauthorizedError(JoblyError):
    """401 UNAUTHORIZED."""

    status = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class BadRequestError(JoblyError):
    """400 BAD REQUEST. *message* may be a list of validation messages."""

    status = 400

    def __init__(self, message: str | list[str] = "Bad Request"):
        super().__init__(message)


class ForbiddenError(JoblyError):
    """403 FORBIDDEN."""

    status = 403

    def __init__(self, message: str = "Forbidden"):
        super().__init__(message)
