"""Error taxonomy shared by builders, services and routes.

Each error carries the HTTP status the route layer should answer with.
"""
from __future__ import annotations


class JoblyError(Exception):
    status = 500

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status


class BadRequestError(JoblyError):
    """Malformed or empty input (400)."""
    status = 400


class NotFoundError(JoblyError):
    """Key does not resolve to an existing record (404)."""
    status = 404


class ConflictError(JoblyError):
    """Duplicate key on create (409)."""
    status = 409
