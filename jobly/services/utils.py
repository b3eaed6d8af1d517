from __future__ import annotations

# jobly/services/utils.py
import sqlite3

from ..errors import BadRequestError, ConflictError, JoblyError


def integrity_to_error(exc: sqlite3.IntegrityError, duplicate_msg: str) -> JoblyError:
    """Map a constraint violation to the error the caller should see.

    UNIQUE/PRIMARY KEY -> Conflict (authoritative over any pre-check),
    FOREIGN KEY / CHECK / NOT NULL -> BadRequest.
    """
    msg = str(exc)
    if msg.startswith("UNIQUE constraint failed"):
        return ConflictError(duplicate_msg)
    return BadRequestError(msg)
