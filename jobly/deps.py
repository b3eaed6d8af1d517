"""FastAPI dependencies."""
from __future__ import annotations

from sqlite3 import Connection
from typing import Iterator

from .db import get_conn


def get_db() -> Iterator[Connection]:
    """One connection per request, closed when the response is done."""
    with get_conn() as conn:
        yield conn
