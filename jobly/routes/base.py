from __future__ import annotations

from sqlite3 import Connection

from fastapi import APIRouter, Depends

from ..deps import get_db

router = APIRouter()

APP_NAME = "jobly-api"
APP_VERSION = "0.1.0"


@router.get("/health")
def health(conn: Connection = Depends(get_db)):
    """Liveness plus a round trip to the database."""
    conn.execute("SELECT 1").fetchone()
    return {"status": "ok", "db": "ok"}


@router.get("/version")
def version():
    return {"app": APP_NAME, "version": APP_VERSION}
