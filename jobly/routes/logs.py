from __future__ import annotations

from sqlite3 import Connection

from fastapi import APIRouter, Depends, Query

from ..deps import get_db
from ..logs import search_logs

router = APIRouter()


@router.get("/api/logs/search")
def api_logs_search(
    page: int = Query(1, ge=1),
    size: int = Query(20, ge=1, le=200),
    action: str | None = None,
    query: str | None = None,
    ts_from: str | None = None,
    ts_to: str | None = None,
    conn: Connection = Depends(get_db),
):
    total, items = search_logs(conn, query, action, ts_from, ts_to, page, size)
    return {"total": total, "items": items}
