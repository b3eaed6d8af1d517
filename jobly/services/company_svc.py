from __future__ import annotations

# jobly/services/company_svc.py
import logging
import sqlite3
from sqlite3 import Connection
from typing import Any

from ..errors import ConflictError, NotFoundError
from ..helpers.sql import COMPANY_FIELD_COLUMNS, sql_for_company_filters, sql_for_partial_update
from ..logs import LogContext
from ..repository import company_repo
from .utils import integrity_to_error

logger = logging.getLogger(__name__)


def create_company(conn: Connection, data: dict[str, Any], log: LogContext) -> dict:
    handle = data["handle"]
    if company_repo.exists(conn, handle):
        raise ConflictError(f"Duplicate company: {handle}")
    try:
        row = company_repo.insert(
            conn,
            handle,
            data["name"],
            data.get("description") or "",
            data.get("numEmployees"),
            data.get("logoUrl"),
        )
    except sqlite3.IntegrityError as e:
        logger.warning("create_company integrity error for %r: %s", handle, e)
        raise integrity_to_error(e, f"Duplicate company: {handle}") from e

    company = dict(row)
    log.set_entity("COMPANY", handle)
    log.set_after(company)
    return company


def find_all_companies(
    conn: Connection,
    name_like: str | None = None,
    min_employees: int | None = None,
    max_employees: int | None = None,
) -> list[dict]:
    where, values = sql_for_company_filters(name_like, min_employees, max_employees)
    return [dict(r) for r in company_repo.list_where(conn, where, values)]


def get_company(conn: Connection, handle: str) -> dict:
    row = company_repo.get_one(conn, handle)
    if row is None:
        raise NotFoundError(f"No company: {handle}")
    return dict(row)


def update_company(conn: Connection, handle: str, data: dict[str, Any], log: LogContext) -> dict:
    """Partial update of {name, description, numEmployees, logoUrl}. Handle is immutable."""
    set_cols, values = sql_for_partial_update(data, COMPANY_FIELD_COLUMNS)

    before = company_repo.get_one(conn, handle)
    if before is None:
        raise NotFoundError(f"No company: {handle}")
    try:
        row = company_repo.update_set(conn, handle, set_cols, values)
    except sqlite3.IntegrityError as e:
        raise integrity_to_error(e, f"Duplicate company name: {data.get('name')}") from e
    if row is None:
        raise NotFoundError(f"No company: {handle}")

    company = dict(row)
    log.set_entity("COMPANY", handle)
    log.set_before(dict(before))
    log.set_after(company)
    return company


def remove_company(conn: Connection, handle: str, log: LogContext) -> None:
    """Delete a company; its jobs go with it (ON DELETE CASCADE)."""
    row = company_repo.delete(conn, handle)
    if row is None:
        raise NotFoundError(f"No company: {handle}")
    log.set_entity("COMPANY", handle)
