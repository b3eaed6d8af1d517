from __future__ import annotations

# jobly/services/job_svc.py
import logging
import sqlite3
from sqlite3 import Connection
from typing import Any

from ..errors import BadRequestError, ConflictError, NotFoundError
from ..helpers.sql import JOB_FIELD_COLUMNS, sql_for_job_filters, sql_for_partial_update
from ..logs import LogContext
from ..repository import company_repo, job_repo
from .utils import integrity_to_error

logger = logging.getLogger(__name__)


def create_job(conn: Connection, data: dict[str, Any], log: LogContext) -> dict:
    """Create a job from {title, salary, equity, companyHandle}; return the new record.

    Raises ConflictError if the title is taken, BadRequestError if the company
    does not exist.
    """
    title = data["title"]
    company_handle = data["companyHandle"]

    if job_repo.exists(conn, title):
        raise ConflictError(f"Duplicate job: {title}")
    if not company_repo.exists(conn, company_handle):
        raise BadRequestError(f"No company: {company_handle}")

    try:
        row = job_repo.insert(conn, title, data.get("salary"), data.get("equity"), company_handle)
    except sqlite3.IntegrityError as e:
        # lost the race between the pre-check and the insert
        logger.warning("create_job integrity error for %r: %s", title, e)
        raise integrity_to_error(e, f"Duplicate job: {title}") from e

    job = dict(row)
    log.set_entity("JOB", str(job["id"]))
    log.set_after(job)
    return job


def find_all_jobs(
    conn: Connection,
    title: str | None = None,
    min_salary: int | None = None,
    has_equity: bool = False,
) -> list[dict]:
    where, values = sql_for_job_filters(title, min_salary, has_equity)
    logger.debug("find_all_jobs where=%s values=%s", where, values)
    return [dict(r) for r in job_repo.list_where(conn, where, values)]


def get_job(conn: Connection, title: str) -> dict:
    row = job_repo.get_one(conn, title)
    if row is None:
        raise NotFoundError(f"No job: {title}")
    return dict(row)


def update_job(conn: Connection, title: str, data: dict[str, Any], log: LogContext) -> dict:
    """Partial update: only the fields present in `data` change.

    Data can include: {salary, equity, companyHandle}
    """
    set_cols, values = sql_for_partial_update(data, JOB_FIELD_COLUMNS)

    before = job_repo.get_one(conn, title)
    if before is None:
        raise NotFoundError(f"No job: {title}")
    if "companyHandle" in data and not company_repo.exists(conn, data["companyHandle"]):
        raise BadRequestError(f"No company: {data['companyHandle']}")

    try:
        row = job_repo.update_set(conn, title, set_cols, values)
    except sqlite3.IntegrityError as e:
        raise integrity_to_error(e, f"Duplicate job: {title}") from e
    if row is None:
        # removed between the lookup and the update
        raise NotFoundError(f"No job: {title}")

    job = dict(row)
    log.set_entity("JOB", str(job["id"]))
    log.set_before(dict(before))
    log.set_after(job)
    return job


def remove_job(conn: Connection, title: str, log: LogContext) -> None:
    row = job_repo.delete(conn, title)
    if row is None:
        raise NotFoundError(f"No job: {title}")
    log.set_entity("JOB", title)
