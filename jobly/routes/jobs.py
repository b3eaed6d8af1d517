from __future__ import annotations

import logging
from sqlite3 import Connection

from fastapi import APIRouter, Depends, HTTPException, Query

from ..deps import get_db
from ..errors import JoblyError
from ..logs import LogContext
from ..schemas import MAX_INT, JobNew, JobUpdate
from ..services.job_svc import create_job, find_all_jobs, get_job, update_job, remove_job

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.post("", status_code=201)
def api_job_create(body: JobNew, conn: Connection = Depends(get_db)):
    """POST /jobs { title, salary?, equity?, companyHandle } => { job }"""
    log = LogContext("CREATE_JOB")
    log.set_payload(body.model_dump())
    try:
        job = create_job(conn, body.model_dump(), log)
        log.write("OK", conn=conn)
        return {"job": job}
    except JoblyError as e:
        log.write("ERROR", e.message, conn=conn)
        raise HTTPException(status_code=e.status, detail=e.message)
    except Exception as e:
        logger.exception("%s failed", log.action)
        log.write("ERROR", str(e), conn=conn)
        raise HTTPException(status_code=500, detail="internal error")


@router.get("")
def api_job_list(
    title: str | None = None,
    min_salary: int | None = Query(None, alias="minSalary", ge=0, le=MAX_INT),
    has_equity: bool = Query(False, alias="hasEquity"),
    conn: Connection = Depends(get_db),
):
    """
    GET /jobs => { jobs: [ { id, title, salary, equity, companyHandle }, ... ] }

    Filters: title (case-insensitive, partial match), minSalary, hasEquity.
    hasEquity arrives as query text and is parsed to a bool here.
    """
    return {"jobs": find_all_jobs(conn, title, min_salary, has_equity)}


@router.get("/{title:path}")
def api_job_get(title: str, conn: Connection = Depends(get_db)):
    try:
        return {"job": get_job(conn, title)}
    except JoblyError as e:
        raise HTTPException(status_code=e.status, detail=e.message)


@router.patch("/{title:path}")
def api_job_update(title: str, body: JobUpdate, conn: Connection = Depends(get_db)):
    """PATCH /jobs/[title] { salary?, equity?, companyHandle? } => { job }"""
    data = body.model_dump(exclude_unset=True)
    log = LogContext("UPDATE_JOB")
    log.set_payload({"title": title, **data})
    try:
        job = update_job(conn, title, data, log)
        log.write("OK", conn=conn)
        return {"job": job}
    except JoblyError as e:
        log.write("ERROR", e.message, conn=conn)
        raise HTTPException(status_code=e.status, detail=e.message)
    except Exception as e:
        logger.exception("%s failed", log.action)
        log.write("ERROR", str(e), conn=conn)
        raise HTTPException(status_code=500, detail="internal error")


@router.delete("/{title:path}")
def api_job_delete(title: str, conn: Connection = Depends(get_db)):
    log = LogContext("DELETE_JOB")
    log.set_payload({"title": title})
    try:
        remove_job(conn, title, log)
        log.write("OK", conn=conn)
        return {"deleted": title}
    except JoblyError as e:
        log.write("ERROR", e.message, conn=conn)
        raise HTTPException(status_code=e.status, detail=e.message)
    except Exception as e:
        logger.exception("%s failed", log.action)
        log.write("ERROR", str(e), conn=conn)
        raise HTTPException(status_code=500, detail="internal error")
