from __future__ import annotations

import logging
from sqlite3 import Connection

from fastapi import APIRouter, Depends, HTTPException, Query

from ..deps import get_db
from ..errors import JoblyError
from ..logs import LogContext
from ..schemas import MAX_INT, CompanyNew, CompanyUpdate
from ..services.company_svc import (
    create_company,
    find_all_companies,
    get_company,
    update_company,
    remove_company,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/companies", tags=["companies"])


@router.post("", status_code=201)
def api_company_create(body: CompanyNew, conn: Connection = Depends(get_db)):
    log = LogContext("CREATE_COMPANY")
    log.set_payload(body.model_dump())
    try:
        company = create_company(conn, body.model_dump(), log)
        log.write("OK", conn=conn)
        return {"company": company}
    except JoblyError as e:
        log.write("ERROR", e.message, conn=conn)
        raise HTTPException(status_code=e.status, detail=e.message)
    except Exception as e:
        logger.exception("%s failed", log.action)
        log.write("ERROR", str(e), conn=conn)
        raise HTTPException(status_code=500, detail="internal error")


@router.get("")
def api_company_list(
    name_like: str | None = Query(None, alias="nameLike"),
    min_employees: int | None = Query(None, alias="minEmployees", ge=0, le=MAX_INT),
    max_employees: int | None = Query(None, alias="maxEmployees", ge=0, le=MAX_INT),
    conn: Connection = Depends(get_db),
):
    try:
        return {"companies": find_all_companies(conn, name_like, min_employees, max_employees)}
    except JoblyError as e:
        raise HTTPException(status_code=e.status, detail=e.message)


@router.get("/{handle}")
def api_company_get(handle: str, conn: Connection = Depends(get_db)):
    try:
        return {"company": get_company(conn, handle)}
    except JoblyError as e:
        raise HTTPException(status_code=e.status, detail=e.message)


@router.patch("/{handle}")
def api_company_update(handle: str, body: CompanyUpdate, conn: Connection = Depends(get_db)):
    data = body.model_dump(exclude_unset=True)
    log = LogContext("UPDATE_COMPANY")
    log.set_payload({"handle": handle, **data})
    try:
        company = update_company(conn, handle, data, log)
        log.write("OK", conn=conn)
        return {"company": company}
    except JoblyError as e:
        log.write("ERROR", e.message, conn=conn)
        raise HTTPException(status_code=e.status, detail=e.message)
    except Exception as e:
        logger.exception("%s failed", log.action)
        log.write("ERROR", str(e), conn=conn)
        raise HTTPException(status_code=500, detail="internal error")


@router.delete("/{handle}")
def api_company_delete(handle: str, conn: Connection = Depends(get_db)):
    log = LogContext("DELETE_COMPANY")
    log.set_payload({"handle": handle})
    try:
        remove_company(conn, handle, log)
        log.write("OK", conn=conn)
        return {"deleted": handle}
    except JoblyError as e:
        log.write("ERROR", e.message, conn=conn)
        raise HTTPException(status_code=e.status, detail=e.message)
    except Exception as e:
        logger.exception("%s failed", log.action)
        log.write("ERROR", str(e), conn=conn)
        raise HTTPException(status_code=500, detail="internal error")
