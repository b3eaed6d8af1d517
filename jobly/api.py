"""
FastAPI app entry point aggregating per-resource routers under jobly/routes.
Run as `uvicorn jobly.api:app`.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .db import get_conn, ensure_schema
from .logs import ensure_log_schema
from .routes.base import APP_NAME, APP_VERSION

logger = logging.getLogger(__name__)

app = FastAPI(title=APP_NAME, version=APP_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def on_startup():
    with get_conn() as conn:
        ensure_schema(conn)
        ensure_log_schema(conn)
    logger.info("schema ensured")


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # malformed body or query -> BadRequest
    errs = [f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in exc.errors()]
    return JSONResponse(status_code=400, content={"detail": errs})


# Include routers (split by resource)
from .routes import base as base_routes
from .routes import companies as companies_routes
from .routes import jobs as jobs_routes
from .routes import logs as logs_routes

app.include_router(base_routes.router)
app.include_router(companies_routes.router)
app.include_router(jobs_routes.router)
app.include_router(logs_routes.router)
