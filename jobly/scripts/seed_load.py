"""
Load companies and jobs from seed CSVs.

Rows whose key already exists are skipped, so the script can be re-run.

Usage:
  python -m jobly.scripts.seed_load \
      --companies seeds/companies.csv \
      --jobs seeds/jobs.csv
"""
from __future__ import annotations

import argparse
import logging

import pandas as pd

from jobly.db import get_conn, ensure_schema
from jobly.errors import ConflictError
from jobly.logs import LogContext, ensure_log_schema
from jobly.services.company_svc import create_company
from jobly.services.job_svc import create_job

logger = logging.getLogger(__name__)


def _opt(v, cast):
    return None if pd.isna(v) else cast(v)


def seed_load(conn, companies_csv: str, jobs_csv: str, log: LogContext) -> dict:
    """CSV columns:
       companies.csv: handle, name, num_employees, description, logo_url
       jobs.csv: title, salary, equity, company_handle
    """
    comp_df = pd.read_csv(companies_csv)
    job_df = pd.read_csv(jobs_csv)

    created_comp = 0
    created_job = 0
    skipped = 0

    for _, r in comp_df.iterrows():
        data = {
            "handle": str(r["handle"]).strip(),
            "name": str(r["name"]).strip(),
            "description": _opt(r.get("description"), str) or "",
            "numEmployees": _opt(r.get("num_employees"), int),
            "logoUrl": _opt(r.get("logo_url"), str),
        }
        try:
            create_company(conn, data, LogContext("SEED_COMPANY"))
            created_comp += 1
        except ConflictError:
            skipped += 1

    for _, r in job_df.iterrows():
        data = {
            "title": str(r["title"]).strip(),
            "salary": _opt(r.get("salary"), int),
            "equity": _opt(r.get("equity"), float),
            "companyHandle": str(r["company_handle"]).strip(),
        }
        try:
            create_job(conn, data, LogContext("SEED_JOB"))
            created_job += 1
        except ConflictError:
            skipped += 1

    res = {"created_company": created_comp, "created_job": created_job, "skipped": skipped}
    log.set_after(res)
    return res


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--companies", required=True)
    ap.add_argument("--jobs", required=True)
    ap.add_argument("--db", default=None, help="SQLite path; defaults to config resolution")
    args = ap.parse_args()
    logging.basicConfig(level=logging.INFO)

    log = LogContext("SEED_LOAD")
    log.set_payload({"companies_csv": args.companies, "jobs_csv": args.jobs})
    with get_conn(args.db) as conn:
        ensure_schema(conn)
        ensure_log_schema(conn)
        res = seed_load(conn, args.companies, args.jobs, log)
        log.write("OK", conn=conn)
    logger.info("seed load done: %s", res)
    print({"message": "ok", **res})


if __name__ == "__main__":
    main()
