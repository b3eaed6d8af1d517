from __future__ import annotations

from sqlite3 import Connection
from typing import Any

from . import first_row

JOB_COLUMNS = 'id, title, salary, equity, company_handle AS "companyHandle"'


def exists(conn: Connection, title: str) -> bool:
    row = conn.execute("SELECT 1 FROM jobs WHERE title=?", (title,)).fetchone()
    return row is not None


def insert(conn: Connection, title: str, salary: int | None, equity: float | None, company_handle: str):
    return first_row(conn.execute(
        "INSERT INTO jobs(title, salary, equity, company_handle) VALUES(?,?,?,?) "
        f"RETURNING {JOB_COLUMNS}",
        (title, salary, equity, company_handle),
    ).fetchall())


def list_where(conn: Connection, where: str, values: list[Any]):
    sql = f"SELECT {JOB_COLUMNS} FROM jobs WHERE {where} ORDER BY title"
    return conn.execute(sql, values).fetchall()


def get_one(conn: Connection, title: str):
    return conn.execute(f"SELECT {JOB_COLUMNS} FROM jobs WHERE title=?", (title,)).fetchone()


def update_set(conn: Connection, title: str, set_cols: str, values: list[Any]):
    key_idx = len(values) + 1
    sql = f"UPDATE jobs SET {set_cols} WHERE title=?{key_idx} RETURNING {JOB_COLUMNS}"
    return first_row(conn.execute(sql, [*values, title]).fetchall())


def delete(conn: Connection, title: str):
    return first_row(conn.execute("DELETE FROM jobs WHERE title=? RETURNING title", (title,)).fetchall())

