from __future__ import annotations

from sqlite3 import Connection
from typing import Any

from . import first_row

COMPANY_COLUMNS = (
    'handle, name, description, num_employees AS "numEmployees", logo_url AS "logoUrl"'
)


def exists(conn: Connection, handle: str) -> bool:
    row = conn.execute("SELECT 1 FROM companies WHERE handle=?", (handle,)).fetchone()
    return row is not None


def insert(
    conn: Connection,
    handle: str,
    name: str,
    description: str,
    num_employees: int | None,
    logo_url: str | None,
):
    return first_row(conn.execute(
        "INSERT INTO companies(handle, name, description, num_employees, logo_url) "
        f"VALUES(?,?,?,?,?) RETURNING {COMPANY_COLUMNS}",
        (handle, name, description, num_employees, logo_url),
    ).fetchall())


def list_where(conn: Connection, where: str, values: list[Any]):
    sql = f"SELECT {COMPANY_COLUMNS} FROM companies WHERE {where} ORDER BY name"
    return conn.execute(sql, values).fetchall()


def get_one(conn: Connection, handle: str):
    return conn.execute(
        f"SELECT {COMPANY_COLUMNS} FROM companies WHERE handle=?", (handle,)
    ).fetchone()


def update_set(conn: Connection, handle: str, set_cols: str, values: list[Any]):
    key_idx = len(values) + 1
    sql = f"UPDATE companies SET {set_cols} WHERE handle=?{key_idx} RETURNING {COMPANY_COLUMNS}"
    return first_row(conn.execute(sql, [*values, handle]).fetchall())


def delete(conn: Connection, handle: str):
    return first_row(conn.execute(
        "DELETE FROM companies WHERE handle=? RETURNING handle", (handle,)
    ).fetchall())
