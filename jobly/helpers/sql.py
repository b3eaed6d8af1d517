from __future__ import annotations

# jobly/helpers/sql.py
from typing import Any, Mapping

from ..errors import BadRequestError

# External (API) field name -> storage column name, for fields whose names differ.
JOB_FIELD_COLUMNS: dict[str, str] = {
    "companyHandle": "company_handle",
}

COMPANY_FIELD_COLUMNS: dict[str, str] = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}


def sql_for_partial_update(
    data: Mapping[str, Any], field_columns: Mapping[str, str] | None = None
) -> tuple[str, list[Any]]:
    """
    Build the SET clause of a partial UPDATE.

    {"firstName": "Aliya", "age": 32}, {"firstName": "first_name"}
      -> ('"first_name"=?1, "age"=?2', ["Aliya", 32])

    Placeholders are numbered in key order so the caller can append its own
    WHERE parameter as ?{len(values) + 1}.
    """
    keys = list(data.keys())
    if not keys:
        raise BadRequestError("No data")

    field_columns = field_columns or {}
    cols = [f'"{field_columns.get(k, k)}"=?{i}' for i, k in enumerate(keys, start=1)]
    return ", ".join(cols), [data[k] for k in keys]


def sql_for_job_filters(
    title: str | None = None,
    min_salary: int | None = None,
    has_equity: bool = False,
) -> tuple[str, list[Any]]:
    """WHERE clause for the job listing. Absent filters are skipped."""
    where = "1=1"
    values: list[Any] = []
    if title:
        values.append(f"%{title.lower()}%")
        where += f" AND LOWER(title) LIKE ?{len(values)}"
    if min_salary is not None:
        values.append(min_salary)
        where += f" AND salary >= ?{len(values)}"
    if has_equity:
        where += " AND equity > 0"
    return where, values


def sql_for_company_filters(
    name_like: str | None = None,
    min_employees: int | None = None,
    max_employees: int | None = None,
) -> tuple[str, list[Any]]:
    if min_employees is not None and max_employees is not None and min_employees > max_employees:
        raise BadRequestError("minEmployees cannot be greater than maxEmployees")

    where = "1=1"
    values: list[Any] = []
    if name_like:
        values.append(f"%{name_like.lower()}%")
        where += f" AND LOWER(name) LIKE ?{len(values)}"
    if min_employees is not None:
        values.append(min_employees)
        where += f" AND num_employees >= ?{len(values)}"
    if max_employees is not None:
        values.append(max_employees)
        where += f" AND num_employees <= ?{len(values)}"
    return where, values
