"""CRUD operations for the companies table."""

from __future__ import annotations

import sqlite3

from errors import BadRequestError, NotFoundError
from helpers.sql import bind_params, sql_for_partial_update

from .connection import get_db
from .models import Company, JobSummary

_COMPANY_COLUMNS = "handle, name, description, num_employees, logo_url"


def create_company(
    handle: str,
    name: str,
    *,
    description: str = "",
    num_employees: int | None = None,
    logo_url: str | None = None,
    db: sqlite3.Connection | None = None,
) -> Company:
    """Create a company and return it.

    Raises BadRequestError if the handle or name is already taken.
    """
    conn = db or get_db()
    duplicate = conn.execute(
        "SELECT handle FROM companies WHERE handle = ?", (handle,)
    ).fetchone()
    if duplicate:
        raise BadRequestError(f"Duplicate company: {handle}")

    try:
        cursor = conn.execute(
            f"""
            INSERT INTO companies (handle, name, description, num_employees, logo_url)
            VALUES (?, ?, ?, ?, ?)
            RETURNING {_COMPANY_COLUMNS}
            """,
            (handle, name, description, num_employees, logo_url),
        )
        row = cursor.fetchone()
    except sqlite3.IntegrityError as e:
        conn.rollback()
        raise BadRequestError(f"Duplicate company name: {name}") from e
    conn.commit()
    return Company.from_row(row)


def find_all_companies(
    *,
    min_employees: int | None = None,
    max_employees: int | None = None,
    name_like: str | None = None,
    db: sqlite3.Connection | None = None,
) -> list[Company]:
    """List companies ordered by name, with optional filters.

    Args:
        min_employees: Only companies with at least this many employees.
        max_employees: Only companies with at most this many employees.
        name_like: Case-insensitive substring of the company name.

    Raises BadRequestError if min_employees > max_employees.
    """
    if (
        min_employees is not None
        and max_employees is not None
        and min_employees > max_employees
    ):
        raise BadRequestError("Min employees cannot be greater than max")

    conn = db or get_db()
    clauses: list[str] = []
    params: list = []

    if min_employees is not None:
        clauses.append("num_employees >= ?")
        params.append(min_employees)
    if max_employees is not None:
        clauses.append("num_employees <= ?")
        params.append(max_employees)
    if name_like:
        # LIKE is case-insensitive for ASCII in sqlite
        clauses.append("name LIKE ?")
        params.append(f"%{name_like}%")

    where = (" WHERE " + " AND ".join(clauses)) if clauses else ""
    rows = conn.execute(
        f"SELECT {_COMPANY_COLUMNS} FROM companies{where} ORDER BY name", params
    ).fetchall()
    return [Company.from_row(r) for r in rows]


def get_company(handle: str, *, db: sqlite3.Connection | None = None) -> Company:
    """Fetch a company with the jobs it has posted.

    Raises NotFoundError if there is no such company.
    """
    conn = db or get_db()
    row = conn.execute(
        f"SELECT {_COMPANY_COLUMNS} FROM companies WHERE handle = ?", (handle,)
    ).fetchone()
    if row is None:
        raise NotFoundError(f"No company: {handle}")

    company = Company.from_row(row)
    job_rows = conn.execute(
        """
        SELECT id, title, salary, equity
          FROM jobs
         WHERE company_handle = ?
         ORDER BY id
        """,
        (handle,),
    ).fetchall()
    company.jobs = [JobSummary.from_row(r) for r in job_rows]
    return company


def update_company(
    handle: str, data: dict, *, db: sqlite3.Connection | None = None
) -> Company:
    """Partially update a company with *data*.

    *data* uses API field names: name, description, numEmployees, logoUrl.
    Only the supplied fields change.

    Raises BadRequestError if *data* is empty or renames to a taken name,
    NotFoundError if there is no such company.
    """
    conn = db or get_db()
    update = sql_for_partial_update(
        data,
        {
            "numEmployees": "num_employees",
            "logoUrl": "logo_url",
        },
    )
    handle_idx = len(update.values) + 1

    try:
        cursor = conn.execute(
            f"""
            UPDATE companies
               SET {update.set_cols}
             WHERE handle = ${handle_idx}
            RETURNING {_COMPANY_COLUMNS}
            """,
            bind_params(update.values, handle),
        )
        row = cursor.fetchone()
    except sqlite3.IntegrityError as e:
        conn.rollback()
        raise BadRequestError(f"Duplicate company name: {data.get('name')}") from e
    conn.commit()
    if row is None:
        raise NotFoundError(f"No company: {handle}")
    return Company.from_row(row)


def remove_company(handle: str, *, db: sqlite3.Connection | None = None) -> None:
    """Delete a company (and, by cascade, its jobs).

    Raises NotFoundError if there is no such company.
    """
    conn = db or get_db()
    cursor = conn.execute("DELETE FROM companies WHERE handle = ?", (handle,))
    conn.commit()
    if cursor.rowcount == 0:
        raise NotFoundError(f"No company: {handle}")
