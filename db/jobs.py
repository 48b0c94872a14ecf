"""CRUD operations for the jobs table."""

from __future__ import annotations

import sqlite3

from errors import BadRequestError, NotFoundError
from helpers.sql import bind_params, sql_for_partial_update

from .companies import get_company
from .connection import get_db
from .models import Job

_JOB_COLUMNS = "id, title, salary, equity, company_handle"

# Base SELECT that JOINs companies for the human-readable name
_SELECT_JOBS = """
    SELECT j.id,
           j.title,
           j.salary,
           j.equity,
           j.company_handle,
           c.name AS company_name
      FROM jobs j
      LEFT JOIN companies c ON c.handle = j.company_handle
"""


def create_job(
    title: str,
    company_handle: str,
    *,
    salary: int | None = None,
    equity: float | None = None,
    db: sqlite3.Connection | None = None,
) -> Job:
    """Create a job posting for an existing company and return it.

    Raises BadRequestError if the company does not exist.
    """
    conn = db or get_db()
    company = conn.execute(
        "SELECT handle FROM companies WHERE handle = ?", (company_handle,)
    ).fetchone()
    if company is None:
        raise BadRequestError(f"No company: {company_handle}")

    cursor = conn.execute(
        f"""
        INSERT INTO jobs (title, salary, equity, company_handle)
        VALUES (?, ?, ?, ?)
        RETURNING {_JOB_COLUMNS}
        """,
        (title, salary, equity, company_handle),
    )
    row = cursor.fetchone()
    conn.commit()
    return Job.from_row(row)


def find_all_jobs(
    *,
    min_salary: int | None = None,
    has_equity: bool = False,
    title: str | None = None,
    db: sqlite3.Connection | None = None,
) -> list[Job]:
    """List jobs ordered by title, with optional filters.

    Args:
        min_salary: Only jobs paying at least this much.
        has_equity: If true, only jobs offering a non-zero equity.
        title: Case-insensitive substring of the job title.
    """
    conn = db or get_db()
    clauses: list[str] = []
    params: list = []

    if min_salary is not None:
        clauses.append("j.salary >= ?")
        params.append(min_salary)
    if has_equity:
        clauses.append("j.equity > 0")
    if title:
        clauses.append("j.title LIKE ?")
        params.append(f"%{title}%")

    where = (" WHERE " + " AND ".join(clauses)) if clauses else ""
    rows = conn.execute(
        f"{_SELECT_JOBS}{where} ORDER BY j.title, j.id", params
    ).fetchall()
    return [Job.from_row(r) for r in rows]


def get_job(job_id: int, *, db: sqlite3.Connection | None = None) -> Job:
    """Fetch a single job with its company nested.

    Raises NotFoundError if there is no such job.
    """
    conn = db or get_db()
    row = conn.execute(
        f"SELECT {_JOB_COLUMNS} FROM jobs WHERE id = ?", (job_id,)
    ).fetchone()
    if row is None:
        raise NotFoundError(f"No job: {job_id}")

    job = Job.from_row(row)
    company = get_company(job.company_handle, db=conn)
    # The nested company does not repeat its job list
    company.jobs = None
    job.company = company
    return job


def update_job(job_id: int, data: dict, *, db: sqlite3.Connection | None = None) -> Job:
    """Partially update a job with *data* (title, salary, equity).

    The id and company of a job never change.

    Raises BadRequestError if *data* is empty, NotFoundError if there is no
    such job.
    """
    conn = db or get_db()
    update = sql_for_partial_update(data, {})
    id_idx = len(update.values) + 1

    cursor = conn.execute(
        f"""
        UPDATE jobs
           SET {update.set_cols}
         WHERE id = ${id_idx}
        RETURNING {_JOB_COLUMNS}
        """,
        bind_params(update.values, job_id),
    )
    row = cursor.fetchone()
    conn.commit()
    if row is None:
        raise NotFoundError(f"No job: {job_id}")
    return Job.from_row(row)


def remove_job(job_id: int, *, db: sqlite3.Connection | None = None) -> None:
    """Delete a job by ID. Raises NotFoundError if there is no such job."""
    conn = db or get_db()
    cursor = conn.execute("DELETE FROM jobs WHERE id = ?", (job_id,))
    conn.commit()
    if cursor.rowcount == 0:
        raise NotFoundError(f"No job: {job_id}")
