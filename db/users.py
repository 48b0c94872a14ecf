"""CRUD operations for the users and applications tables."""

from __future__ import annotations

import logging
import sqlite3

import bcrypt

from config import BCRYPT_WORK_FACTOR
from errors import BadRequestError, NotFoundError, UnauthorizedError
from helpers.sql import bind_params, sql_for_partial_update

from .connection import get_db
from .models import User

logger = logging.getLogger(__name__)

_USER_COLUMNS = "username, first_name, last_name, email, is_admin"


def hash_password(password: str) -> str:
    # bcrypt only looks at the first 72 bytes
    hashed = bcrypt.hashpw(
        password.encode("utf-8")[:72], bcrypt.gensalt(rounds=BCRYPT_WORK_FACTOR)
    )
    return hashed.decode("utf-8")


def check_password(password: str, hashed: str) -> bool:
    return bcrypt.checkpw(password.encode("utf-8")[:72], hashed.encode("utf-8"))


def authenticate(
    username: str, password: str, *, db: sqlite3.Connection | None = None
) -> User:
    """Return the user if *password* matches.

    Raises UnauthorizedError if the user is not found or the password is wrong.
    """
    conn = db or get_db()
    row = conn.execute(
        f"SELECT password, {_USER_COLUMNS} FROM users WHERE username = ?",
        (username,),
    ).fetchone()

    if row is not None and check_password(password, row["password"]):
        return User.from_row(row)

    logger.info("Failed login for %s", username)
    raise UnauthorizedError("Invalid username/password")


def register(
    username: str,
    password: str,
    first_name: str,
    last_name: str,
    email: str,
    *,
    is_admin: bool = False,
    db: sqlite3.Connection | None = None,
) -> User:
    """Create a user with a hashed password.

    Raises BadRequestError on a duplicate username.
    """
    conn = db or get_db()
    duplicate = conn.execute(
        "SELECT username FROM users WHERE username = ?", (username,)
    ).fetchone()
    if duplicate:
        raise BadRequestError(f"Duplicate username: {username}")

    cursor = conn.execute(
        f"""
        INSERT INTO users (username, password, first_name, last_name, email, is_admin)
        VALUES (?, ?, ?, ?, ?, ?)
        RETURNING {_USER_COLUMNS}
        """,
        (username, hash_password(password), first_name, last_name, email, is_admin),
    )
    row = cursor.fetchone()
    conn.commit()
    return User.from_row(row)


def find_all_users(*, db: sqlite3.Connection | None = None) -> list[User]:
    """List all users ordered by username."""
    conn = db or get_db()
    rows = conn.execute(
        f"SELECT {_USER_COLUMNS} FROM users ORDER BY username"
    ).fetchall()
    return [User.from_row(r) for r in rows]


def get_user(username: str, *, db: sqlite3.Connection | None = None) -> User:
    """Fetch a user with the ids of the jobs they applied to.

    Raises NotFoundError if there is no such user.
    """
    conn = db or get_db()
    row = conn.execute(
        f"SELECT {_USER_COLUMNS} FROM users WHERE username = ?", (username,)
    ).fetchone()
    if row is None:
        raise NotFoundError(f"No user: {username}")

    user = User.from_row(row)
    applied = conn.execute(
        "SELECT job_id FROM applications WHERE username = ? ORDER BY job_id",
        (username,),
    ).fetchall()
    user.jobs = [r["job_id"] for r in applied]
    return user


def update_user(
    username: str, data: dict, *, db: sqlite3.Connection | None = None
) -> User:
    """Partially update a user with *data*.

    *data* may include firstName, lastName, password, email and isAdmin;
    a new password is hashed before it is stored.

    WARNING: this can set a new password or make a user an admin. Callers
    must validate *data* first.

    Raises BadRequestError if *data* is empty, NotFoundError if there is no
    such user.
    """
    conn = db or get_db()
    data = dict(data)
    if data.get("password"):
        data["password"] = hash_password(data["password"])

    update = sql_for_partial_update(
        data,
        {
            "firstName": "first_name",
            "lastName": "last_name",
            "isAdmin": "is_admin",
        },
    )
    username_idx = len(update.values) + 1

    cursor = conn.execute(
        f"""
        UPDATE users
           SET {update.set_cols}
         WHERE username = ${username_idx}
        RETURNING {_USER_COLUMNS}
        """,
        bind_params(update.values, username),
    )
    row = cursor.fetchone()
    conn.commit()
    if row is None:
        raise NotFoundError(f"No user: {username}")
    return User.from_row(row)


def remove_user(username: str, *, db: sqlite3.Connection | None = None) -> None:
    """Delete a user. Raises NotFoundError if there is no such user."""
    conn = db or get_db()
    cursor = conn.execute("DELETE FROM users WHERE username = ?", (username,))
    conn.commit()
    if cursor.rowcount == 0:
        raise NotFoundError(f"No user: {username}")


def apply_to_job(
    username: str, job_id: int, *, db: sqlite3.Connection | None = None
) -> None:
    """Record that *username* applied to *job_id*.

    Raises NotFoundError if the job or the user does not exist, and
    BadRequestError if the user already applied.
    """
    conn = db or get_db()
    job = conn.execute("SELECT id FROM jobs WHERE id = ?", (job_id,)).fetchone()
    if job is None:
        raise NotFoundError(f"No job: {job_id}")

    user = conn.execute(
        "SELECT username FROM users WHERE username = ?", (username,)
    ).fetchone()
    if user is None:
        raise NotFoundError(f"No username: {username}")

    try:
        conn.execute(
            "INSERT INTO applications (username, job_id) VALUES (?, ?)",
            (username, job_id),
        )
    except sqlite3.IntegrityError as e:
        conn.rollback()
        raise BadRequestError(f"Already applied: {username} to job {job_id}") from e
    conn.commit()
