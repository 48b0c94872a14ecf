"""Shared pytest fixtures: an app on a temporary database, seeded with data."""

import os

# Must be set before config is imported: selects the cheap bcrypt work factor
os.environ["JOBLY_ENV"] = "test"

import pytest

from app import create_app
from db.companies import create_company
from db.connection import close_db, init_db
from db.jobs import create_job
from db.users import apply_to_job, register
from helpers.tokens import create_token


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "jobly_test.db"


@pytest.fixture
def conn(db_path):
    """An initialized, empty database."""
    connection = init_db(db_path)
    yield connection
    close_db()


@pytest.fixture
def seeded(conn):
    """Three companies, three jobs and three users (u1 is an admin, u2 applied to j1)."""
    for n in (1, 2, 3):
        create_company(
            f"c{n}",
            f"C{n}",
            description=f"Desc{n}",
            num_employees=n,
            logo_url=f"http://c{n}.img",
            db=conn,
        )

    job_ids = [
        create_job("J1", "c1", salary=1, equity=0.1, db=conn).id,
        create_job("J2", "c1", salary=2, equity=0.2, db=conn).id,
        create_job("J3", "c1", salary=3, equity=0, db=conn).id,
    ]

    for n in (1, 2, 3):
        register(
            f"u{n}",
            f"password{n}",
            f"U{n}F",
            f"U{n}L",
            f"user{n}@user.com",
            is_admin=(n == 1),
            db=conn,
        )
    apply_to_job("u2", job_ids[0], db=conn)

    return {"conn": conn, "job_ids": job_ids}


@pytest.fixture
def app(db_path, seeded):
    return create_app(db_path)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_token():
    return create_token({"username": "u1", "isAdmin": True})


@pytest.fixture
def u2_token():
    return create_token({"username": "u2", "isAdmin": False})