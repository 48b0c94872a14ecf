"""Smoke test for the database module.

Run: pytest db/smoke_test.py
"""

import pytest

from db.companies import (
    create_company,
    find_all_companies,
    get_company,
    remove_company,
    update_company,
)
from db.jobs import create_job, find_all_jobs, get_job, remove_job, update_job
from db.users import (
    apply_to_job,
    authenticate,
    find_all_users,
    get_user,
    register,
    remove_user,
    update_user,
)
from errors import BadRequestError, NotFoundError, UnauthorizedError


def test_tables_created(conn):
    tables = {
        r["name"]
        for r in conn.execute(
            "SELECT name FROM sqlite_master WHERE type='table'"
        ).fetchall()
    }
    expected = {"applications", "companies", "jobs", "users"}
    assert expected.issubset(tables), f"Missing tables: {expected - tables}"


def test_connection_pragmas(conn):
    assert conn.execute("PRAGMA journal_mode").fetchone()[0] == "wal"
    assert conn.execute("PRAGMA foreign_keys").fetchone()[0] == 1


# ----------------------------------------------------------
# Companies
# ----------------------------------------------------------

def test_create_company(conn):
    company = create_company(
        "new", "New", description="New Description", num_employees=1,
        logo_url="http://new.img", db=conn,
    )
    assert company.handle == "new"
    assert company.to_json() == {
        "handle": "new",
        "name": "New",
        "description": "New Description",
        "numEmployees": 1,
        "logoUrl": "http://new.img",
    }

    with pytest.raises(BadRequestError):
        create_company("new", "Other", db=conn)


def test_create_company_duplicate_name(seeded):
    conn = seeded["conn"]
    with pytest.raises(BadRequestError, match="Duplicate company name: C1"):
        create_company("zz", "C1", db=conn)
    assert not conn.in_transaction
    with pytest.raises(NotFoundError):
        get_company("zz", db=conn)


def test_find_all_companies_filters(seeded):
    conn = seeded["conn"]
    assert [c.handle for c in find_all_companies(db=conn)] == ["c1", "c2", "c3"]
    assert [c.handle for c in find_all_companies(min_employees=2, db=conn)] == ["c2", "c3"]
    assert [c.handle for c in find_all_companies(max_employees=1, db=conn)] == ["c1"]
    assert [c.handle for c in find_all_companies(name_like="c2", db=conn)] == ["c2"]
    assert find_all_companies(name_like="nope", db=conn) == []

    with pytest.raises(BadRequestError):
        find_all_companies(min_employees=3, max_employees=1, db=conn)


def test_get_company_with_jobs(seeded):
    conn = seeded["conn"]
    company = get_company("c1", db=conn)
    assert [j.title for j in company.jobs] == ["J1", "J2", "J3"]
    assert get_company("c2", db=conn).jobs == []

    with pytest.raises(NotFoundError):
        get_company("nope", db=conn)


def test_update_company(seeded):
    conn = seeded["conn"]
    company = update_company(
        "c1", {"name": "New", "numEmployees": 10, "logoUrl": None}, db=conn
    )
    assert company.name == "New"
    assert company.num_employees == 10
    assert company.logo_url is None
    # untouched fields are preserved
    assert company.description == "Desc1"

    with pytest.raises(NotFoundError):
        update_company("nope", {"name": "x"}, db=conn)
    with pytest.raises(BadRequestError):
        update_company("c1", {}, db=conn)


def test_update_company_duplicate_name(seeded):
    conn = seeded["conn"]
    with pytest.raises(BadRequestError, match="Duplicate company name: C1"):
        update_company("c2", {"name": "C1"}, db=conn)
    assert not conn.in_transaction
    assert get_company("c2", db=conn).name == "C2"


def test_remove_company_cascades_to_jobs(seeded):
    conn = seeded["conn"]
    remove_company("c1", db=conn)
    with pytest.raises(NotFoundError):
        get_company("c1", db=conn)
    assert find_all_jobs(db=conn) == []

    with pytest.raises(NotFoundError):
        remove_company("c1", db=conn)


# ----------------------------------------------------------
# Jobs
# ----------------------------------------------------------

def test_create_job(seeded):
    conn = seeded["conn"]
    job = create_job("Test", "c2", salary=100, equity=0.5, db=conn)
    assert job.id is not None
    assert job.to_json() == {
        "id": job.id,
        "title": "Test",
        "salary": 100,
        "equity": 0.5,
        "companyHandle": "c2",
    }

    with pytest.raises(BadRequestError):
        create_job("Test", "nope", db=conn)


def test_find_all_jobs_filters(seeded):
    conn = seeded["conn"]
    jobs = find_all_jobs(db=conn)
    assert [j.title for j in jobs] == ["J1", "J2", "J3"]
    assert jobs[0].company_name == "C1"

    assert [j.title for j in find_all_jobs(min_salary=2, db=conn)] == ["J2", "J3"]
    assert [j.title for j in find_all_jobs(has_equity=True, db=conn)] == ["J1", "J2"]
    assert [j.title for j in find_all_jobs(title="j1", db=conn)] == ["J1"]
    assert [
        j.title for j in find_all_jobs(min_salary=2, has_equity=True, db=conn)
    ] == ["J2"]


def test_get_job_nests_company(seeded):
    conn = seeded["conn"]
    job = get_job(seeded["job_ids"][0], db=conn)
    data = job.to_json()
    assert data["title"] == "J1"
    assert data["company"]["handle"] == "c1"
    assert "jobs" not in data["company"]
    assert "companyHandle" not in data

    with pytest.raises(NotFoundError):
        get_job(0, db=conn)


def test_update_job(seeded):
    conn = seeded["conn"]
    job_id = seeded["job_ids"][0]
    job = update_job(job_id, {"title": "New", "salary": 500}, db=conn)
    assert (job.title, job.salary, job.equity) == ("New", 500, 0.1)
    assert job.company_handle == "c1"

    with pytest.raises(NotFoundError):
        update_job(0, {"title": "x"}, db=conn)
    with pytest.raises(BadRequestError):
        update_job(job_id, {}, db=conn)


def test_remove_job(seeded):
    conn = seeded["conn"]
    job_id = seeded["job_ids"][0]
    remove_job(job_id, db=conn)
    with pytest.raises(NotFoundError):
        get_job(job_id, db=conn)
    with pytest.raises(NotFoundError):
        remove_job(job_id, db=conn)


# ----------------------------------------------------------
# Users
# ----------------------------------------------------------

def test_authenticate(seeded):
    conn = seeded["conn"]
    user = authenticate("u1", "password1", db=conn)
    assert user.username == "u1"
    assert user.is_admin is True

    with pytest.raises(UnauthorizedError):
        authenticate("u1", "wrong", db=conn)
    with pytest.raises(UnauthorizedError):
        authenticate("nope", "password1", db=conn)


def test_register_hashes_password(conn):
    user = register("new", "password", "Test", "Tester", "test@test.com", db=conn)
    assert user.to_json() == {
        "username": "new",
        "firstName": "Test",
        "lastName": "Tester",
        "email": "test@test.com",
        "isAdmin": False,
    }
    stored = conn.execute(
        "SELECT password FROM users WHERE username = 'new'"
    ).fetchone()["password"]
    assert stored.startswith("$2b$")

    with pytest.raises(BadRequestError):
        register("new", "password", "Test", "Tester", "test@test.com", db=conn)


def test_find_all_and_get_user(seeded):
    conn = seeded["conn"]
    assert [u.username for u in find_all_users(db=conn)] == ["u1", "u2", "u3"]

    user = get_user("u2", db=conn)
    assert user.jobs == [seeded["job_ids"][0]]
    assert get_user("u3", db=conn).jobs == []

    with pytest.raises(NotFoundError):
        get_user("nope", db=conn)


def test_update_user(seeded):
    conn = seeded["conn"]
    user = update_user(
        "u2", {"firstName": "NewF", "email": "new@email.com", "isAdmin": True}, db=conn
    )
    assert user.first_name == "NewF"
    assert user.last_name == "U2L"
    assert user.email == "new@email.com"
    assert user.is_admin is True

    with pytest.raises(NotFoundError):
        update_user("nope", {"firstName": "x"}, db=conn)
    with pytest.raises(BadRequestError):
        update_user("u2", {}, db=conn)


def test_update_user_password(seeded):
    conn = seeded["conn"]
    data = {"password": "new-password"}
    update_user("u2", data, db=conn)
    # caller's dict is not rewritten with the hash
    assert data == {"password": "new-password"}
    assert authenticate("u2", "new-password", db=conn).username == "u2"


def test_remove_user(seeded):
    conn = seeded["conn"]
    remove_user("u2", db=conn)
    with pytest.raises(NotFoundError):
        get_user("u2", db=conn)
    with pytest.raises(NotFoundError):
        remove_user("u2", db=conn)


def test_apply_to_job(seeded):
    conn = seeded["conn"]
    job_ids = seeded["job_ids"]
    apply_to_job("u3", job_ids[1], db=conn)
    assert get_user("u3", db=conn).jobs == [job_ids[1]]

    with pytest.raises(BadRequestError):
        apply_to_job("u3", job_ids[1], db=conn)
    with pytest.raises(NotFoundError):
        apply_to_job("u3", 0, db=conn)
    with pytest.raises(NotFoundError):
        apply_to_job("nope", job_ids[1], db=conn)
