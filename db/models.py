"""Dataclasses for database entities.

Attribute names follow the columns; ``to_json()`` gives the camelCase shape
the API returns.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass


def _from_row(cls, row):
    """Create a dataclass instance from a sqlite3.Row, ignoring extra columns."""
    known = {f.name for f in dataclasses.fields(cls)}
    return cls(**{k: row[k] for k in row.keys() if k in known})


@dataclass
class Company:
    handle: str = ""
    name: str = ""
    description: str = ""
    num_employees: int | None = None
    logo_url: str | None = None
    jobs: list[JobSummary] | None = None  # populated by get_company()

    @classmethod
    def from_row(cls, row) -> Company:
        return _from_row(cls, row)

    def to_json(self) -> dict:
        data = {
            "handle": self.handle,
            "name": self.name,
            "description": self.description,
            "numEmployees": self.num_employees,
            "logoUrl": self.logo_url,
        }
        if self.jobs is not None:
            data["jobs"] = [j.to_json() for j in self.jobs]
        return data


@dataclass
class JobSummary:
    """A job as listed under its company."""

    id: int | None = None
    title: str = ""
    salary: int | None = None
    equity: float | None = None

    @classmethod
    def from_row(cls, row) -> JobSummary:
        return _from_row(cls, row)

    def to_json(self) -> dict:
        return dataclasses.asdict(self)


@dataclass
class Job:
    id: int | None = None
    title: str = ""
    salary: int | None = None
    equity: float | None = None
    company_handle: str | None = None
    company_name: str | None = None  # populated from JOIN with companies
    company: Company | None = None   # populated by get_job()

    @classmethod
    def from_row(cls, row) -> Job:
        return _from_row(cls, row)

    def to_json(self) -> dict:
        data = {
            "id": self.id,
            "title": self.title,
            "salary": self.salary,
            "equity": self.equity,
        }
        if self.company is not None:
            data["company"] = self.company.to_json()
        else:
            data["companyHandle"] = self.company_handle
        if self.company_name is not None:
            data["companyName"] = self.company_name
        return data


@dataclass
class User:
    username: str = ""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    is_admin: bool = False
    jobs: list[int] | None = None  # job ids applied to, populated by get_user()

    @classmethod
    def from_row(cls, row) -> User:
        user = _from_row(cls, row)
        # sqlite stores booleans as 0/1
        user.is_admin = bool(user.is_admin)
        return user

    def to_json(self) -> dict:
        data = {
            "username": self.username,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "isAdmin": self.is_admin,
        }
        if self.jobs is not None:
            data["jobs"] = list(self.jobs)
        return data
