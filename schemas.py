"""Request-body and query-string schemas.

Every model forbids unknown fields. Body models are strict; query-string
models coerce, since query values always arrive as text. Update models are dumped with
``exclude_unset=True`` so only the supplied fields are changed.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from errors import BadRequestError

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


def _not_null(value):
    # Omitting a field leaves it unchanged; an explicit null is an error
    if value is None:
        raise ValueError("may not be null")
    return value


class Schema(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class Body(Schema):
    # JSON bodies carry real types; "7" is not an integer here
    model_config = ConfigDict(strict=True)


# --- users ---

class UserAuth(Body):
    username: str = Field(min_length=1, max_length=25)
    password: str = Field(min_length=1, max_length=20)


class UserRegister(Body):
    username: str = Field(min_length=1, max_length=25)
    password: str = Field(min_length=5, max_length=20)
    first_name: str = Field(alias="firstName", min_length=1, max_length=30)
    last_name: str = Field(alias="lastName", min_length=1, max_length=30)
    email: str = Field(min_length=6, max_length=60, pattern=EMAIL_PATTERN)


class UserNew(UserRegister):
    is_admin: bool = Field(default=False, alias="isAdmin")


class UserUpdate(Body):
    firstName: Optional[str] = Field(default=None, min_length=1, max_length=30)
    lastName: Optional[str] = Field(default=None, min_length=1, max_length=30)
    password: Optional[str] = Field(default=None, min_length=5, max_length=20)
    email: Optional[str] = Field(
        default=None, min_length=6, max_length=60, pattern=EMAIL_PATTERN
    )

    @field_validator("firstName", "lastName", "password", "email")
    @classmethod
    def not_null(cls, value):
        return _not_null(value)


# --- companies ---

class CompanyNew(Body):
    handle: str = Field(min_length=1, max_length=25)
    name: str = Field(min_length=1)
    description: str = ""
    num_employees: Optional[int] = Field(default=None, alias="numEmployees", ge=0)
    logo_url: Optional[str] = Field(default=None, alias="logoUrl")


class CompanyUpdate(Body):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    numEmployees: Optional[int] = Field(default=None, ge=0)
    logoUrl: Optional[str] = None

    @field_validator("name", "description")
    @classmethod
    def not_null(cls, value):
        return _not_null(value)


class CompanySearch(Schema):
    min_employees: Optional[int] = Field(default=None, alias="minEmployees", ge=0)
    max_employees: Optional[int] = Field(default=None, alias="maxEmployees", ge=0)
    name_like: Optional[str] = Field(default=None, alias="nameLike", min_length=1)


# --- jobs ---

class JobNew(Body):
    title: str = Field(min_length=1)
    salary: Optional[int] = Field(default=None, ge=0)
    equity: Optional[float] = Field(default=None, ge=0, le=1)
    company_handle: str = Field(alias="companyHandle", min_length=1, max_length=25)


class JobUpdate(Body):
    title: Optional[str] = Field(default=None, min_length=1)
    salary: Optional[int] = Field(default=None, ge=0)
    equity: Optional[float] = Field(default=None, ge=0, le=1)

    @field_validator("title")
    @classmethod
    def not_null(cls, value):
        return _not_null(value)


class JobSearch(Schema):
    min_salary: Optional[int] = Field(default=None, alias="minSalary", ge=0)
    has_equity: bool = Field(default=False, alias="hasEquity")
    title: Optional[str] = Field(default=None, min_length=1)


def validate(schema: type[Schema], data) -> Schema:
    """Validate *data* against *schema*, raising BadRequestError with every failure."""
    if not isinstance(data, dict):
        raise BadRequestError(["request body must be a JSON object"])
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        errs = [
            f"{'.'.join(str(p) for p in err['loc']) or 'body'}: {err['msg']}"
            for err in e.errors()
        ]
        raise BadRequestError(errs) from e
