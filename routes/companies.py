"""Routes for companies."""

from __future__ import annotations

from flask import Blueprint, jsonify, request

from auth import ensure_admin
from db.companies import (
    create_company,
    find_all_companies,
    get_company,
    remove_company,
    update_company,
)
from schemas import CompanyNew, CompanySearch, CompanyUpdate, validate

from . import conn

bp = Blueprint("companies", __name__, url_prefix="/companies")


@bp.route("", methods=["POST"])
@ensure_admin
def create():
    """POST / { company } => { company }

    company should be { handle, name, description, numEmployees, logoUrl }

    Authorization required: admin
    """
    data = validate(CompanyNew, request.get_json(silent=True))
    company = create_company(
        data.handle,
        data.name,
        description=data.description,
        num_employees=data.num_employees,
        logo_url=data.logo_url,
        db=conn(),
    )
    return jsonify({"company": company.to_json()}), 201


@bp.route("", methods=["GET"])
def list_all():
    """GET / => { companies: [ { handle, name, description, numEmployees, logoUrl }, ...] }

    Can filter on minEmployees, maxEmployees and nameLike (case-insensitive,
    partial match).

    Authorization required: none
    """
    q = validate(CompanySearch, request.args.to_dict())
    companies = find_all_companies(
        min_employees=q.min_employees,
        max_employees=q.max_employees,
        name_like=q.name_like,
        db=conn(),
    )
    return jsonify({"companies": [c.to_json() for c in companies]})


@bp.route("/<handle>", methods=["GET"])
def get(handle):
    """GET /[handle] => { company }

    company is { handle, name, description, numEmployees, logoUrl, jobs }
    where jobs is [{ id, title, salary, equity }, ...]

    Authorization required: none
    """
    company = get_company(handle, db=conn())
    return jsonify({"company": company.to_json()})


@bp.route("/<handle>", methods=["PATCH"])
@ensure_admin
def update(handle):
    """PATCH /[handle] { fld1, fld2, ... } => { company }

    fields can be: { name, description, numEmployees, logoUrl }

    Authorization required: admin
    """
    data = validate(CompanyUpdate, request.get_json(silent=True))
    company = update_company(handle, data.model_dump(exclude_unset=True), db=conn())
    return jsonify({"company": company.to_json()})


@bp.route("/<handle>", methods=["DELETE"])
@ensure_admin
def delete(handle):
    """DELETE /[handle] => { deleted: handle }

    Authorization required: admin
    """
    remove_company(handle, db=conn())
    return jsonify({"deleted": handle})
