"""Routes for jobs."""

from __future__ import annotations

from flask import Blueprint, jsonify, request

from auth import ensure_admin
from db.jobs import create_job, find_all_jobs, get_job, remove_job, update_job
from schemas import JobNew, JobSearch, JobUpdate, validate

from . import conn

bp = Blueprint("jobs", __name__, url_prefix="/jobs")


@bp.route("", methods=["POST"])
@ensure_admin
def create():
    """POST / { job } => { job }

    job should be { title, salary, equity, companyHandle }

    Authorization required: admin
    """
    data = validate(JobNew, request.get_json(silent=True))
    job = create_job(
        data.title,
        data.company_handle,
        salary=data.salary,
        equity=data.equity,
        db=conn(),
    )
    return jsonify({"job": job.to_json()}), 201


@bp.route("", methods=["GET"])
def list_all():
    """GET / => { jobs: [ { id, title, salary, equity, companyHandle, companyName }, ...] }

    Can filter on minSalary, hasEquity (only "true" filters; other values are
    ignored) and title (case-insensitive, partial match).

    Authorization required: none
    """
    args = request.args.to_dict()
    args["hasEquity"] = args.get("hasEquity") == "true"
    q = validate(JobSearch, args)
    jobs = find_all_jobs(
        min_salary=q.min_salary,
        has_equity=q.has_equity,
        title=q.title,
        db=conn(),
    )
    return jsonify({"jobs": [j.to_json() for j in jobs]})


@bp.route("/<int:job_id>", methods=["GET"])
def get(job_id):
    """GET /[jobId] => { job }

    job is { id, title, salary, equity, company }
    where company is { handle, name, description, numEmployees, logoUrl }

    Authorization required: none
    """
    job = get_job(job_id, db=conn())
    return jsonify({"job": job.to_json()})


@bp.route("/<int:job_id>", methods=["PATCH"])
@ensure_admin
def update(job_id):
    """PATCH /[jobId] { fld1, fld2, ... } => { job }

    Data can include: { title, salary, equity }

    Authorization required: admin
    """
    data = validate(JobUpdate, request.get_json(silent=True))
    job = update_job(job_id, data.model_dump(exclude_unset=True), db=conn())
    return jsonify({"job": job.to_json()})


@bp.route("/<int:job_id>", methods=["DELETE"])
@ensure_admin
def delete(job_id):
    """DELETE /[jobId] => { deleted: id }

    Authorization required: admin
    """
    remove_job(job_id, db=conn())
    return jsonify({"deleted": job_id})
