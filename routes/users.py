"""Routes for users."""

from __future__ import annotations

from flask import Blueprint, jsonify, request

from auth import ensure_admin, ensure_correct_user_or_admin
from db.users import (
    apply_to_job,
    find_all_users,
    get_user,
    register,
    remove_user,
    update_user,
)
from helpers.tokens import create_token
from schemas import UserNew, UserUpdate, validate

from . import conn

bp = Blueprint("users", __name__, url_prefix="/users")


@bp.route("", methods=["POST"])
@ensure_admin
def create():
    """POST / { user } => { user, token }

    Adds a new user. This is not the registration endpoint: only admins can
    add users here, and the new user may be an admin.

    Authorization required: admin
    """
    data = validate(UserNew, request.get_json(silent=True))
    user = register(
        data.username,
        data.password,
        data.first_name,
        data.last_name,
        data.email,
        is_admin=data.is_admin,
        db=conn(),
    )
    return jsonify({"user": user.to_json(), "token": create_token(user)}), 201


@bp.route("", methods=["GET"])
@ensure_admin
def list_all():
    """GET / => { users: [ { username, firstName, lastName, email, isAdmin }, ... ] }

    Authorization required: admin
    """
    users = find_all_users(db=conn())
    return jsonify({"users": [u.to_json() for u in users]})


@bp.route("/<username>", methods=["GET"])
@ensure_correct_user_or_admin
def get(username):
    """GET /[username] => { user }

    user is { username, firstName, lastName, email, isAdmin, jobs }
    where jobs is the list of job ids applied to.

    Authorization required: admin or same user as :username
    """
    user = get_user(username, db=conn())
    return jsonify({"user": user.to_json()})


@bp.route("/<username>", methods=["PATCH"])
@ensure_correct_user_or_admin
def update(username):
    """PATCH /[username] { user } => { user }

    Data can include: { firstName, lastName, password, email }

    Authorization required: admin or same user as :username
    """
    data = validate(UserUpdate, request.get_json(silent=True))
    user = update_user(username, data.model_dump(exclude_unset=True), db=conn())
    return jsonify({"user": user.to_json()})


@bp.route("/<username>", methods=["DELETE"])
@ensure_correct_user_or_admin
def delete(username):
    """DELETE /[username] => { deleted: username }

    Authorization required: admin or same user as :username
    """
    remove_user(username, db=conn())
    return jsonify({"deleted": username})


@bp.route("/<username>/jobs/<int:job_id>", methods=["POST"])
@ensure_correct_user_or_admin
def apply(username, job_id):
    """POST /[username]/jobs/[id] => { applied: jobId }

    Authorization required: admin or same user as :username
    """
    apply_to_job(username, job_id, db=conn())
    return jsonify({"applied": job_id})
