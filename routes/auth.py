"""Routes for authentication."""

from __future__ import annotations

from flask import Blueprint, jsonify, request

from db.users import authenticate, register
from helpers.tokens import create_token
from schemas import UserAuth, UserRegister, validate

from . import conn

bp = Blueprint("auth", __name__, url_prefix="/auth")


@bp.route("/token", methods=["POST"])
def token():
    """POST /auth/token: { username, password } => { token }

    Authorization required: none
    """
    data = validate(UserAuth, request.get_json(silent=True))
    user = authenticate(data.username, data.password, db=conn())
    return jsonify({"token": create_token(user)})


@bp.route("/register", methods=["POST"])
def register_user():
    """POST /auth/register: { user } => { token }

    user must include { username, password, firstName, lastName, email }.
    New users are never admins.

    Authorization required: none
    """
    data = validate(UserRegister, request.get_json(silent=True))
    user = register(
        data.username,
        data.password,
        data.first_name,
        data.last_name,
        data.email,
        is_admin=False,
        db=conn(),
    )
    return jsonify({"token": create_token(user)}), 201
