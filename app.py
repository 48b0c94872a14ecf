#!/usr/bin/env python3
"""Flask application for the jobly job-board API.

Provides JSON endpoints to:
- Register and log in (JWT tokens)
- Manage companies, jobs and users
- Apply to jobs

Usage:
    python app.py
    # Then call http://localhost:3001/companies
"""

from __future__ import annotations

import logging
import sys
import time

from flask import Flask, g, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

import config
from auth import authenticate_jwt
from db.connection import init_db
from errors import JoblyError, NotFoundError
from routes import auth as auth_routes
from routes import companies, jobs, users

logger = logging.getLogger("jobly")


def configure_logging(level: str = config.LOG_LEVEL) -> None:
    """Send log records to stdout in a single pipe-separated format."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )


def _start_timer():
    g.start = time.perf_counter()


def _log_request(response):
    """One access line per request: METHOD path status length - ms."""
    elapsed = (time.perf_counter() - g.get("start", time.perf_counter())) * 1000
    logger.info(
        "%s %s %s %s - %.3f ms",
        request.method,
        request.path,
        response.status_code,
        response.content_length or "-",
        elapsed,
    )
    return response


def _handle_jobly_error(err: JoblyError):
    return jsonify(err.to_json()), err.status


def _handle_http_error(err: HTTPException):
    # Unknown routes and wrong methods use the same envelope
    if err.code == 404:
        return _handle_jobly_error(NotFoundError())
    return jsonify({"error": {"message": err.description, "status": err.code}}), err.code


def _handle_unexpected_error(err: Exception):
    if not config.TESTING:
        logger.exception("Unhandled error on %s %s", request.method, request.path)
    return jsonify({"error": {"message": str(err), "status": 500}}), 500


def create_app(db_path=None) -> Flask:
    """Build the app. *db_path* overrides the configured database file."""
    app = Flask(__name__)
    app.config["DATABASE"] = str(db_path or config.get_database_path())
    app.config["SECRET_KEY"] = config.SECRET_KEY

    init_db(app.config["DATABASE"])

    CORS(app)

    app.before_request(_start_timer)
    app.before_request(authenticate_jwt)
    app.after_request(_log_request)

    app.register_blueprint(auth_routes.bp)
    app.register_blueprint(companies.bp)
    app.register_blueprint(users.bp)
    app.register_blueprint(jobs.bp)

    app.register_error_handler(JoblyError, _handle_jobly_error)
    app.register_error_handler(HTTPException, _handle_http_error)
    app.register_error_handler(Exception, _handle_unexpected_error)

    return app


if __name__ == '__main__':
    configure_logging()
    create_app().run(port=config.PORT)
