"""Flask blueprints for the jobly API."""

from __future__ import annotations

import sqlite3

from flask import current_app

from db import get_db


def conn() -> sqlite3.Connection:
    """Connection to the database configured on the running app."""
    return get_db(current_app.config["DATABASE"])
