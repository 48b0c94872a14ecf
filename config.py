"""Shared configuration, read from the environment (and an optional .env) once at import."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).resolve().parent

# Values already in the environment win over .env
load_dotenv(ROOT / ".env")

SECRET_KEY = os.environ.get("SECRET_KEY", "secret-dev")
JWT_ALGORITHM = "HS256"

PORT = int(os.environ.get("PORT", "3001"))

JOBLY_ENV = os.environ.get("JOBLY_ENV", "development")
TESTING = JOBLY_ENV == "test"

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# bcrypt refuses fewer than 4 rounds
BCRYPT_WORK_FACTOR = 4 if TESTING else 12


def get_database_path() -> Path:
    """Use the test database under JOBLY_ENV=test, else DATABASE_PATH or the default."""
    if TESTING:
        return ROOT / "jobly_test.db"
    return Path(os.environ.get("DATABASE_PATH", ROOT / "jobly.db"))
